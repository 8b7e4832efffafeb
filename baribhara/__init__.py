"""Baribhara directory services: users, properties, tenants and caretakers."""
