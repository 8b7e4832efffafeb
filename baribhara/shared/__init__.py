"""Shared utilities used across layers (time helpers, logging setup)."""
