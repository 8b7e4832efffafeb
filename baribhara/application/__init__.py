"""Application layer: resource services, ports and DTOs."""
