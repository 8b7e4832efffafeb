"""Infrastructure layer: persistence, cache, messaging, security."""
