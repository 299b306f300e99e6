"""Domain apps of the property service."""
