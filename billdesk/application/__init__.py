"""Application layer: gateway ports and services."""
