"""Domain layer: entities, value objects, events and domain services."""
