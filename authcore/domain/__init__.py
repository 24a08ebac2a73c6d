"""Domain layer: entities, value objects and policies with no I/O."""
