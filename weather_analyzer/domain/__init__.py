"""Domain layer: entities, repository interfaces and use cases."""
