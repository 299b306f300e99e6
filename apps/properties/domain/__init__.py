"""Domain layer of the properties app: entities and errors, no Django imports."""
