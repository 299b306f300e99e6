"""Use cases of the properties app: DTOs, assembler and the service facade."""
