"""Adapters of the properties app: ORM repository, peer clients, cache."""
