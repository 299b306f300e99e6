"""
Shared Kernel

Base classes and utilities shared by the domain apps: entity and
aggregate bases, the unit of work, and the API error mapping.
"""
