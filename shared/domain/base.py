"""
Base Domain Classes

Foundational building blocks shared by the domain packages:
- Entity: Objects with unique identity
- Aggregate: Consistency boundary that owns child entities

Identity is assigned by the persistence layer, so a freshly built
entity carries ``id = None`` until it has been saved once.
"""

from abc import ABC
from dataclasses import dataclass
from datetime import datetime
from typing import Optional
from uuid import UUID


@dataclass(eq=False)
class Entity(ABC):
    """
    Base class for all entities

    Entities have unique identity and are mutable.
    Two entities are equal if their IDs are equal and both are persisted.
    """

    id: Optional[UUID] = None

    @property
    def is_new(self) -> bool:
        return self.id is None

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return id(self)
        return hash(self.id)


@dataclass(eq=False)
class Aggregate(Entity):
    """
    Base class for aggregate roots

    Aggregates are the consistency boundaries in DDD. Child entities
    never outlive their root and are persisted together with it.
    """

    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
