"""
Base Domain Classes

Building blocks for the domain layer:
- Entity: Objects with identity, compared by id
- ValueObject: Immutable objects compared by value

Entities are plain dataclasses. Persistence adapters map them to and from
Django models, so ``id`` stays ``None`` until the first save.
"""

from abc import ABC
from dataclasses import dataclass


@dataclass(kw_only=True)
class Entity(ABC):
    """
    Base class for all entities

    Two saved entities are equal if their IDs are equal. Unsaved
    entities (``id is None``) are only equal to themselves.
    """
    id: int | None = None

    def __eq__(self, other):
        if not isinstance(other, self.__class__):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self):
        if self.id is None:
            return id(self)
        return hash((self.__class__.__name__, self.id))

    @property
    def is_persisted(self) -> bool:
        return self.id is not None


@dataclass(frozen=True)
class ValueObject(ABC):
    """
    Base class for value objects

    Value objects are immutable and have no identity.
    Two value objects are equal if all their attributes are equal.
    """
    pass
