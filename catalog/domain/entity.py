"""
Entity base class.

An entity keeps a stable identity across mutation. Its identity is a
value object, so two entity instances refer to the same thing when their
identities are equal.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict

from .value_objects import ValueObject


class Entity(ABC):
    """Abstract entity with a value-object identity and a plain-dict projection."""

    @property
    @abstractmethod
    def entity_id(self) -> ValueObject:
        """Identity value object of this entity."""
        pass

    @abstractmethod
    def to_dict(self) -> Dict[str, Any]:
        """Serialize the entity to a plain dictionary."""
        pass
