"""
Value objects for the catalog domain.

Value objects carry no identity beyond their content: two instances are
equal when they are of the same concrete class and all of their
attributes are equal.
"""

import re
import uuid
from dataclasses import dataclass, field
from typing import Any

from .exceptions import InvalidUuidError


class ValueObject:
    """
    Base class for immutable, content-compared domain values.

    Equality compares every own attribute of both instances, so lists
    and nested value objects are compared element by element. Concrete
    value objects are declared as frozen dataclasses.
    """

    def equals(self, other: Any) -> bool:
        """
        Compare this value object with another one by content.

        Args:
            other: Object to compare against

        Returns:
            True if other has the same class and equal attributes
        """
        if other is None or type(other) is not type(self):
            return False
        return vars(self) == vars(other)

    def __eq__(self, other: Any) -> bool:
        return self.equals(other)

    def __ne__(self, other: Any) -> bool:
        return not self.equals(other)

    def __hash__(self) -> int:
        return hash((type(self), _freeze(vars(self))))


def _freeze(value: Any) -> Any:
    """Turn lists, dicts and sets into hashable equivalents, recursively."""
    if isinstance(value, dict):
        return frozenset((key, _freeze(item)) for key, item in value.items())
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(item) for item in value)
    if isinstance(value, (set, frozenset)):
        return frozenset(_freeze(item) for item in value)
    return value


@dataclass(frozen=True, eq=False)
class Uuid(ValueObject):
    """
    Identifier value object wrapping a canonical 36-character UUID string.

    A fresh random UUID is generated when no value is supplied.
    """

    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    UUID_PATTERN = re.compile(
        r"[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
        re.IGNORECASE,
    )

    def __post_init__(self):
        """Validate the identifier on creation."""
        self.validate()

    def validate(self) -> None:
        if not isinstance(self.id, str) or not self.UUID_PATTERN.fullmatch(self.id):
            raise InvalidUuidError(self.id)

    def __str__(self) -> str:
        return self.id
