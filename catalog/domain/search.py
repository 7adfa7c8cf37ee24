"""
Search parameters and search results.

SearchParams turns raw, loosely-typed search input (query strings,
external payloads) into canonical values. Normalization never fails:
every malformed input has a single deterministic fallback.
"""

import math
from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Generic, List, Optional, TypeVar

from .value_objects import ValueObject

E = TypeVar("E")


class SortDirection(str, Enum):
    """Sort directions accepted by searchable repositories."""

    ASC = "asc"
    DESC = "desc"


MAX_SAFE_INTEGER = 2**53 - 1


def _to_positive_int(value: Any) -> Optional[int]:
    """
    Coerce a raw value to a positive integer.

    Values are read as double-precision floats: integers, integral
    floats/decimals and numeric strings (including exponent form such as
    ``"1e2"``) are accepted. Booleans, empty strings, non-numeric
    strings, containers, None, non-finite values and anything above
    MAX_SAFE_INTEGER are rejected.

    Args:
        value: Raw input value

    Returns:
        The positive integer, or None if the value does not qualify
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, int):
        number = value
    elif isinstance(value, (float, Decimal, str)):
        if isinstance(value, str):
            value = value.strip()
            if not value or "_" in value:
                return None
        try:
            float_value = float(value)
        except ValueError:
            return None
        if not math.isfinite(float_value) or not float_value.is_integer():
            return None
        number = int(float_value)
    else:
        return None

    if number <= 0 or number > MAX_SAFE_INTEGER:
        return None
    return number


def _stringify(value: Any) -> Optional[str]:
    """
    Render a raw value as the string used for sorting/filtering.

    None and the empty string mean "not set". Booleans render in lower
    case and integral floats without a fractional part, so that
    ``True -> "true"`` and ``2.0 -> "2"``.
    """
    if value is None or value == "":
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class SearchParams(ValueObject):
    """
    Canonical search parameters.

    Attributes:
        page: 1-based page index (default 1)
        per_page: Page size (default DEFAULT_PER_PAGE)
        sort: Sort field name, or None for no sort
        sort_dir: "asc"/"desc" when sort is set, None otherwise
        filter: Repository-defined filter string, or None
    """

    DEFAULT_PAGE = 1
    DEFAULT_PER_PAGE = 15

    def __init__(
        self,
        page: Any = None,
        per_page: Any = None,
        sort: Any = None,
        sort_dir: Any = None,
        filter: Any = None,
    ):
        self._page = self.DEFAULT_PAGE
        self._per_page = self.DEFAULT_PER_PAGE
        self._set_page(page)
        self._set_per_page(per_page)
        self._set_sort(sort)
        self._set_sort_dir(sort_dir)
        self._set_filter(filter)

    @property
    def page(self) -> int:
        return self._page

    @property
    def per_page(self) -> int:
        return self._per_page

    @property
    def sort(self) -> Optional[str]:
        return self._sort

    @property
    def sort_dir(self) -> Optional[SortDirection]:
        return self._sort_dir

    @property
    def filter(self) -> Optional[str]:
        return self._filter

    def _set_page(self, page: Any) -> None:
        self._page = _to_positive_int(page) or self.DEFAULT_PAGE

    def _set_per_page(self, per_page: Any) -> None:
        # True keeps the current value instead of coercing to 1
        if per_page is True:
            return
        self._per_page = _to_positive_int(per_page) or self._per_page

    def _set_sort(self, sort: Any) -> None:
        self._sort = _stringify(sort)

    def _set_sort_dir(self, sort_dir: Any) -> None:
        if self._sort is None:
            self._sort_dir = None
            return
        direction = (_stringify(sort_dir) or "").lower()
        if direction == SortDirection.DESC.value:
            self._sort_dir = SortDirection.DESC
        else:
            self._sort_dir = SortDirection.ASC

    def _set_filter(self, filter: Any) -> None:
        self._filter = _stringify(filter)

    def __repr__(self) -> str:
        return (
            f"SearchParams(page={self.page}, per_page={self.per_page}, "
            f"sort={self.sort!r}, sort_dir={self.sort_dir!r}, filter={self.filter!r})"
        )


@dataclass(frozen=True, eq=False)
class SearchResult(ValueObject, Generic[E]):
    """
    One page of search results with pagination metadata.

    ``last_page`` is ``ceil(total / per_page)``; an empty result
    (``total == 0``) therefore has ``last_page == 0``.
    """

    items: List[E]
    total: int
    current_page: int
    per_page: int
    last_page: int = field(init=False)

    def __post_init__(self):
        object.__setattr__(self, "last_page", math.ceil(self.total / self.per_page))

    def to_dict(self, force_entity: bool = False) -> Dict[str, Any]:
        """
        Convert to dictionary.

        Args:
            force_entity: Replace every item by its ``to_dict()`` projection

        Returns:
            Dictionary with items and pagination metadata
        """
        return {
            "items": (
                [item.to_dict() for item in self.items]  # type: ignore[attr-defined]
                if force_entity
                else self.items
            ),
            "total": self.total,
            "current_page": self.current_page,
            "per_page": self.per_page,
            "last_page": self.last_page,
        }
