"""
In-memory implementation of the repository contracts.

Entities live in a plain list owned by the repository. Lookups return the
stored instances themselves (live references, not copies): mutating a
returned entity mutates the stored one.
"""

import logging
from abc import abstractmethod
from functools import cmp_to_key
from typing import Any, Callable, List, Optional

from ..domain.exceptions import NotFoundError
from ..domain.repository import ID, E, IRepository, ISearchableRepository
from ..domain.search import SearchParams, SearchResult, SortDirection
from ..domain.value_objects import ValueObject

logger = logging.getLogger(__name__)


class InMemoryRepository(IRepository[E, ID]):
    """
    In-memory CRUD repository keyed by entity identity.

    Attributes:
        items: Backing list of entities in insertion order
    """

    def __init__(self) -> None:
        self.items: List[E] = []

    async def insert(self, entity: E) -> None:
        """Append an entity to the backing list."""
        self.items.append(entity)
        logger.debug(f"Inserted {self._entity_name()} {entity.entity_id}")

    async def bulk_insert(self, entities: List[E]) -> None:
        """Append all entities, preserving their order."""
        self.items.extend(entities)
        logger.debug(f"Inserted {len(entities)} {self._entity_name()} entities")

    async def update(self, entity: E) -> None:
        """Replace the stored entity that has the same identity."""
        index = self._find_index_by_id(entity.entity_id)
        self.items[index] = entity
        logger.debug(f"Updated {self._entity_name()} {entity.entity_id}")

    async def delete(self, entity_id: ID) -> None:
        """Remove the entity with the given identity."""
        index = self._find_index_by_id(entity_id)
        del self.items[index]
        logger.debug(f"Deleted {self._entity_name()} {entity_id}")

    async def find_by_id(self, entity_id: ID) -> Optional[E]:
        """Find an entity by identity, returning None when absent."""
        for item in self.items:
            if item.entity_id.equals(entity_id):
                return item
        return None

    async def find_all(self) -> List[E]:
        """Return all stored entities in insertion order."""
        return list(self.items)

    def _find_index_by_id(self, entity_id: ValueObject) -> int:
        for index, item in enumerate(self.items):
            if item.entity_id.equals(entity_id):
                return index

        logger.warning(f"{self._entity_name()} {entity_id} not found")
        raise NotFoundError(entity_id, self.get_entity())

    def _entity_name(self) -> str:
        return self.get_entity().__name__


class InMemorySearchableRepository(InMemoryRepository[E, ID], ISearchableRepository[E, ID]):
    """
    In-memory repository with a filter -> sort -> paginate search pipeline.

    Subclasses declare ``sortable_fields`` and implement ``_matches_filter``;
    the pipeline itself knows nothing about filterable fields.
    """

    sortable_fields: List[str] = []

    async def search(self, params: SearchParams) -> SearchResult[E]:
        """
        Search stored entities.

        Filtering runs first, then sorting, then pagination. The result
        total counts the filtered items before pagination.

        Args:
            params: Normalized search parameters

        Returns:
            SearchResult with the requested page
        """
        items_filtered = await self._apply_filter(self.items, params.filter)
        items_sorted = self._apply_sort(items_filtered, params.sort, params.sort_dir)
        items_paginated = self._apply_paginate(
            items_sorted, params.page, params.per_page
        )

        logger.debug(
            f"Search on {self._entity_name()} matched {len(items_filtered)} items "
            f"({params!r})"
        )

        return SearchResult(
            items=items_paginated,
            total=len(items_filtered),
            current_page=params.page,
            per_page=params.per_page,
        )

    @abstractmethod
    def _matches_filter(self, item: E, filter: str) -> bool:
        """
        Check whether an item matches a non-null filter.

        Args:
            item: Entity to test
            filter: Normalized filter string

        Returns:
            True if the item should be kept
        """
        pass

    async def _apply_filter(self, items: List[E], filter: Optional[str]) -> List[E]:
        """Keep matching items; a None filter returns the input list itself."""
        if filter is None:
            return items
        return [item for item in items if self._matches_filter(item, filter)]

    def _apply_sort(
        self,
        items: List[E],
        sort: Optional[str],
        sort_dir: Optional[str],
        custom_getter: Optional[Callable[[str, E], Any]] = None,
    ) -> List[E]:
        """
        Sort items by a sortable field.

        Returns the input unchanged when ``sort`` is None or not a sortable
        field. Otherwise returns a new list; items with equal keys keep
        their original relative order.

        Args:
            items: Items to sort
            sort: Field name to sort by
            sort_dir: "asc" or "desc"
            custom_getter: Optional ``(field, item) -> value`` extractor
        """
        if not sort or sort not in self.sortable_fields:
            return items

        sign = -1 if sort_dir == SortDirection.DESC else 1

        def get_value(item: E) -> Any:
            if custom_getter is not None:
                return custom_getter(sort, item)
            return getattr(item, sort)

        def compare(a: E, b: E) -> int:
            a_value = get_value(a)
            b_value = get_value(b)
            if a_value < b_value:
                return -sign
            if a_value > b_value:
                return sign
            return 0

        return sorted(items, key=cmp_to_key(compare))

    def _apply_paginate(self, items: List[E], page: int, per_page: int) -> List[E]:
        """Slice out a 1-based page; out-of-range pages are empty."""
        start = (page - 1) * per_page
        return items[start : start + per_page]
