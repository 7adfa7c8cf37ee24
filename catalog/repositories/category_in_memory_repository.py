"""
In-memory category repository.

Used by tests and local development in place of the SQLAlchemy repository.
"""

from typing import Any, Callable, List, Optional, Type

from ..domain.category import Category, ICategoryRepository
from ..domain.search import SortDirection
from ..domain.value_objects import Uuid
from .in_memory_repository import InMemorySearchableRepository


class CategoryInMemoryRepository(
    InMemorySearchableRepository[Category, Uuid], ICategoryRepository
):
    """
    Category repository backed by a list.

    Filters by case-insensitive substring of the name and sorts by
    ``created_at`` descending when no sort field is requested.
    """

    sortable_fields: List[str] = ["name", "created_at"]

    def get_entity(self) -> Type[Category]:
        return Category

    def _matches_filter(self, item: Category, filter: str) -> bool:
        return filter.lower() in item.name.lower()

    def _apply_sort(
        self,
        items: List[Category],
        sort: Optional[str],
        sort_dir: Optional[str],
        custom_getter: Optional[Callable[[str, Category], Any]] = None,
    ) -> List[Category]:
        if not sort:
            return super()._apply_sort(
                items, "created_at", SortDirection.DESC, custom_getter
            )
        return super()._apply_sort(items, sort, sort_dir, custom_getter)
