"""
Category aggregate.

Category entity, its field rules and its repository contract.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, StrictBool, StrictStr

from .entity import Entity
from .exceptions import EntityValidationError
from .repository import ISearchableRepository
from .search import SearchParams, SearchResult
from .validators import PydanticValidatorFields
from .value_objects import Uuid

NAME_MAX_LENGTH = 255


class CategoryRules(BaseModel):
    """Field rules a category must satisfy."""

    name: StrictStr = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: Optional[StrictStr] = None
    is_active: StrictBool


class CategoryValidator(PydanticValidatorFields[CategoryRules]):
    rules = CategoryRules


class CategoryValidatorFactory:
    @staticmethod
    def create() -> CategoryValidator:
        return CategoryValidator()


@dataclass(eq=False)
class Category(Entity):
    """
    Category entity.

    The constructor only assigns fields; use ``Category.create`` to build
    a validated category. Mutators re-validate the changed state.
    """

    name: str
    description: Optional[str] = None
    is_active: bool = True
    category_id: Optional[Uuid] = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        if self.category_id is None:
            self.category_id = Uuid()

    @classmethod
    def create(
        cls,
        name: str,
        description: Optional[str] = None,
        is_active: bool = True,
    ) -> "Category":
        """
        Create and validate a new category.

        Raises:
            EntityValidationError: If any field rule is violated
        """
        category = cls(name=name, description=description, is_active=is_active)
        cls.validate(category)
        return category

    @staticmethod
    def validate(entity: "Category") -> None:
        Category._validate_fields(entity._fields())

    @staticmethod
    def _validate_fields(data: Dict[str, Any]) -> None:
        validator = CategoryValidatorFactory.create()
        if not validator.validate(data):
            raise EntityValidationError(validator.errors or {})

    def _fields(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
        }

    @property
    def entity_id(self) -> Uuid:
        return self.category_id  # type: ignore[return-value]

    def change_name(self, name: str) -> None:
        """Rename the category; the current state is kept if the name is rejected."""
        Category._validate_fields({**self._fields(), "name": name})
        self.name = name

    def change_description(self, description: Optional[str]) -> None:
        """Change the description; the current state is kept if it is rejected."""
        Category._validate_fields({**self._fields(), "description": description})
        self.description = description

    def activate(self) -> None:
        self.is_active = True

    def deactivate(self) -> None:
        self.is_active = False

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for API responses."""
        return {
            "category_id": self.entity_id.id,
            "name": self.name,
            "description": self.description,
            "is_active": self.is_active,
            "created_at": self.created_at,
        }


CategoryFilter = str
CategorySearchParams = SearchParams
CategorySearchResult = SearchResult


class ICategoryRepository(ISearchableRepository[Category, Uuid]):
    """Searchable repository contract for categories."""

    pass
