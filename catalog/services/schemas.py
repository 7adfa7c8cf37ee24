"""
Input and output models for the category service.

Inputs are deliberately loose: field rules are enforced by the Category
entity and search input is normalized by SearchParams.
"""

from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from ..domain.category import Category
from ..domain.search import SearchResult


class CreateCategoryInput(BaseModel):
    """Request model for creating a category."""

    name: Any = Field(..., description="Category name")
    description: Any = Field(default=None, description="Optional description")
    is_active: Any = Field(default=True, description="Whether the category is active")


class UpdateCategoryInput(BaseModel):
    """
    Request model for updating a category.

    Only fields explicitly provided are applied, so ``description=None``
    clears the description while omitting it leaves it untouched.
    """

    id: str = Field(..., description="Category UUID")
    name: Optional[Any] = None
    description: Optional[Any] = None
    is_active: Optional[bool] = None


class ListCategoriesInput(BaseModel):
    """Raw search input; every field is normalized by SearchParams."""

    page: Any = None
    per_page: Any = None
    sort: Any = None
    sort_dir: Any = None
    filter: Any = None


class CategoryOutput(BaseModel):
    """Response model for a single category."""

    id: str
    name: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, category: Category) -> "CategoryOutput":
        return cls(
            id=category.entity_id.id,
            name=category.name,
            description=category.description,
            is_active=category.is_active,
            created_at=category.created_at,
        )


class CategoryListOutput(BaseModel):
    """Response model for a page of categories."""

    items: List[CategoryOutput]
    total: int
    current_page: int
    per_page: int
    last_page: int

    @classmethod
    def from_search_result(cls, result: SearchResult) -> "CategoryListOutput":
        return cls(
            items=[CategoryOutput.from_entity(item) for item in result.items],
            total=result.total,
            current_page=result.current_page,
            per_page=result.per_page,
            last_page=result.last_page,
        )
