"""
Category use cases.

Thin orchestration over the category repository: build or load entities,
apply changes through entity methods and persist them. Domain errors
propagate to the caller unchanged.
"""

import copy

import structlog

from ..domain.category import Category, ICategoryRepository
from ..domain.exceptions import NotFoundError
from ..domain.search import SearchParams
from ..domain.value_objects import Uuid
from .schemas import (
    CategoryListOutput,
    CategoryOutput,
    CreateCategoryInput,
    ListCategoriesInput,
    UpdateCategoryInput,
)

logger = structlog.get_logger(__name__)


class CategoryService:
    """Category use cases over any ICategoryRepository implementation."""

    def __init__(self, repository: ICategoryRepository):
        """
        Initialize category service.

        Args:
            repository: Category repository (in-memory or SQLAlchemy)
        """
        self.repository = repository

    async def create_category(self, data: CreateCategoryInput) -> CategoryOutput:
        """
        Create and store a new category.

        Raises:
            EntityValidationError: If the category violates a field rule
        """
        category = Category.create(
            name=data.name, description=data.description, is_active=data.is_active
        )
        await self.repository.insert(category)

        logger.info("Category created", category_id=category.entity_id.id)
        return CategoryOutput.from_entity(category)

    async def update_category(self, data: UpdateCategoryInput) -> CategoryOutput:
        """
        Apply the provided fields to an existing category.

        Raises:
            InvalidUuidError: If the id is not a valid UUID
            NotFoundError: If no category has this id
            EntityValidationError: If the new state violates a field rule
        """
        # changes go to a copy so a rejected update never touches the stored entity
        category = copy.copy(await self._get(data.id))
        provided = data.model_fields_set

        if "name" in provided and data.name:
            category.change_name(data.name)

        if "description" in provided:
            category.change_description(data.description)

        if data.is_active is True:
            category.activate()
        elif data.is_active is False:
            category.deactivate()

        await self.repository.update(category)

        logger.info(
            "Category updated",
            category_id=data.id,
            fields=sorted(provided - {"id"}),
        )
        return CategoryOutput.from_entity(category)

    async def get_category(self, category_id: str) -> CategoryOutput:
        """
        Get a category by id.

        Raises:
            InvalidUuidError: If the id is not a valid UUID
            NotFoundError: If no category has this id
        """
        return CategoryOutput.from_entity(await self._get(category_id))

    async def list_categories(self, data: ListCategoriesInput) -> CategoryListOutput:
        """
        Search categories from raw search input.

        Args:
            data: Raw page/per_page/sort/sort_dir/filter values

        Returns:
            Page of categories with pagination metadata
        """
        params = SearchParams(
            page=data.page,
            per_page=data.per_page,
            sort=data.sort,
            sort_dir=data.sort_dir,
            filter=data.filter,
        )
        result = await self.repository.search(params)

        logger.debug(
            "Categories listed",
            page=params.page,
            per_page=params.per_page,
            total=result.total,
        )
        return CategoryListOutput.from_search_result(result)

    async def delete_category(self, category_id: str) -> None:
        """
        Delete a category by id.

        Raises:
            InvalidUuidError: If the id is not a valid UUID
            NotFoundError: If no category has this id
        """
        await self.repository.delete(Uuid(category_id))
        logger.info("Category deleted", category_id=category_id)

    async def _get(self, category_id: str) -> Category:
        category = await self.repository.find_by_id(Uuid(category_id))
        if category is None:
            logger.warning("Category not found", category_id=category_id)
            raise NotFoundError(category_id, Category)
        return category
