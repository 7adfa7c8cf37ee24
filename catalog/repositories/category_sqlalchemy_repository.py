"""
SQLAlchemy implementation of the category repository.

Honors the same contract as CategoryInMemoryRepository: identical
NotFoundError behavior, the same sortable fields, case-insensitive name
filter and ``created_at`` descending as the default order.
"""

import logging
from datetime import datetime, timezone
from typing import List, NoReturn, Optional, Type

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from ..domain.category import (
    Category,
    CategorySearchParams,
    CategorySearchResult,
    ICategoryRepository,
)
from ..domain.exceptions import NotFoundError, PersistenceException
from ..domain.search import SortDirection
from ..domain.value_objects import Uuid
from ..models import CategoryModel

logger = logging.getLogger(__name__)


class CategorySqlAlchemyRepository(ICategoryRepository):
    """Category persistence over a SQLAlchemy session."""

    sortable_fields: List[str] = ["name", "created_at"]

    def __init__(self, db: Session):
        """
        Initialize repository.

        Args:
            db: SQLAlchemy database session
        """
        self.db = db

    async def insert(self, entity: Category) -> None:
        """Insert a category row."""
        try:
            self.db.add(self._map_to_model(entity))
            self.db.commit()
        except SQLAlchemyError as e:
            self._rollback("insert", e)

    async def bulk_insert(self, entities: List[Category]) -> None:
        """Insert several category rows in one transaction."""
        try:
            self.db.add_all([self._map_to_model(entity) for entity in entities])
            self.db.commit()
            logger.debug(f"Inserted {len(entities)} categories")
        except SQLAlchemyError as e:
            self._rollback("bulk_insert", e)

    async def update(self, entity: Category) -> None:
        """Overwrite every column of an existing category row."""
        model = self._get_model(entity.entity_id)
        if model is None:
            raise NotFoundError(entity.entity_id, self.get_entity())

        try:
            model.name = entity.name
            model.description = entity.description
            model.is_active = entity.is_active
            model.created_at = self._to_naive_utc(entity.created_at)
            self.db.commit()
        except SQLAlchemyError as e:
            self._rollback("update", e)

    async def delete(self, entity_id: Uuid) -> None:
        """Delete a category row."""
        model = self._get_model(entity_id)
        if model is None:
            raise NotFoundError(entity_id, self.get_entity())

        try:
            self.db.delete(model)
            self.db.commit()
        except SQLAlchemyError as e:
            self._rollback("delete", e)

    async def find_by_id(self, entity_id: Uuid) -> Optional[Category]:
        """Find a category by id, returning None when absent."""
        model = self._get_model(entity_id)
        return self._map_to_entity(model) if model is not None else None

    async def find_all(self) -> List[Category]:
        """Return every category."""
        try:
            models = self.db.query(CategoryModel).all()
        except SQLAlchemyError as e:
            self._rollback("find_all", e)
        return [self._map_to_entity(model) for model in models]

    async def search(self, params: CategorySearchParams) -> CategorySearchResult:
        """
        Search categories with filter, sort and pagination pushed into SQL.

        Args:
            params: Normalized search parameters

        Returns:
            CategorySearchResult with the requested page
        """
        offset = (params.page - 1) * params.per_page

        try:
            query = self.db.query(CategoryModel)
            if params.filter is not None:
                query = query.filter(
                    CategoryModel.name.icontains(params.filter, autoescape=True)
                )

            total = query.count()

            if params.sort and params.sort in self.sortable_fields:
                column = getattr(CategoryModel, params.sort)
                order = [
                    column.desc() if params.sort_dir == SortDirection.DESC else column.asc(),
                    CategoryModel.created_at.asc(),
                ]
            else:
                order = [CategoryModel.created_at.desc()]
            order.append(CategoryModel.category_id.asc())

            if offset >= total:
                models = []
            else:
                models = (
                    query.order_by(*order).offset(offset).limit(params.per_page).all()
                )
        except SQLAlchemyError as e:
            self._rollback("search", e)

        return CategorySearchResult(
            items=[self._map_to_entity(model) for model in models],
            total=total,
            current_page=params.page,
            per_page=params.per_page,
        )

    def get_entity(self) -> Type[Category]:
        return Category

    def _get_model(self, entity_id: Uuid) -> Optional[CategoryModel]:
        try:
            return self.db.get(CategoryModel, entity_id.id)
        except SQLAlchemyError as e:
            self._rollback("find", e)

    def _rollback(self, operation: str, error: SQLAlchemyError) -> NoReturn:
        self.db.rollback()
        logger.error(f"Error during category {operation}: {error}")
        raise PersistenceException(operation, str(error)) from error

    @staticmethod
    def _to_naive_utc(value: datetime) -> datetime:
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value

    def _map_to_model(self, entity: Category) -> CategoryModel:
        return CategoryModel(
            category_id=entity.entity_id.id,
            name=entity.name,
            description=entity.description,
            is_active=entity.is_active,
            created_at=self._to_naive_utc(entity.created_at),
        )

    @staticmethod
    def _map_to_entity(model: CategoryModel) -> Category:
        return Category(
            category_id=Uuid(model.category_id),
            name=model.name,
            description=model.description,
            is_active=model.is_active,
            created_at=model.created_at.replace(tzinfo=timezone.utc),
        )
