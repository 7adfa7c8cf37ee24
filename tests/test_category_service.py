"""
Tests for category service.

Covers:
- Create, update, get, list and delete use cases
- Partial updates
- Error propagation from the domain and repository
"""

from datetime import datetime, timedelta, timezone
from unittest.mock import AsyncMock

import pytest

from catalog.domain.category import Category
from catalog.domain.exceptions import (
    EntityValidationError,
    InvalidUuidError,
    NotFoundError,
)
from catalog.domain.search import SearchParams, SearchResult
from catalog.domain.value_objects import Uuid
from catalog.services.category_service import CategoryService
from catalog.services.schemas import (
    CategoryOutput,
    CreateCategoryInput,
    ListCategoriesInput,
    UpdateCategoryInput,
)
from tests.factories import CategoryFakeBuilder

BASE_TIME = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def category_service(in_memory_repository):
    """Create category service over the in-memory repository."""
    return CategoryService(in_memory_repository)


@pytest.fixture
def mock_repository():
    """Create mock category repository."""
    return AsyncMock()


class TestCreateCategory:
    """Test create use case."""

    @pytest.mark.asyncio
    async def test_create_with_defaults(self, category_service, in_memory_repository):
        """Test creating a category with only a name."""
        output = await category_service.create_category(CreateCategoryInput(name="Movie"))

        stored = in_memory_repository.items[0]
        assert output == CategoryOutput(
            id=stored.entity_id.id,
            name="Movie",
            description=None,
            is_active=True,
            created_at=stored.created_at,
        )

    @pytest.mark.asyncio
    async def test_create_with_all_fields(self, category_service):
        """Test creating a category with every field."""
        output = await category_service.create_category(
            CreateCategoryInput(name="Movie", description="desc", is_active=False)
        )

        assert output.name == "Movie"
        assert output.description == "desc"
        assert output.is_active is False

    @pytest.mark.asyncio
    async def test_create_invalid_does_not_store(
        self, category_service, in_memory_repository
    ):
        """Test invalid input raises and stores nothing."""
        with pytest.raises(EntityValidationError) as exc_info:
            await category_service.create_category(CreateCategoryInput(name=""))

        assert "name" in exc_info.value.errors
        assert in_memory_repository.items == []

    @pytest.mark.asyncio
    async def test_create_calls_insert(self, mock_repository):
        """Test the repository receives the new entity."""
        service = CategoryService(mock_repository)

        output = await service.create_category(CreateCategoryInput(name="Movie"))

        mock_repository.insert.assert_awaited_once()
        inserted = mock_repository.insert.await_args.args[0]
        assert isinstance(inserted, Category)
        assert inserted.entity_id.id == output.id


class TestUpdateCategory:
    """Test update use case."""

    @pytest.mark.asyncio
    async def test_update_name_only(self, category_service, in_memory_repository):
        """Test omitted fields are left untouched."""
        category = Category.create(name="Movie", description="desc")
        await in_memory_repository.insert(category)

        output = await category_service.update_category(
            UpdateCategoryInput(id=category.entity_id.id, name="Documentary")
        )

        assert output.name == "Documentary"
        assert output.description == "desc"
        assert output.is_active is True

    @pytest.mark.asyncio
    async def test_update_clears_description(
        self, category_service, in_memory_repository
    ):
        """Test an explicit None description clears it."""
        category = Category.create(name="Movie", description="desc")
        await in_memory_repository.insert(category)

        output = await category_service.update_category(
            UpdateCategoryInput(id=category.entity_id.id, description=None)
        )

        assert output.name == "Movie"
        assert output.description is None

    @pytest.mark.parametrize(
        "initial, is_active, expected",
        [
            (True, False, False),
            (False, True, True),
            (True, None, True),
            (False, None, False),
        ],
    )
    @pytest.mark.asyncio
    async def test_update_is_active(
        self, category_service, in_memory_repository, initial, is_active, expected
    ):
        """Test activation follows is_active when provided."""
        category = Category.create(name="Movie", is_active=initial)
        await in_memory_repository.insert(category)

        output = await category_service.update_category(
            UpdateCategoryInput(id=category.entity_id.id, is_active=is_active)
        )

        assert output.is_active is expected

    @pytest.mark.asyncio
    async def test_update_invalid_name(self, category_service, in_memory_repository):
        """Test a rejected update leaves the stored category unchanged."""
        category = Category.create(name="Movie", description="desc")
        await in_memory_repository.insert(category)

        with pytest.raises(EntityValidationError):
            await category_service.update_category(
                UpdateCategoryInput(id=category.entity_id.id, name="t" * 256)
            )

        stored = await in_memory_repository.find_by_id(category.entity_id)
        assert stored.name == "Movie"
        assert stored.description == "desc"

    @pytest.mark.asyncio
    async def test_update_invalid_description_keeps_name(
        self, category_service, in_memory_repository
    ):
        """Test a valid name is not applied when the description is rejected."""
        category = Category.create(name="Movie")
        await in_memory_repository.insert(category)

        with pytest.raises(EntityValidationError):
            await category_service.update_category(
                UpdateCategoryInput(
                    id=category.entity_id.id, name="Documentary", description=5
                )
            )

        stored = await in_memory_repository.find_by_id(category.entity_id)
        assert stored.name == "Movie"
        assert stored.description is None

    @pytest.mark.asyncio
    async def test_update_not_found(self, category_service):
        """Test updating an unknown category raises NotFoundError."""
        missing = Uuid()

        with pytest.raises(NotFoundError) as exc_info:
            await category_service.update_category(
                UpdateCategoryInput(id=missing.id, name="Movie")
            )

        assert exc_info.value.ids == [missing.id]
        assert exc_info.value.entity_class is Category

    @pytest.mark.asyncio
    async def test_update_invalid_id(self, category_service):
        """Test a malformed id raises InvalidUuidError."""
        with pytest.raises(InvalidUuidError):
            await category_service.update_category(
                UpdateCategoryInput(id="fake id", name="Movie")
            )

    @pytest.mark.asyncio
    async def test_update_calls_repository(self, mock_repository):
        """Test the modified entity is passed to repository.update."""
        category = Category.create(name="Movie")
        mock_repository.find_by_id.return_value = category
        service = CategoryService(mock_repository)

        await service.update_category(
            UpdateCategoryInput(id=category.entity_id.id, name="Documentary")
        )

        mock_repository.update.assert_awaited_once()
        updated = mock_repository.update.await_args.args[0]
        assert updated.entity_id == category.entity_id
        assert updated.name == "Documentary"
        assert category.name == "Movie"


class TestGetCategory:
    """Test get use case."""

    @pytest.mark.asyncio
    async def test_get(self, category_service, in_memory_repository):
        """Test getting a stored category."""
        category = CategoryFakeBuilder.a_category().deactivate().build()
        await in_memory_repository.insert(category)

        output = await category_service.get_category(category.entity_id.id)

        assert output == CategoryOutput.from_entity(category)

    @pytest.mark.asyncio
    async def test_get_not_found(self, category_service):
        """Test getting an unknown category raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await category_service.get_category(Uuid().id)

    @pytest.mark.asyncio
    async def test_get_invalid_id(self, category_service):
        """Test a malformed id raises InvalidUuidError."""
        with pytest.raises(InvalidUuidError):
            await category_service.get_category("fake id")


class TestListCategories:
    """Test list use case."""

    @pytest.mark.asyncio
    async def test_list_defaults(self, category_service, in_memory_repository):
        """Test listing with empty input returns newest first."""
        categories = (
            CategoryFakeBuilder.the_categories(3)
            .with_created_at(lambda index: BASE_TIME + timedelta(seconds=index))
            .build()
        )
        await in_memory_repository.bulk_insert(categories)

        output = await category_service.list_categories(ListCategoriesInput())

        assert [item.id for item in output.items] == [
            c.entity_id.id for c in reversed(categories)
        ]
        assert output.total == 3
        assert output.current_page == 1
        assert output.per_page == 15
        assert output.last_page == 1

    @pytest.mark.asyncio
    async def test_list_normalizes_raw_input(
        self, category_service, in_memory_repository
    ):
        """Test loosely-typed input is normalized before searching."""
        names = ["b", "a", "d", "e", "c"]
        categories = (
            CategoryFakeBuilder.the_categories(len(names))
            .with_name(lambda index: names[index])
            .build()
        )
        await in_memory_repository.bulk_insert(categories)

        output = await category_service.list_categories(
            ListCategoriesInput(page="1", per_page="2", sort="name", sort_dir="DESC")
        )

        assert [item.name for item in output.items] == ["e", "d"]
        assert output.total == 5
        assert output.last_page == 3

    @pytest.mark.asyncio
    async def test_list_builds_search_params(self, mock_repository):
        """Test the repository receives normalized SearchParams."""
        mock_repository.search.return_value = SearchResult(
            items=[], total=0, current_page=2, per_page=15
        )
        service = CategoryService(mock_repository)

        output = await service.list_categories(
            ListCategoriesInput(page=2, per_page="abc", filter="movie")
        )

        mock_repository.search.assert_awaited_once_with(
            SearchParams(page=2, filter="movie")
        )
        assert output.items == []
        assert output.last_page == 0


class TestDeleteCategory:
    """Test delete use case."""

    @pytest.mark.asyncio
    async def test_delete(self, category_service, in_memory_repository):
        """Test deleting a stored category."""
        category = Category.create(name="Movie")
        await in_memory_repository.insert(category)

        await category_service.delete_category(category.entity_id.id)

        assert in_memory_repository.items == []

    @pytest.mark.asyncio
    async def test_delete_not_found(self, category_service):
        """Test deleting an unknown category raises NotFoundError."""
        with pytest.raises(NotFoundError):
            await category_service.delete_category(Uuid().id)

    @pytest.mark.asyncio
    async def test_delete_invalid_id(self, category_service):
        """Test a malformed id raises InvalidUuidError."""
        with pytest.raises(InvalidUuidError):
            await category_service.delete_category("fake id")


class TestListCategoriesSqlAlchemy:
    """Test list use case over the SQLAlchemy repository."""

    @pytest.mark.parametrize(
        "page, expected_page",
        [
            ("99999999999999999999999", 1),
            ("1e400", 1),
            (2**53 - 1, 2**53 - 1),
        ],
    )
    @pytest.mark.asyncio
    async def test_huge_page_degrades_gracefully(
        self, sqlalchemy_repository, page, expected_page
    ):
        """Test oversized pages never reach the database as raw integers."""
        await sqlalchemy_repository.bulk_insert(CategoryFakeBuilder.the_categories(3).build())
        service = CategoryService(sqlalchemy_repository)

        output = await service.list_categories(ListCategoriesInput(page=page))

        assert output.current_page == expected_page
        assert output.total == 3
        expected_items = 3 if expected_page == 1 else 0
        assert len(output.items) == expected_items
