"""
Tests for domain exceptions.

Simple tests to ensure exceptions work correctly.
"""

from catalog.domain.category import Category
from catalog.domain.exceptions import (
    CatalogException,
    EntityValidationError,
    InvalidUuidError,
    NotFoundError,
    PersistenceException,
)
from catalog.domain.value_objects import Uuid


class TestExceptions:
    """Test custom exceptions."""

    def test_not_found_error_single_id(self):
        """Test NotFoundError message for a single id."""
        entity_id = Uuid()
        exc = NotFoundError(entity_id, Category)

        assert str(exc) == f"Category with id(s) {entity_id.id} not found"
        assert exc.ids == [entity_id.id]
        assert exc.entity_class is Category
        assert exc.details == {"ids": [entity_id.id], "entity": "Category"}

    def test_not_found_error_list_of_ids(self):
        """Test NotFoundError message for several ids."""
        ids = [Uuid(), Uuid()]
        exc = NotFoundError(ids, Category)

        assert str(exc) == f"Category with id(s) {ids[0].id}, {ids[1].id} not found"
        assert exc.ids == [ids[0].id, ids[1].id]

    def test_not_found_error_plain_string_id(self):
        """Test NotFoundError accepts raw string ids."""
        exc = NotFoundError("fake-id", Category)
        assert "fake-id" in str(exc)

    def test_invalid_uuid_error(self):
        """Test InvalidUuidError."""
        exc = InvalidUuidError("abc")
        assert "abc" in str(exc)
        assert exc.value == "abc"

    def test_entity_validation_error(self):
        """Test EntityValidationError carries field errors."""
        errors = {"name": ["String should have at least 1 character"]}
        exc = EntityValidationError(errors)

        assert str(exc) == "Validation Error"
        assert exc.errors == errors
        assert exc.details == {"errors": errors}

    def test_persistence_exception(self):
        """Test PersistenceException."""
        exc = PersistenceException("insert", "database is locked")
        assert "insert" in str(exc)
        assert "database is locked" in str(exc)

    def test_all_inherit_from_base(self):
        """Test every domain error shares the base class."""
        for exc in (
            NotFoundError(Uuid(), Category),
            InvalidUuidError("x"),
            EntityValidationError({}),
            PersistenceException("find"),
        ):
            assert isinstance(exc, CatalogException)
