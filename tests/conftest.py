"""
Test configuration and fixtures
"""

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from catalog.models import Base
from catalog.repositories.category_in_memory_repository import (
    CategoryInMemoryRepository,
)
from catalog.repositories.category_sqlalchemy_repository import (
    CategorySqlAlchemyRepository,
)

# Create in-memory SQLite database for testing
SQLALCHEMY_DATABASE_URL = "sqlite:///:memory:"

engine = create_engine(
    SQLALCHEMY_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def in_memory_repository():
    """Create an empty in-memory category repository."""
    return CategoryInMemoryRepository()


@pytest.fixture
def sqlalchemy_repository(db_session):
    """Create a SQLAlchemy category repository on the test session."""
    return CategorySqlAlchemyRepository(db_session)
