"""
Database models for the catalog.

This module defines the SQLAlchemy ORM models backing the
SQLAlchemy repositories.
"""

from typing import Any

from sqlalchemy import Boolean, Column, DateTime, String, Text
from sqlalchemy.orm import declarative_base

Base: Any = declarative_base()


class CategoryModel(Base):
    """
    Category row.

    Attributes:
        category_id: UUID string primary key
        name: Category name (max 255 characters)
        description: Optional free-text description
        is_active: Whether the category is active
        created_at: Creation timestamp, stored as naive UTC
    """

    __tablename__ = "categories"

    category_id = Column(String(36), primary_key=True)
    name = Column(String(255), nullable=False, index=True)
    description = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)
    created_at = Column(DateTime, nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<CategoryModel(category_id={self.category_id}, name={self.name})>"
