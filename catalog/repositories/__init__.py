"""
Repository layer for data access.

Provides in-memory and SQLAlchemy implementations of the domain
repository contracts.
"""
