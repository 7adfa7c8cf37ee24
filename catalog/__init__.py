"""
Catalog domain library.

Entities identified by value objects, a uniform async repository contract,
and an in-memory repository with filtered, sorted, paginated search.
"""

__version__ = "0.1.0"
