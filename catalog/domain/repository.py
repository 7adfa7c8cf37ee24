"""
Repository interfaces (Abstract Base Classes).

Define the contract for entity persistence and retrieval independent of
the underlying storage mechanism. Every operation is a coroutine so that
in-memory and I/O-backed implementations are interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, Type, TypeVar

from .entity import Entity
from .search import SearchParams, SearchResult
from .value_objects import ValueObject

E = TypeVar("E", bound=Entity)
ID = TypeVar("ID", bound=ValueObject)


class IRepository(ABC, Generic[E, ID]):
    """
    Abstract repository interface for entity CRUD operations.

    Type Parameters:
        E: The entity type managed by this repository
        ID: The value object type identifying the entity
    """

    @abstractmethod
    async def insert(self, entity: E) -> None:
        """
        Add an entity to the repository.

        No uniqueness check is performed; inserting an identity twice
        is a caller error.

        Args:
            entity: Entity to store
        """
        pass

    @abstractmethod
    async def bulk_insert(self, entities: List[E]) -> None:
        """
        Add several entities, preserving their order.

        Args:
            entities: Entities to store
        """
        pass

    @abstractmethod
    async def update(self, entity: E) -> None:
        """
        Replace the stored entity that has the same identity.

        Args:
            entity: New state of the entity

        Raises:
            NotFoundError: If no entity with this identity exists
        """
        pass

    @abstractmethod
    async def delete(self, entity_id: ID) -> None:
        """
        Remove the entity with the given identity.

        Args:
            entity_id: Identity of the entity to remove

        Raises:
            NotFoundError: If no entity with this identity exists
        """
        pass

    @abstractmethod
    async def find_by_id(self, entity_id: ID) -> Optional[E]:
        """
        Find an entity by its identity.

        Args:
            entity_id: Identity to look up

        Returns:
            The entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[E]:
        """
        Retrieve all entities in insertion order.

        Returns:
            List of all entities
        """
        pass

    @abstractmethod
    def get_entity(self) -> Type[E]:
        """
        Get the concrete entity class this repository is bound to.

        Returns:
            Entity class
        """
        pass


class ISearchableRepository(IRepository[E, ID]):
    """
    Repository interface with filtered, sorted, paginated search.

    Attributes:
        sortable_fields: Field names accepted as sort keys; any other
            sort value is treated as absent
    """

    sortable_fields: List[str] = []

    @abstractmethod
    async def search(self, params: SearchParams) -> SearchResult:
        """
        Search entities.

        Args:
            params: Normalized search parameters

        Returns:
            Page of matching entities with pagination metadata
        """
        pass
