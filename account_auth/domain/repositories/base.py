"""Base repository interfaces following Clean Architecture."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

# Generic type for domain entities
T = TypeVar("T")


class IRepository(ABC, Generic[T]):
    """
    Base repository interface for write operations shared by all entities.

    Lookups are entity-specific (accounts are keyed by username), so they
    live on the concrete interfaces.

    Type Parameters:
        T: The domain entity type this repository manages
    """

    @abstractmethod
    async def add(self, entity: T) -> T:
        """
        Add a new entity.

        Args:
            entity: The entity to add

        Returns:
            The added entity with generated fields (id, timestamps, version)
        """
        pass

    @abstractmethod
    async def update(self, entity: T) -> T:
        """
        Update an existing entity.

        The write is atomic per record: it is either fully applied or not at
        all. A record modified by someone else since it was read is not
        overwritten.

        Args:
            entity: The entity to update

        Returns:
            The updated entity

        Raises:
            StorageException: If the write fails or the record changed underneath
        """
        pass
