"""
Base repository interface for record persistence.
"""
from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

T = TypeVar('T')


class BaseRepository(Generic[T], ABC):
    """Persistence store for one record type.

    "Active" is defined per record type: a professional that is not
    soft-deleted, a contact not flagged through its professional.
    """

    @abstractmethod
    def find_by_id(self, id: int) -> Optional[T]:
        """Retrieve a record by id regardless of its active state."""

    @abstractmethod
    def find_all(self) -> List[T]:
        """All records ordered by id, active or not."""

    @abstractmethod
    def find_all_active(self) -> List[T]:
        """Active records ordered by id."""

    @abstractmethod
    def find_by_id_active(self, id: int) -> Optional[T]:
        """Retrieve a record by id only if it is active."""

    @abstractmethod
    def find_by_query(self, q: str) -> List[T]:
        """Active records whose searchable fields contain ``q``, ordered by id."""

    @abstractmethod
    def save(self, entity: T) -> T:
        """Insert or update ``entity``; assigns an id to new records.

        Returns:
            T: The stored record
        """

    @abstractmethod
    def delete_by_id(self, id: int) -> bool:
        """Physically remove a record.

        Returns:
            bool: True if a record was removed
        """

    def exists_by_id(self, id: int) -> bool:
        return self.find_by_id(id) is not None
