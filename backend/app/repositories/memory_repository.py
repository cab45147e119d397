"""
In-memory repository implementation for testing and local experiments.
"""
import itertools
from typing import Dict, Generic, Iterable, List, Optional, TypeVar

from app.models.contact import Contact
from app.models.professional import Professional
from app.repositories.base_repository import BaseRepository

T = TypeVar('T')


class InMemoryRepository(BaseRepository[T], Generic[T]):
    """Dict-backed store with the same query semantics as the SQL repositories.

    Records are kept by reference, so a record fetched from the store and
    mutated is visible to later reads even before ``save``.
    """

    def __init__(self, entities: Iterable[T] = ()):
        self._store: Dict[int, T] = {}
        self._ids = itertools.count(1)
        for entity in entities:
            self.save(entity)

    def _is_active(self, entity: T) -> bool:
        raise NotImplementedError

    def _matches(self, entity: T, q: str) -> bool:
        raise NotImplementedError

    def _ordered(self, entities: Iterable[T]) -> List[T]:
        return sorted(entities, key=lambda e: e.id)

    def find_by_id(self, id: int) -> Optional[T]:
        return self._store.get(id)

    def find_all(self) -> List[T]:
        return self._ordered(self._store.values())

    def find_all_active(self) -> List[T]:
        return self._ordered(e for e in self._store.values() if self._is_active(e))

    def find_by_id_active(self, id: int) -> Optional[T]:
        entity = self._store.get(id)
        if entity is not None and self._is_active(entity):
            return entity
        return None

    def find_by_query(self, q: str) -> List[T]:
        return self._ordered(
            e for e in self._store.values() if self._is_active(e) and self._matches(e, q)
        )

    def save(self, entity: T) -> T:
        if entity.id is None:
            entity.id = next(self._ids)
            while entity.id in self._store:
                entity.id = next(self._ids)
        self._store[entity.id] = entity
        return entity

    def delete_by_id(self, id: int) -> bool:
        return self._store.pop(id, None) is not None


def _icontains(value, q: str) -> bool:
    return value is not None and q.lower() in str(value).lower()


class InMemoryProfessionalRepository(InMemoryRepository[Professional]):

    def _is_active(self, entity: Professional) -> bool:
        return not entity.deleted

    def _matches(self, entity: Professional, q: str) -> bool:
        birth = entity.birth_date.isoformat() if entity.birth_date else None
        return _icontains(entity.name, q) or _icontains(entity.role, q) or _icontains(birth, q)


class InMemoryContactRepository(InMemoryRepository[Contact]):

    def _is_active(self, entity: Contact) -> bool:
        return not entity.deleted_via_professional

    def _matches(self, entity: Contact, q: str) -> bool:
        return (
            _icontains(entity.name, q)
            or _icontains(entity.contact, q)
            or _icontains(entity.professional_id, q)
        )
