"""
Field projection for read responses.

Each record type is registered with an ordered mapping of public field name to
accessor. Fields that are not registered (soft-delete bookkeeping) never appear
in a projection.
"""

from __future__ import annotations

from typing import (Any, Callable, Dict, Iterable, List, Mapping, Optional,
                    Sequence, Type)

from app.models.contact import Contact
from app.models.professional import Professional

Accessor = Callable[[Any], Any]


def _attr(name: str) -> Accessor:
    return lambda record: getattr(record, name)


PROFESSIONAL_FIELDS: Dict[str, Accessor] = {
    name: _attr(name) for name in ("id", "name", "role", "birth_date", "created_at")
}

CONTACT_FIELDS: Dict[str, Accessor] = {
    name: _attr(name) for name in ("id", "name", "contact", "created_at", "professional_id")
}


class FieldProjector:
    """Maps records to key-value views, optionally restricted to a field subset"""

    def __init__(self, registry: Optional[Dict[Type, Dict[str, Accessor]]] = None):
        self._registry: Dict[Type, Dict[str, Accessor]] = dict(registry or {})

    @classmethod
    def default(cls) -> "FieldProjector":
        return cls({Professional: PROFESSIONAL_FIELDS, Contact: CONTACT_FIELDS})

    def register(self, record_type: Type, fields: Dict[str, Accessor]) -> None:
        self._registry[record_type] = dict(fields)

    def fields_for(self, record_type: Type) -> List[str]:
        return list(self._accessors(record_type))

    def _accessors(self, record_type: Type) -> Dict[str, Accessor]:
        for klass in record_type.__mro__:
            if klass in self._registry:
                return self._registry[klass]
        raise TypeError(f"No field projection registered for {record_type.__name__}")

    def _public_names(self) -> set:
        return {name for fields in self._registry.values() for name in fields}

    def project_all(self, record: Any) -> Dict[str, Any]:
        # An earlier projection is already a view; only registered names survive
        if isinstance(record, Mapping):
            public = self._public_names()
            return {key: value for key, value in record.items() if key in public}
        return {name: accessor(record) for name, accessor in self._accessors(type(record)).items()}

    def project_subset(self, record: Any, fields: Iterable[str]) -> Dict[str, Any]:
        """Keep only the requested fields; unknown names are ignored"""
        wanted = set(fields)
        return {key: value for key, value in self.project_all(record).items() if key in wanted}

    def project_many(self, records: Iterable[Any], fields: Optional[Sequence[str]] = None) -> List[Dict[str, Any]]:
        if fields:
            return [self.project_subset(record, fields) for record in records]
        return [self.project_all(record) for record in records]
