"""
SQLAlchemy-backed repositories
"""
from typing import Generic, List, Optional, Type, TypeVar

from sqlalchemy import String, cast, func, or_
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.logging_config import LoggingConfig
from app.models.contact import Contact
from app.models.professional import Professional
from app.repositories.base_repository import BaseRepository

T = TypeVar('T')

logger = LoggingConfig.get_logger(__name__)


def _contains(column, q: str):
    """Case-insensitive substring match"""
    return func.lower(column).contains(q.lower(), autoescape=True)


class SqlAlchemyRepository(BaseRepository[T], Generic[T]):
    """Common session handling; subclasses define what "active" means"""

    model: Type[T]

    def __init__(self, db: Session):
        self.db = db

    def _active_filter(self):
        raise NotImplementedError

    def _search_filter(self, q: str):
        raise NotImplementedError

    def find_by_id(self, id: int) -> Optional[T]:
        return self.db.get(self.model, id)

    def find_all(self) -> List[T]:
        return self.db.query(self.model).order_by(self.model.id).all()

    def find_all_active(self) -> List[T]:
        return (
            self.db.query(self.model)
            .filter(self._active_filter())
            .order_by(self.model.id)
            .all()
        )

    def find_by_id_active(self, id: int) -> Optional[T]:
        return (
            self.db.query(self.model)
            .filter(self.model.id == id, self._active_filter())
            .first()
        )

    def find_by_query(self, q: str) -> List[T]:
        return (
            self.db.query(self.model)
            .filter(self._active_filter(), self._search_filter(q))
            .order_by(self.model.id)
            .all()
        )

    def _commit(self, action: str, entity: T) -> None:
        entity_id = getattr(entity, "id", None)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(
                f"Error trying to {action} {self.model.__name__}: {e}",
                exc_info=True,
                extra={"entity_id": entity_id}
            )
            raise

    def save(self, entity: T) -> T:
        self.db.add(entity)
        self._commit("save", entity)
        self.db.refresh(entity)
        return entity

    def delete_by_id(self, id: int) -> bool:
        entity = self.find_by_id(id)
        if entity is None:
            return False
        self.db.delete(entity)
        self._commit("delete", entity)
        return True


class SqlAlchemyProfessionalRepository(SqlAlchemyRepository[Professional]):
    model = Professional

    def _active_filter(self):
        return Professional.deleted.is_(False)

    def _search_filter(self, q: str):
        return or_(
            _contains(Professional.name, q),
            _contains(Professional.role, q),
            cast(Professional.birth_date, String).contains(q, autoescape=True),
        )


class SqlAlchemyContactRepository(SqlAlchemyRepository[Contact]):
    model = Contact

    def _active_filter(self):
        return Contact.deleted_via_professional.is_(False)

    def _search_filter(self, q: str):
        return or_(
            _contains(Contact.name, q),
            _contains(Contact.contact, q),
            cast(Contact.professional_id, String).contains(q, autoescape=True),
        )
