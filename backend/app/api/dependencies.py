"""
FastAPI dependencies wiring the lifecycle services to a request-scoped session
"""
from functools import lru_cache

from fastapi import Depends
from sqlalchemy.orm import Session

from app.components.field_projection import FieldProjector
from app.components.validation import ProfessionalValidator, RecordValidator
from app.core.database import get_db
from app.repositories.sqlalchemy_repository import (
    SqlAlchemyContactRepository, SqlAlchemyProfessionalRepository)
from app.services.contact_service import ContactService
from app.services.professional_service import ProfessionalService
from app.utils.datetime_utils import Clock, SystemClock


@lru_cache()
def get_clock() -> Clock:
    return SystemClock()


@lru_cache()
def get_field_projector() -> FieldProjector:
    return FieldProjector.default()


def get_professional_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> ProfessionalService:
    return ProfessionalService(
        professionals=SqlAlchemyProfessionalRepository(db),
        contacts=SqlAlchemyContactRepository(db),
        validator=ProfessionalValidator(),
        clock=clock,
    )


def get_contact_service(
    db: Session = Depends(get_db),
    clock: Clock = Depends(get_clock),
) -> ContactService:
    return ContactService(
        contacts=SqlAlchemyContactRepository(db),
        professionals=SqlAlchemyProfessionalRepository(db),
        validator=RecordValidator(),
        clock=clock,
    )
