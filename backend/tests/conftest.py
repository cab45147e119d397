"""
Pytest configuration and fixtures
"""
import os
import sys
from datetime import datetime, timedelta
from pathlib import Path

import pytest
from sqlalchemy.orm import Session

# Add backend directory to path for imports
backend_dir = Path(__file__).parent.parent
if str(backend_dir) not in sys.path:
    sys.path.insert(0, str(backend_dir))

# Settings are cached on first use, so the test environment is fixed before any app import
os.environ.setdefault("DATABASE_URI", "sqlite://")
os.environ.setdefault("LOG_FILE_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "text")

from app.components.validation import ProfessionalValidator, RecordValidator
from app.core.database import Base, get_engine, get_session_local
from app.repositories.memory_repository import (
    InMemoryContactRepository, InMemoryProfessionalRepository)
from app.services.contact_service import ContactService
from app.services.professional_service import ProfessionalService
from app.utils.datetime_utils import Clock, reference_timezone


class FrozenClock(Clock):
    """Clock that only moves when told to"""

    def __init__(self, current: datetime):
        self.current = current

    def now(self) -> datetime:
        return self.current

    def advance(self, **kwargs) -> datetime:
        self.current = self.current + timedelta(**kwargs)
        return self.current


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2024, 3, 15, 9, 30, tzinfo=reference_timezone(-3)))


@pytest.fixture
def professionals_repo() -> InMemoryProfessionalRepository:
    return InMemoryProfessionalRepository()


@pytest.fixture
def contacts_repo() -> InMemoryContactRepository:
    return InMemoryContactRepository()


@pytest.fixture
def professional_service(professionals_repo, contacts_repo, clock) -> ProfessionalService:
    return ProfessionalService(
        professionals=professionals_repo,
        contacts=contacts_repo,
        validator=ProfessionalValidator(),
        clock=clock,
    )


@pytest.fixture
def contact_service(professionals_repo, contacts_repo, clock) -> ContactService:
    return ContactService(
        contacts=contacts_repo,
        professionals=professionals_repo,
        validator=RecordValidator(),
        clock=clock,
    )


@pytest.fixture(scope="function")
def db() -> Session:
    """Create a database session on a fresh schema"""
    import app.models  # noqa: F401

    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)

    session = get_session_local()()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(db: Session):
    """Create test client with database dependency override"""
    from fastapi.testclient import TestClient

    from app.core.database import get_db
    from main import app

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    test_client = TestClient(app)
    yield test_client
    app.dependency_overrides.clear()
