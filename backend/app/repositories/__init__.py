"""
Persistence stores for professionals and contacts
"""
from app.repositories.base_repository import BaseRepository  # noqa: F401
from app.repositories.memory_repository import (  # noqa: F401
    InMemoryContactRepository, InMemoryProfessionalRepository,
    InMemoryRepository)
from app.repositories.sqlalchemy_repository import (  # noqa: F401
    SqlAlchemyContactRepository, SqlAlchemyProfessionalRepository,
    SqlAlchemyRepository)
