"""
SQLAlchemy models
"""
from app.core.database import Base  # noqa: F401
# Import all models here so Alembic can detect them
from app.models.contact import Contact  # noqa: F401
from app.models.professional import (ACCEPTED_ROLES,  # noqa: F401
                                     LEGACY_ROLE_NAMES, Professional,
                                     ProfessionalRole)
