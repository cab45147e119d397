"""
Professional model
"""
from enum import Enum

from sqlalchemy import Boolean, Column, Date, DateTime, Integer, String

from app.core.database import Base


class ProfessionalRole(str, Enum):
    """Roles a professional can hold"""
    DEVELOPER = "Developer"
    DESIGNER = "Designer"
    SUPPORT = "Support"
    TESTER = "Tester"


# Spellings carried over from records registered before the English role names
LEGACY_ROLE_NAMES = ("Desenvolvedor", "Suporte")

ACCEPTED_ROLES = frozenset([role.value for role in ProfessionalRole] + list(LEGACY_ROLE_NAMES))


class Professional(Base):
    """A registered professional; never physically removed, only soft-deleted"""
    __tablename__ = "professionals"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    role = Column(String(50), nullable=False)
    birth_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)

    # Soft-delete bookkeeping: both are set together
    deleted = Column(Boolean, nullable=False, default=False)
    deleted_at = Column(DateTime(timezone=True), nullable=True)

    @property
    def is_active(self) -> bool:
        return not self.deleted

    def __repr__(self):
        return f"<Professional(id={self.id}, name={self.name}, role={self.role}, deleted={self.deleted})>"
