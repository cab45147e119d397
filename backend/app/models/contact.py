"""
Contact model
"""
from sqlalchemy import Boolean, Column, DateTime, ForeignKey, Integer, String

from app.core.database import Base


class Contact(Base):
    """A phone number, e-mail or similar entry owned by one professional"""
    __tablename__ = "contacts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    contact = Column(String(255), nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
    # Reference by id only; the professional does not hold its contacts
    professional_id = Column(Integer, ForeignKey("professionals.id"), nullable=False, index=True)
    # Mirrors the owning professional's deleted flag
    deleted_via_professional = Column(Boolean, nullable=False, default=False)

    @property
    def is_active(self) -> bool:
        return not self.deleted_via_professional

    def __repr__(self):
        return (
            f"<Contact(id={self.id}, name={self.name}, professional_id={self.professional_id}, "
            f"deleted_via_professional={self.deleted_via_professional})>"
        )
