"""
Contract models shared by the lifecycle services and the HTTP layer.

`ApiResponse` is the uniform result of every mutation. The `*Record` models are
the inbound payloads; they declare their own structural constraints so the
validator never has to introspect them.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Any, Iterable, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field


class ApiResponse(BaseModel):
    """Success flag plus a human readable message. Immutable."""
    model_config = ConfigDict(frozen=True)

    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "ApiResponse":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str) -> "ApiResponse":
        return cls(success=False, message=message)


class Constraint(ABC):
    """A single structural rule applied to one field value"""
    message: str = ""

    @abstractmethod
    def is_satisfied(self, value: Any) -> bool:
        ...


class NotNull(Constraint):
    message = "must not be null"

    def is_satisfied(self, value: Any) -> bool:
        return value is not None


class NotBlank(Constraint):
    message = "must not be blank"

    def is_satisfied(self, value: Any) -> bool:
        return value is not None and str(value).strip() != ""


NOT_NULL = NotNull()
NOT_BLANK = NotBlank()

FieldCheck = Tuple[str, Any, Constraint]


class Validatable(ABC):
    """Capability of records that can be checked by `RecordValidator`"""

    @abstractmethod
    def constraints(self) -> Iterable[FieldCheck]:
        """Ordered (field path, value, constraint) entries to check"""


class ProfessionalRecord(BaseModel, Validatable):
    """Inbound professional payload (create and update)"""
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, description="Full name")
    role: Optional[str] = Field(
        default=None,
        description="Developer, Designer, Support or Tester (case-insensitive)"
    )
    birth_date: Optional[date] = Field(default=None, description="Birth date (YYYY-MM-DD)")
    # Accepted for compatibility with clients echoing read payloads; never stored
    created_at: Optional[datetime] = None

    def constraints(self) -> Iterable[FieldCheck]:
        return (
            ("name", self.name, NOT_BLANK),
            ("role", self.role, NOT_BLANK),
            ("birth_date", self.birth_date, NOT_NULL),
        )


class ContactRecord(BaseModel, Validatable):
    """Inbound contact payload (create and update)"""
    id: Optional[int] = None
    name: Optional[str] = Field(default=None, description="Contact label, e.g. 'Work phone'")
    contact: Optional[str] = Field(default=None, description="Phone number, e-mail, ...")
    professional_id: Optional[int] = Field(default=None, description="Owning professional")
    created_at: Optional[datetime] = None

    def constraints(self) -> Iterable[FieldCheck]:
        return (
            ("name", self.name, NOT_BLANK),
            ("contact", self.contact, NOT_BLANK),
            ("professional_id", self.professional_id, NOT_NULL),
        )
