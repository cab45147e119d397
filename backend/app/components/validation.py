"""
Validators run before every mutation.

`RecordValidator` applies the constraints a `Validatable` record declares and
reports the outcome as an `ApiResponse`; it never raises for invalid input.
`ProfessionalValidator` adds role normalization on top.
"""

from __future__ import annotations

from typing import Optional

from app.components.contracts import ApiResponse, ProfessionalRecord, Validatable
from app.models.professional import ACCEPTED_ROLES, ProfessionalRole

VALIDATION_SUCCEEDED = "Validation succeeded."
VALIDATION_ERRORS_PREFIX = "Validation errors: "
ROLE_NOT_ALLOWED = (
    "Professional role must be one of: "
    + ", ".join(role.value for role in ProfessionalRole)
    + "."
)


class RecordValidator:
    """Generic structural validator for any `Validatable` record"""

    def validate(self, record: Validatable) -> ApiResponse:
        violations = [
            f"{path} - {constraint.message}."
            for path, value, constraint in record.constraints()
            if not constraint.is_satisfied(value)
        ]
        if violations:
            return ApiResponse.fail(VALIDATION_ERRORS_PREFIX + "".join(violations))
        return ApiResponse.ok(VALIDATION_SUCCEEDED)


def normalize_role(role: Optional[str]) -> Optional[str]:
    """Capitalize the first letter and lowercase the rest ("dEsIgNeR" -> "Designer")"""
    if role is None:
        return None
    role = role.strip()
    if not role:
        return role
    return role[:1].upper() + role[1:].lower()


class ProfessionalValidator(RecordValidator):
    """Role check followed by the structural checks"""

    def validate(self, record: ProfessionalRecord) -> ApiResponse:
        """
        Validate a professional payload.

        The normalized role is written back to ``record`` so the caller stores
        the canonical spelling.
        """
        normalized = normalize_role(record.role)
        if normalized not in ACCEPTED_ROLES:
            return ApiResponse.fail(ROLE_NOT_ALLOWED)

        record.role = normalized
        return super().validate(record)
