"""
Professional Service - lifecycle of professional records

Active --soft_delete--> Deleted (terminal, there is no restore)
"""
from typing import List, Optional

from app.components.contracts import ApiResponse, ProfessionalRecord
from app.components.validation import ProfessionalValidator
from app.core.exceptions import ResourceNotFoundError
from app.core.logging_config import LoggingConfig
from app.core.metrics import records_created_total, validation_failures_total
from app.models.contact import Contact
from app.models.professional import Professional
from app.repositories.base_repository import BaseRepository
from app.services.deletion_saga import CascadeReport, ProfessionalDeletionSaga
from app.utils.datetime_utils import Clock

logger = LoggingConfig.get_logger(__name__)


class ProfessionalService:
    """Create, update, read and soft-delete professionals"""

    def __init__(
        self,
        professionals: BaseRepository[Professional],
        contacts: BaseRepository[Contact],
        validator: ProfessionalValidator,
        clock: Clock,
    ):
        """
        Initialize Professional Service

        Args:
            professionals: Professional store
            contacts: Contact store, scanned by the deletion cascade
            validator: Role and structural validator
            clock: Source of creation and deletion timestamps
        """
        self.professionals = professionals
        self.contacts = contacts
        self.validator = validator
        self.clock = clock
        self.deletion_saga = ProfessionalDeletionSaga(professionals, contacts, clock)

    def list(self, q: Optional[str] = None) -> List[Professional]:
        """
        List professionals that are not deleted

        Args:
            q: Optional text matched (case-insensitive) against name, role
               and birth date

        Returns:
            Active professionals ordered by id
        """
        if q:
            return self.professionals.find_by_query(q)
        return self.professionals.find_all_active()

    def get_active(self, professional_id: int) -> Professional:
        """Get an active professional or raise ResourceNotFoundError"""
        professional = self.professionals.find_by_id_active(professional_id)
        if professional is None:
            logger.warning("Professional not found", extra={"professional_id": professional_id})
            raise ResourceNotFoundError("Professional not found")
        return professional

    def _validate(self, record: ProfessionalRecord) -> ApiResponse:
        result = self.validator.validate(record)
        if not result.success:
            validation_failures_total.labels(entity="professional").inc()
            logger.info(
                "Professional rejected by validation",
                extra={"professional_id": record.id, "reason": result.message}
            )
        return result

    def create(self, record: ProfessionalRecord) -> ApiResponse:
        """
        Create a professional

        Any caller-supplied id or creation timestamp is ignored.

        Returns:
            Success envelope carrying the new id, or the validation failure
        """
        validation = self._validate(record)
        if not validation.success:
            return validation

        professional = Professional(
            name=record.name,
            role=record.role,
            birth_date=record.birth_date,
            created_at=self.clock.now(),
            deleted=False,
            deleted_at=None,
        )
        self.professionals.save(professional)
        records_created_total.labels(entity="professional").inc()

        logger.info(
            f"Created professional with ID {professional.id}",
            extra={"professional_id": professional.id, "operation": "create"}
        )
        return ApiResponse.ok(f"Professional with ID {professional.id} created successfully!")

    def update(self, record: ProfessionalRecord) -> ApiResponse:
        """
        Update name, role and birth date of an active professional

        The stored creation timestamp is kept whatever the payload says.

        Raises:
            ResourceNotFoundError: If the professional is missing or deleted
        """
        validation = self._validate(record)
        if not validation.success:
            return validation

        existing = self.professionals.find_by_id_active(record.id) if record.id is not None else None
        if existing is None:
            logger.warning("Professional not found for update", extra={"professional_id": record.id})
            raise ResourceNotFoundError("Professional not found for update")

        existing.name = record.name
        existing.role = record.role
        existing.birth_date = record.birth_date
        self.professionals.save(existing)

        logger.info(
            f"Updated professional with ID {existing.id}",
            extra={"professional_id": existing.id, "operation": "update"}
        )
        return ApiResponse.ok("Professional updated successfully!")

    def soft_delete(self, professional_id: int) -> ApiResponse:
        """
        Mark a professional deleted and flag its contacts

        A professional that never existed and one that is already deleted
        produce the same error.

        Raises:
            ResourceNotFoundError: If the professional is missing or deleted
        """
        error_message = f"Professional not found with ID {professional_id}"
        professional = self.professionals.find_by_id(professional_id)
        if professional is None or professional.deleted:
            logger.warning(error_message, extra={"professional_id": professional_id})
            raise ResourceNotFoundError(error_message)

        self.deletion_saga.run(professional)

        logger.info(
            f"Logically deleted professional with ID {professional_id}: {professional.name}",
            extra={"professional_id": professional_id, "operation": "soft_delete"}
        )
        return ApiResponse.ok("Professional deleted successfully!")

    # The HTTP layer speaks of "delete"
    delete = soft_delete

    def reconcile_contacts(self, professional_id: int) -> CascadeReport:
        """
        Bring a professional and its contacts back in line

        - deleted professional: flag any contact still active (data written
          before the cascade existed, or edited by hand)
        - active professional with flagged contacts: a soft delete died
          mid-cascade; it is finished
        - active professional without flagged contacts: nothing to do

        Safe to run repeatedly.

        Returns:
            CascadeReport; ``professional_marked`` tells whether the
            professional ends up deleted

        Raises:
            ResourceNotFoundError: If the professional does not exist
        """
        professional = self.professionals.find_by_id(professional_id)
        if professional is None:
            raise ResourceNotFoundError(f"Professional not found with ID {professional_id}")

        if professional.deleted:
            report = self.deletion_saga.flag_contacts(professional_id)
            report.professional_marked = True
        elif self.deletion_saga.is_interrupted(professional):
            logger.warning(
                f"Finishing interrupted deletion of professional {professional_id}",
                extra={"professional_id": professional_id}
            )
            report = self.deletion_saga.run(professional)
        else:
            report = CascadeReport(professional_id=professional_id)

        logger.info(
            f"Reconciled contacts of professional {professional_id}",
            extra={
                "professional_id": professional_id,
                "updated_contacts": report.updated_contacts,
                "professional_marked": report.professional_marked,
            }
        )
        return report
