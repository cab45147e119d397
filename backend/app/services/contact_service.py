"""
Contact Service - lifecycle of contact records
"""
from typing import List, Optional

from app.components.contracts import ApiResponse, ContactRecord
from app.components.validation import RecordValidator
from app.core.exceptions import ResourceNotFoundError
from app.core.logging_config import LoggingConfig
from app.core.metrics import (contacts_hard_deleted_total,
                              records_created_total, validation_failures_total)
from app.models.contact import Contact
from app.models.professional import Professional
from app.repositories.base_repository import BaseRepository
from app.utils.datetime_utils import Clock

logger = LoggingConfig.get_logger(__name__)

PROFESSIONAL_NOT_FOUND_FOR_CONTACT = "Professional not found for adding contact"


class ContactService:
    """Create, update, read and remove contacts"""

    def __init__(
        self,
        contacts: BaseRepository[Contact],
        professionals: BaseRepository[Professional],
        validator: RecordValidator,
        clock: Clock,
    ):
        self.contacts = contacts
        self.professionals = professionals
        self.validator = validator
        self.clock = clock

    def list(self, q: Optional[str] = None) -> List[Contact]:
        """
        List contacts whose professional is not deleted

        Args:
            q: Optional text matched against name, contact info and the
               owning professional id

        Returns:
            Matching contacts ordered by id
        """
        if q:
            return self.contacts.find_by_query(q)
        return self.contacts.find_all_active()

    def get_active(self, contact_id: int) -> Contact:
        """Get an active contact or raise ResourceNotFoundError"""
        contact = self.contacts.find_by_id_active(contact_id)
        if contact is None:
            logger.warning("Contact not found", extra={"contact_id": contact_id})
            raise ResourceNotFoundError("Contact not found")
        return contact

    def _validate(self, record: ContactRecord) -> ApiResponse:
        result = self.validator.validate(record)
        if not result.success:
            validation_failures_total.labels(entity="contact").inc()
            logger.info(
                "Contact rejected by validation",
                extra={"contact_id": record.id, "reason": result.message}
            )
        return result

    def _require_active_professional(self, professional_id: int) -> Professional:
        professional = self.professionals.find_by_id_active(professional_id)
        if professional is None:
            logger.warning(PROFESSIONAL_NOT_FOUND_FOR_CONTACT, extra={"professional_id": professional_id})
            raise ResourceNotFoundError(PROFESSIONAL_NOT_FOUND_FOR_CONTACT)
        return professional

    def create(self, record: ContactRecord) -> ApiResponse:
        """
        Create a contact for an active professional

        Raises:
            ResourceNotFoundError: If the professional is missing or deleted
        """
        validation = self._validate(record)
        if not validation.success:
            return validation

        self._require_active_professional(record.professional_id)

        contact = Contact(
            name=record.name,
            contact=record.contact,
            professional_id=record.professional_id,
            created_at=self.clock.now(),
            deleted_via_professional=False,
        )
        self.contacts.save(contact)
        records_created_total.labels(entity="contact").inc()

        logger.info(
            f"Created contact with ID {contact.id}",
            extra={"contact_id": contact.id, "professional_id": contact.professional_id, "operation": "create"}
        )
        return ApiResponse.ok(f"Contact with ID {contact.id} created successfully!")

    def update(self, record: ContactRecord) -> ApiResponse:
        """
        Update an active contact, keeping its creation timestamp

        Moving the contact to another professional requires that professional
        to be active.

        Raises:
            ResourceNotFoundError: If the contact or the new professional is
                missing or inactive
        """
        validation = self._validate(record)
        if not validation.success:
            return validation

        existing = self.contacts.find_by_id_active(record.id) if record.id is not None else None
        if existing is None:
            logger.warning("Contact not found for update", extra={"contact_id": record.id})
            raise ResourceNotFoundError("Contact not found for update")

        if record.professional_id != existing.professional_id:
            self._require_active_professional(record.professional_id)

        existing.name = record.name
        existing.contact = record.contact
        existing.professional_id = record.professional_id
        self.contacts.save(existing)

        logger.info(
            f"Updated contact with ID {existing.id}",
            extra={"contact_id": existing.id, "operation": "update"}
        )
        return ApiResponse.ok("Contact updated successfully!")

    def hard_delete(self, contact_id: int) -> ApiResponse:
        """
        Physically remove an active contact

        Unlike professionals, contacts are not soft-deleted.

        Raises:
            ResourceNotFoundError: If the contact is missing or inactive
        """
        if self.contacts.find_by_id_active(contact_id) is None:
            message = f"Contact with ID {contact_id} not found."
            logger.warning(message, extra={"contact_id": contact_id})
            raise ResourceNotFoundError(message)

        self.contacts.delete_by_id(contact_id)
        contacts_hard_deleted_total.inc()

        logger.info(
            f"Deleted contact with ID {contact_id}",
            extra={"contact_id": contact_id, "operation": "hard_delete"}
        )
        return ApiResponse.ok("Contact deleted successfully!")

    # The HTTP layer speaks of "delete"
    delete = hard_delete
