"""
Professional deletion saga

Soft-deleting a professional touches the professional and every contact that
points at it. The store gives no cross-record transaction, so the work is
split into steps that can be re-run safely:

    1. flag contacts    - each contact of the professional gets
                          deleted_via_professional=True, one save per contact;
                          contacts already flagged are skipped
    2. mark deleted     - the professional gets deleted=True and deleted_at

The professional is written last. If the process dies during step 1 the
professional is still active while some of its contacts are already flagged
(hidden). Repeating the soft delete, or `ProfessionalService.reconcile_contacts`,
finishes the job.
"""
from dataclasses import dataclass
from typing import Optional

from app.core.logging_config import LoggingConfig
from app.core.metrics import (contacts_cascaded_total,
                              professionals_soft_deleted_total)
from app.models.contact import Contact
from app.models.professional import Professional
from app.repositories.base_repository import BaseRepository
from app.utils.datetime_utils import Clock

logger = LoggingConfig.get_logger(__name__)


@dataclass
class CascadeReport:
    """Outcome of a cascade run"""
    professional_id: int
    matched_contacts: int = 0
    updated_contacts: int = 0
    professional_marked: bool = False


class ProfessionalDeletionSaga:
    """Runs the soft-delete steps for one professional"""

    def __init__(
        self,
        professionals: BaseRepository[Professional],
        contacts: BaseRepository[Contact],
        clock: Clock,
    ):
        self.professionals = professionals
        self.contacts = contacts
        self.clock = clock

    def flag_contacts(self, professional_id: int, report: Optional[CascadeReport] = None) -> CascadeReport:
        """Step 1: mark every contact owned by the professional"""
        report = report or CascadeReport(professional_id=professional_id)

        for contact in self.contacts.find_all():
            if contact.professional_id != professional_id:
                continue
            report.matched_contacts += 1
            if contact.deleted_via_professional:
                continue
            contact.deleted_via_professional = True
            self.contacts.save(contact)
            report.updated_contacts += 1
            logger.debug(
                "Contact flagged through professional deletion",
                extra={"contact_id": contact.id, "professional_id": professional_id}
            )

        if report.updated_contacts:
            contacts_cascaded_total.inc(report.updated_contacts)
        return report

    def is_interrupted(self, professional: Professional) -> bool:
        """Active professional with contacts already flagged by an unfinished run"""
        if professional.deleted:
            return False
        return any(
            contact.professional_id == professional.id and contact.deleted_via_professional
            for contact in self.contacts.find_all()
        )

    def mark_deleted(self, professional: Professional, report: CascadeReport) -> CascadeReport:
        """Step 2: set the deleted flag and timestamp together"""
        professional.deleted = True
        professional.deleted_at = self.clock.now()
        self.professionals.save(professional)
        professionals_soft_deleted_total.inc()
        report.professional_marked = True
        return report

    def run(self, professional: Professional) -> CascadeReport:
        report = self.flag_contacts(professional.id)
        self.mark_deleted(professional, report)

        logger.info(
            f"Cascade finished for professional {professional.id}",
            extra={
                "professional_id": professional.id,
                "matched_contacts": report.matched_contacts,
                "updated_contacts": report.updated_contacts,
            }
        )
        return report
