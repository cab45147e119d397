"""
Unit tests for ContactService
"""
import re
from datetime import date, datetime

import pytest

from app.components.contracts import ContactRecord, ProfessionalRecord
from app.core.exceptions import ResourceNotFoundError
from app.services.contact_service import (PROFESSIONAL_NOT_FOUND_FOR_CONTACT,
                                          ContactService)


def _created_id(response) -> int:
    return int(re.search(r"ID (\d+)", response.message).group(1))


@pytest.fixture
def owner_id(professional_service) -> int:
    response = professional_service.create(
        ProfessionalRecord(name="Ana", role="Developer", birth_date=date(1990, 1, 1))
    )
    return _created_id(response)


def _record(professional_id, **overrides):
    data = {"name": "Work phone", "contact": "+55 11 4000-0000", "professional_id": professional_id}
    data.update(overrides)
    return ContactRecord(**data)


class TestCreate:

    def test_create(self, contact_service: ContactService, contacts_repo, owner_id, clock):
        response = contact_service.create(_record(owner_id, created_at=datetime(2001, 1, 1)))

        assert response.success is True
        contact_id = _created_id(response)
        assert response.message == f"Contact with ID {contact_id} created successfully!"
        stored = contacts_repo.find_by_id(contact_id)
        assert stored.professional_id == owner_id
        assert stored.created_at == clock.now()
        assert stored.deleted_via_professional is False

    def test_validation_failure(self, contact_service, contacts_repo, owner_id):
        response = contact_service.create(_record(owner_id, contact="  "))

        assert response.success is False
        assert response.message == "Validation errors: contact - must not be blank."
        assert contacts_repo.find_all() == []

    def test_missing_professional_id_is_a_validation_failure(self, contact_service):
        response = contact_service.create(_record(None))

        assert response.success is False
        assert response.message == "Validation errors: professional_id - must not be null."

    def test_unknown_professional(self, contact_service, contacts_repo):
        with pytest.raises(ResourceNotFoundError) as exc:
            contact_service.create(_record(404))

        assert exc.value.message == PROFESSIONAL_NOT_FOUND_FOR_CONTACT
        assert contacts_repo.find_all() == []

    def test_deleted_professional(self, contact_service, professional_service, contacts_repo, owner_id):
        professional_service.soft_delete(owner_id)

        with pytest.raises(ResourceNotFoundError) as exc:
            contact_service.create(_record(owner_id))

        assert exc.value.message == "Professional not found for adding contact"
        assert contacts_repo.find_all() == []


class TestRead:

    def test_get_active(self, contact_service, owner_id):
        contact_id = _created_id(contact_service.create(_record(owner_id)))

        assert contact_service.get_active(contact_id).name == "Work phone"

    def test_get_active_flagged(self, contact_service, professional_service, owner_id):
        contact_id = _created_id(contact_service.create(_record(owner_id)))
        professional_service.soft_delete(owner_id)

        with pytest.raises(ResourceNotFoundError) as exc:
            contact_service.get_active(contact_id)

        assert exc.value.message == "Contact not found"

    def test_list_filters(self, contact_service, professional_service, owner_id):
        other_id = _created_id(professional_service.create(
            ProfessionalRecord(name="Bruno", role="Tester", birth_date=date(1980, 1, 1))
        ))
        contact_service.create(_record(owner_id, name="Mobile", contact="+55 11 91111-0000"))
        contact_service.create(_record(owner_id, name="E-mail", contact="ana@example.com"))
        contact_service.create(_record(other_id, name="E-mail", contact="bruno@example.com"))

        assert [c.contact for c in contact_service.list("e-MAIL")] == ["ana@example.com", "bruno@example.com"]
        assert [c.contact for c in contact_service.list("bruno")] == ["bruno@example.com"]

        professional_service.soft_delete(other_id)

        assert [c.name for c in contact_service.list()] == ["Mobile", "E-mail"]
        assert [c.contact for c in contact_service.list("example")] == ["ana@example.com"]


class TestUpdate:

    def test_update_keeps_created_at(self, contact_service, contacts_repo, owner_id, clock):
        contact_id = _created_id(contact_service.create(_record(owner_id)))
        created_at = contacts_repo.find_by_id(contact_id).created_at
        clock.advance(days=1)

        response = contact_service.update(_record(
            owner_id, id=contact_id, name="Home phone", created_at=datetime(1990, 1, 1)
        ))

        assert response.success is True
        assert response.message == "Contact updated successfully!"
        stored = contacts_repo.find_by_id(contact_id)
        assert stored.name == "Home phone"
        assert stored.created_at == created_at
        assert stored.deleted_via_professional is False

    def test_update_missing(self, contact_service, owner_id):
        with pytest.raises(ResourceNotFoundError) as exc:
            contact_service.update(_record(owner_id, id=77))

        assert exc.value.message == "Contact not found for update"

    def test_update_flagged_contact(self, contact_service, professional_service, owner_id):
        contact_id = _created_id(contact_service.create(_record(owner_id)))
        professional_service.soft_delete(owner_id)

        with pytest.raises(ResourceNotFoundError):
            contact_service.update(_record(owner_id, id=contact_id))

    def test_move_to_deleted_professional(self, contact_service, professional_service, contacts_repo, owner_id):
        other_id = _created_id(professional_service.create(
            ProfessionalRecord(name="Bruno", role="Tester", birth_date=date(1980, 1, 1))
        ))
        professional_service.soft_delete(other_id)
        contact_id = _created_id(contact_service.create(_record(owner_id)))

        with pytest.raises(ResourceNotFoundError) as exc:
            contact_service.update(_record(other_id, id=contact_id))

        assert exc.value.message == PROFESSIONAL_NOT_FOUND_FOR_CONTACT
        assert contacts_repo.find_by_id(contact_id).professional_id == owner_id

    def test_update_validation_failure(self, contact_service, contacts_repo, owner_id):
        contact_id = _created_id(contact_service.create(_record(owner_id)))

        response = contact_service.update(_record(owner_id, id=contact_id, name=""))

        assert response.success is False
        assert contacts_repo.find_by_id(contact_id).name == "Work phone"


class TestHardDelete:

    def test_removes_record(self, contact_service, contacts_repo, owner_id):
        contact_id = _created_id(contact_service.create(_record(owner_id)))

        response = contact_service.hard_delete(contact_id)

        assert response.success is True
        assert response.message == "Contact deleted successfully!"
        assert contacts_repo.find_by_id(contact_id) is None

    def test_missing(self, contact_service):
        with pytest.raises(ResourceNotFoundError) as exc:
            contact_service.delete(12)

        assert exc.value.message == "Contact with ID 12 not found."

    def test_flagged_contact_is_not_removed(self, contact_service, professional_service, contacts_repo, owner_id):
        contact_id = _created_id(contact_service.create(_record(owner_id)))
        professional_service.soft_delete(owner_id)

        with pytest.raises(ResourceNotFoundError):
            contact_service.hard_delete(contact_id)

        assert contacts_repo.find_by_id(contact_id) is not None
