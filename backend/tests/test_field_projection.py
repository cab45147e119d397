"""
Unit tests for FieldProjector
"""
from datetime import date, datetime

import pytest

from app.components.field_projection import FieldProjector
from app.models.contact import Contact
from app.models.professional import Professional


@pytest.fixture
def projector():
    return FieldProjector.default()


@pytest.fixture
def professional():
    return Professional(
        id=7,
        name="Ana",
        role="Developer",
        birth_date=date(1990, 1, 1),
        created_at=datetime(2024, 1, 2, 3, 4, 5),
        deleted=True,
        deleted_at=datetime(2024, 2, 1),
    )


@pytest.fixture
def contact():
    return Contact(
        id=3,
        name="Work phone",
        contact="+55 11 4000-0000",
        created_at=datetime(2024, 1, 2),
        professional_id=7,
        deleted_via_professional=False,
    )


class TestProjectAll:

    def test_professional_hides_deletion_bookkeeping(self, projector, professional):
        view = projector.project_all(professional)

        assert list(view) == ["id", "name", "role", "birth_date", "created_at"]
        assert view["name"] == "Ana"
        assert "deleted" not in view
        assert "deleted_at" not in view

    def test_contact_fields(self, projector, contact):
        view = projector.project_all(contact)

        assert view == {
            "id": 3,
            "name": "Work phone",
            "contact": "+55 11 4000-0000",
            "created_at": datetime(2024, 1, 2),
            "professional_id": 7,
        }

    def test_does_not_mutate_record(self, projector, contact):
        view = projector.project_all(contact)
        view["name"] = "changed"

        assert contact.name == "Work phone"

    def test_unregistered_type(self, projector):
        with pytest.raises(TypeError):
            projector.project_all(object())

    def test_subclass_uses_parent_registration(self):
        class Badge:
            code = "b-1"

        class TemporaryBadge(Badge):
            pass

        projector = FieldProjector({Badge: {"code": lambda b: b.code}})

        assert projector.project_all(TemporaryBadge()) == {"code": "b-1"}


class TestProjectSubset:

    def test_keeps_requested_fields_in_registry_order(self, projector, professional):
        view = projector.project_subset(professional, ["role", "id"])

        assert list(view) == ["id", "role"]

    def test_unknown_fields_dropped(self, projector, professional):
        view = projector.project_subset(professional, ["name", "salary", "deleted"])

        assert view == {"name": "Ana"}

    def test_empty_list_yields_empty_view(self, projector, professional):
        assert projector.project_subset(professional, []) == {}

    @pytest.mark.parametrize("fields", [
        ["id"],
        ["name", "contact"],
        ["professional_id", "created_at", "nope"],
        [],
    ])
    def test_keys_are_intersection(self, projector, contact, fields):
        view = projector.project_subset(contact, fields)

        assert set(view) == set(fields) & set(projector.project_all(contact))

    def test_idempotent(self, projector, contact):
        fields = ["name", "professional_id", "unknown"]
        once = projector.project_subset(contact, fields)

        assert projector.project_subset(once, fields) == once

    def test_raw_mapping_loses_unregistered_keys(self, projector):
        row = {"id": 1, "name": "Ana", "deleted": True, "deleted_at": None}

        assert projector.project_all(row) == {"id": 1, "name": "Ana"}
        assert projector.project_subset(row, ["name", "deleted"]) == {"name": "Ana"}


class TestProjectMany:

    def test_without_fields(self, projector, professional):
        assert projector.project_many([professional]) == [projector.project_all(professional)]

    def test_with_fields(self, projector, professional, contact):
        views = projector.project_many([professional, contact], ["id", "name"])

        assert views == [{"id": 7, "name": "Ana"}, {"id": 3, "name": "Work phone"}]


def test_custom_registration():
    class Badge:
        def __init__(self, code):
            self.code = code

    projector = FieldProjector()
    projector.register(Badge, {"code": lambda b: b.code, "upper": lambda b: b.code.upper()})

    assert projector.project_all(Badge("ab")) == {"code": "ab", "upper": "AB"}
