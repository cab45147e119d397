"""
API tests for /api/contacts
"""
import pytest


@pytest.fixture
def professional_id(client) -> int:
    r = client.post("/api/professionals/", json={"name": "Ana", "role": "Developer", "birth_date": "1990-01-01"})
    assert r.status_code == 201
    return 1


def _create(client, professional_id, **overrides):
    payload = {"name": "Mobile", "contact": "+55 11 91111-0000", "professional_id": professional_id}
    payload.update(overrides)
    return client.post("/api/contacts/", json=payload)


def test_create_and_get(client, professional_id):
    r = _create(client, professional_id)

    assert r.status_code == 201
    assert r.json() == {"success": True, "message": "Contact with ID 1 created successfully!"}
    body = client.get("/api/contacts/1").json()
    assert set(body) == {"id", "name", "contact", "created_at", "professional_id"}
    assert body["professional_id"] == professional_id


def test_create_validation_failure(client, professional_id):
    r = _create(client, professional_id, name=" ", contact="")

    assert r.status_code == 400
    assert r.json()["message"] == (
        "Validation errors: name - must not be blank.contact - must not be blank."
    )


def test_create_with_non_numeric_professional_id(client, professional_id):
    r = _create(client, "x")

    assert r.status_code == 400
    assert r.json()["success"] is False
    assert "professional_id - " in r.json()["message"]


def test_create_for_unknown_professional(client):
    r = _create(client, 42)

    assert r.status_code == 404
    assert r.json()["message"] == "Professional not found for adding contact"
    assert client.get("/api/contacts/").json() == []


def test_create_for_deleted_professional(client, professional_id):
    client.delete(f"/api/professionals/{professional_id}")

    r = _create(client, professional_id)

    assert r.status_code == 404


def test_list_query(client, professional_id):
    _create(client, professional_id, name="Mobile")
    _create(client, professional_id, name="E-mail", contact="ana@example.com")

    r = client.get("/api/contacts/", params={"q": "EXAMPLE", "fields": ["name"]})

    assert r.json() == [{"name": "E-mail"}]


def test_update(client, professional_id):
    _create(client, professional_id)

    r = client.put("/api/contacts/1", json={
        "name": "Home",
        "contact": "+55 11 3333-0000",
        "professional_id": professional_id,
    })

    assert r.status_code == 200
    assert r.json()["message"] == "Contact updated successfully!"
    assert client.get("/api/contacts/1", params={"fields": ["name"]}).json() == {"name": "Home"}


def test_update_missing(client, professional_id):
    r = client.put("/api/contacts/3", json={"name": "x", "contact": "y", "professional_id": professional_id})

    assert r.status_code == 404
    assert r.json()["message"] == "Contact not found for update"


def test_delete_is_physical(client, db, professional_id):
    from app.models.contact import Contact

    _create(client, professional_id)

    r = client.delete("/api/contacts/1")

    assert r.status_code == 200
    assert r.json()["message"] == "Contact deleted successfully!"
    assert db.get(Contact, 1) is None


def test_delete_missing(client):
    r = client.delete("/api/contacts/8")

    assert r.status_code == 404
    assert r.json()["message"] == "Contact with ID 8 not found."
    assert r.json()["details"] == "uri=/api/contacts/8"
