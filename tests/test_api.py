"""API tests against a JSON store in a temp dir."""

import json

import pytest
from fastapi.testclient import TestClient

from api.main import app


@pytest.fixture
def store_file(tmp_path, monkeypatch):
    path = tmp_path / "contacts.json"
    monkeypatch.setenv("CONTATOS_STORE_PATH", str(path))
    return path


@pytest.fixture
def client(store_file):
    app.state.service = None
    with TestClient(app) as c:
        yield c
    app.state.service = None


def _body(name: str, phone: str) -> dict:
    return {"fullName": name, "phoneNumber": phone}


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_empty_store_lists_nothing(client, store_file):
    assert client.get("/contacts").json() == []
    assert json.loads(store_file.read_text(encoding="utf-8")) == []


def test_create_formats_and_persists(client, store_file):
    r = client.post("/contacts", json=_body("Ana Silva", "11987654321"))
    assert r.status_code == 201
    assert r.json() == {
        "index": 0,
        "fullName": "Ana Silva",
        "phoneNumber": "(11) 98765-4321",
        "phoneE164": "+5511987654321",
    }
    assert json.loads(store_file.read_text(encoding="utf-8")) == [
        {"fullName": "Ana Silva", "phoneNumber": "(11) 98765-4321"}
    ]


def test_create_invalid_returns_400(client):
    r = client.post("/contacts", json=_body("Ana", "(11) 90000-0000"))
    assert r.status_code == 400
    assert "Invalid phone" in r.json()["detail"]
    r = client.post("/contacts", json=_body("", "11987654321"))
    assert r.status_code == 400
    assert r.json()["detail"] == "Full name and phone number are required."
    assert client.get("/contacts").json() == []


def test_create_missing_body_field_returns_422(client):
    r = client.post("/contacts", json={"fullName": "Ana"})
    assert r.status_code == 422


def test_get_update_delete(client, store_file):
    client.post("/contacts", json=_body("Ana", "11987654321"))
    client.post("/contacts", json=_body("Bruno", "2123456789"))

    r = client.get("/contacts/1")
    assert r.status_code == 200
    assert r.json()["fullName"] == "Bruno"

    r = client.put("/contacts/1", json=_body("Bruno Lima", "(21) 91234-5678"))
    assert r.status_code == 200
    assert r.json()["phoneNumber"] == "(21) 91234-5678"

    r = client.delete("/contacts/0")
    assert r.status_code == 204
    assert [c["fullName"] for c in client.get("/contacts").json()] == ["Bruno Lima"]
    assert json.loads(store_file.read_text(encoding="utf-8")) == [
        {"fullName": "Bruno Lima", "phoneNumber": "(21) 91234-5678"}
    ]


def test_missing_index_returns_404(client):
    assert client.get("/contacts/0").status_code == 404
    assert client.put("/contacts/0", json=_body("Ana", "11987654321")).status_code == 404
    assert client.delete("/contacts/0").status_code == 404


def test_update_invalid_returns_400(client):
    client.post("/contacts", json=_body("Ana", "11987654321"))
    r = client.put("/contacts/0", json=_body("Ana", "(01) 98765-4321"))
    assert r.status_code == 400
    assert client.get("/contacts/0").json()["phoneNumber"] == "(11) 98765-4321"


def test_legacy_store_loaded_leniently(tmp_path, monkeypatch):
    path = tmp_path / "contacts.json"
    path.write_text(
        json.dumps(
            [
                {"fullName": "Ana", "phoneNumber": "11987654321"},
                {"fullName": "Legacy", "phoneNumber": "(01) 0000-0000"},
            ]
        ),
        encoding="utf-8",
    )
    monkeypatch.setenv("CONTATOS_STORE_PATH", str(path))
    app.state.service = None
    with TestClient(app) as client:
        items = client.get("/contacts").json()
    app.state.service = None
    assert [(i["phoneNumber"], i["phoneE164"]) for i in items] == [
        ("(11) 98765-4321", "+5511987654321"),
        ("(01) 0000-0000", None),
    ]


@pytest.mark.parametrize(
    "value, formatted, valid",
    [
        ("", "", False),
        ("1", "(1", False),
        ("11987", "(11) 987", False),
        ("11987654321", "(11) 98765-4321", True),
        ("(11) 3456-7890", "(11) 3456-7890", True),
    ],
)
def test_phone_format_endpoint(client, value, formatted, valid):
    r = client.get("/phone/format", params={"value": value})
    assert r.status_code == 200
    assert r.json() == {"formatted": formatted, "valid": valid}


def test_name_that_cannot_be_saved_is_rejected(client, store_file):
    client.post("/contacts", json=_body("Ana", "11987654321"))
    r = client.post(
        "/contacts",
        content='{"fullName": "\\ud800", "phoneNumber": "11987654321"}',
        headers={"Content-Type": "application/json"},
    )
    # Body validation may reject the text before the service does.
    assert r.status_code in (400, 422)
    r = client.get("/contacts")
    assert r.status_code == 200
    assert [c["fullName"] for c in r.json()] == ["Ana"]
    assert json.loads(store_file.read_text(encoding="utf-8"))[0]["fullName"] == "Ana"
