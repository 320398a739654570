from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from api.main import create_app
from config import Settings


@pytest.fixture
def client():
    app = create_app(Settings(max_sessions=10, log_level="WARNING"))
    with TestClient(app) as c:
        yield c


def test_health(client):
    resp = client.get("/health")

    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"
    assert resp.json()["sessions"] == 0


def test_evaluate_default_session(client):
    resp = client.post("/evaluate", json={"expression": "2 + 3 * 4"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["session_id"] == "default"
    assert body["value"] == 14.0
    assert body["display"] == "14"
    assert body["assigned"] is None


def test_assignment_persists_within_session_only(client):
    resp = client.post("/evaluate", json={"expression": "x = 5", "session_id": "s1"})
    assert resp.json()["assigned"] == "x"

    resp = client.post("/evaluate", json={"expression": "x * 2", "session_id": "s1"})
    assert resp.json()["value"] == 10.0

    resp = client.post("/evaluate", json={"expression": "x", "session_id": "s2"})
    assert resp.status_code == 422
    assert resp.json()["kind"] == "UnknownIdentifier"


def test_syntax_error_maps_to_400(client):
    resp = client.post("/evaluate", json={"expression": "(2 + 3"})

    assert resp.status_code == 400
    assert resp.json()["kind"] == "SyntaxError"


def test_division_by_zero_maps_to_422(client):
    resp = client.post("/evaluate", json={"expression": "5 / 0"})

    assert resp.status_code == 422
    assert resp.json() == {"detail": "Division by zero", "kind": "DivisionByZero"}


def test_infinite_result_has_null_value(client):
    resp = client.post("/evaluate", json={"expression": "10 ** 308 * 10"})

    assert resp.status_code == 200
    assert resp.json()["value"] is None
    assert resp.json()["display"] == "inf"


def test_explain_returns_postfix_and_steps(client):
    resp = client.post("/explain", json={"expression": "-(2 + 3) * 2"})

    assert resp.status_code == 200
    body = resp.json()
    assert body["value"] == -10.0
    assert body["postfix"] == ["2", "3", "+", "neg", "2", "*"]
    assert body["steps"] == ["2 + 3 = 5", "-(5) = -5", "-5 * 2 = -10"]


def test_list_variables(client):
    client.post("/evaluate", json={"expression": "y = 2 ** 10", "session_id": "vars"})

    resp = client.get("/sessions/vars/variables")

    assert resp.status_code == 200
    assert resp.json() == {"session_id": "vars", "variables": {"y": 1024.0}}


def test_list_variables_of_unknown_session_is_404(client):
    resp = client.get("/sessions/nope/variables")

    assert resp.status_code == 404


def test_drop_session(client):
    client.post("/evaluate", json={"expression": "1", "session_id": "tmp"})

    first = client.delete("/sessions/tmp")
    second = client.delete("/sessions/tmp")

    assert first.json() == {"session_id": "tmp", "dropped": True}
    assert second.json()["dropped"] is False
