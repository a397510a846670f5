"""
Tests for the FastAPI session endpoints.
"""

import pytest
from fastapi.testclient import TestClient

import main


@pytest.fixture
def client():
    main.sessions.clear()
    with TestClient(main.app) as test_client:
        yield test_client
    main.sessions.clear()


@pytest.fixture
def session_id(client):
    response = client.post("/api/sessions")
    assert response.status_code == 201
    return response.json()["session_id"]


def send(client, session_id, line, inputs=()):
    response = client.post(
        f"/api/sessions/{session_id}/lines",
        json={"line": line, "inputs": list(inputs)},
    )
    assert response.status_code == 200
    return response.json()


def test_program_persists_between_requests(client, session_id):
    assert send(client, session_id, "10 LET a = 6")["output"] == ""
    send(client, session_id, "20 PRINT a * 7")
    result = send(client, session_id, "RUN")
    assert result["output"] == "42\n"
    assert result["error"] is None
    assert result["variables"] == {"a": 6}


def test_listing(client, session_id):
    send(client, session_id, "20 END")
    send(client, session_id, "10 PRINT 1")
    response = client.get(f"/api/sessions/{session_id}/program")
    assert response.json() == {"lines": ["10 PRINT 1", "20 END"]}


def test_error_is_reported(client, session_id):
    result = send(client, session_id, "PRINT 1/0")
    assert result["error"] == "DIVIDE BY ZERO"
    assert result["finished"] is False


def test_inputs_feed_input_statements(client, session_id):
    result = send(client, session_id, "INPUT n", inputs=["x", "12"])
    assert result["output"] == " ? INVALID NUMBER\n ? "
    assert result["variables"] == {"n": 12}


def test_missing_input(client, session_id):
    result = send(client, session_id, "INPUT n")
    assert result["error"] == "INPUT EXHAUSTED"


def test_infinite_loop_is_stopped(client, session_id, monkeypatch):
    session = main.sessions[session_id]
    monkeypatch.setattr(session, "max_steps", 100)
    send(client, session_id, "10 GOTO 10")
    result = send(client, session_id, "RUN")
    assert result["error"] == "EXECUTION LIMIT EXCEEDED"


def test_quit_ends_session(client, session_id):
    assert send(client, session_id, "QUIT")["finished"] is True
    response = client.post(f"/api/sessions/{session_id}/lines", json={"line": "LIST"})
    assert response.status_code == 404


def test_sessions_are_isolated(client, session_id):
    other = client.post("/api/sessions").json()["session_id"]
    send(client, session_id, "LET x = 1")
    assert send(client, other, "PRINT x")["error"] == "VARIABLE NOT DEFINED"


def test_delete_session(client, session_id):
    assert client.delete(f"/api/sessions/{session_id}").status_code == 204
    assert client.delete(f"/api/sessions/{session_id}").status_code == 404
    assert client.get(f"/api/sessions/{session_id}/program").status_code == 404


def test_examples_run(client, session_id):
    examples = client.get("/api/examples").json()
    for line in examples["countdown"]["code"].splitlines():
        send(client, session_id, line)
    assert send(client, session_id, "RUN")["output"] == "5\n4\n3\n2\n1\n"
