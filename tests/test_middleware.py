"""Tests for the request logging middleware."""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from structlog.testing import capture_logs

from blogql.api.app import create_app
from blogql.middleware import (
    LoggingContextMiddleware,
    operation_name_from_document,
    sanitize_query_params,
)
from blogql.store import DataStore


@pytest.fixture
def client(store: DataStore) -> Generator[TestClient, None, None]:
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


def _request_events(logs: list[dict]) -> dict[str, dict]:
    return {
        entry["event"]: entry
        for entry in logs
        if entry["event"] in ("Request started", "Request completed", "Request failed")
    }


@pytest.mark.parametrize(
    ("document", "expected"),
    [
        ("query Latest { latestPost { id } }", "Latest"),
        ("mutation AddUser { createUser(username: \"a\", name: \"A\") { id } }", "mutation:AddUser"),
        ("mutation { createUser(username: \"a\", name: \"A\") { id } }", "mutation:anonymous"),
        ("{ posts { id } }", "unnamed_operation"),
    ],
)
def test_operation_name_from_document(document: str, expected: str):
    assert operation_name_from_document(document) == expected


def test_graphql_payload_is_redacted():
    params = {"query": "{ users { id } }", "variables": "{}", "debug": "1"}

    assert sanitize_query_params(params, "/graphql") == {
        "query": "[REDACTED]",
        "variables": "[REDACTED]",
        "debug": "1",
    }


def test_other_paths_are_left_alone():
    params = {"query": "search"}
    assert sanitize_query_params(params, "/health") == params


class TestLoggingContextMiddleware:
    def test_get_request_logs_operation_from_query_string(self, client: TestClient):
        with capture_logs() as logs:
            response = client.get(
                "/graphql", params={"query": "query Latest { latestPost { id } }"}
            )

        assert response.status_code == 200
        events = _request_events(logs)
        started = events["Request started"]
        assert started["graphql_operation"] == "Latest"
        assert started["method"] == "GET"
        assert started["query_params"] == {"query": "[REDACTED]"}
        completed = events["Request completed"]
        assert completed["graphql_operation"] == "Latest"
        assert completed["status_code"] == 200

    def test_post_operation_name_takes_precedence(self, client: TestClient):
        document = "query First { posts { id } } query Second { users { id } }"

        with capture_logs() as logs:
            response = client.post(
                "/graphql", json={"query": document, "operationName": "Second"}
            )

        assert response.status_code == 200
        assert "users" in response.json()["data"]
        events = _request_events(logs)
        assert events["Request started"]["graphql_operation"] == "Second"
        assert events["Request completed"]["graphql_operation"] == "Second"

    def test_post_mutation_without_operation_name(self, client: TestClient):
        with capture_logs() as logs:
            client.post(
                "/graphql",
                json={"query": 'mutation AddUser { createUser(username: "z", name: "Z") { id } }'},
            )

        assert _request_events(logs)["Request started"]["graphql_operation"] == "mutation:AddUser"

    def test_malformed_json_body_has_no_operation(self, client: TestClient):
        with capture_logs() as logs:
            response = client.post(
                "/graphql",
                content=b"{not json",
                headers={"content-type": "application/json"},
            )

        assert response.status_code >= 400
        events = _request_events(logs)
        assert events["Request started"]["graphql_operation"] is None
        assert events["Request completed"]["status_code"] == response.status_code

    def test_non_object_body_has_no_operation(self, client: TestClient):
        with capture_logs() as logs:
            client.post("/graphql", json=[{"query": "{ users { id } }"}])

        assert _request_events(logs)["Request started"]["graphql_operation"] is None

    def test_other_paths_have_no_operation(self, client: TestClient):
        with capture_logs() as logs:
            response = client.get("/health")

        assert response.status_code == 200
        events = _request_events(logs)
        assert events["Request started"]["graphql_operation"] is None
        assert events["Request completed"]["path"] == "/health"

    def test_incoming_request_id_is_echoed(self, client: TestClient):
        response = client.get("/health", headers={"X-Request-ID": "req-123"})

        assert response.headers["X-Request-ID"] == "req-123"

    def test_request_id_is_generated(self, client: TestClient):
        first = client.get("/health").headers["X-Request-ID"]
        second = client.get("/health").headers["X-Request-ID"]

        assert first
        assert first != second

    def test_failing_request_is_logged_and_reraised(self):
        app = FastAPI()
        app.add_middleware(LoggingContextMiddleware)

        @app.get("/boom")
        async def boom():
            raise RuntimeError("boom")

        with capture_logs() as logs, pytest.raises(RuntimeError, match="boom"):
            TestClient(app).get("/boom")

        events = _request_events(logs)
        assert "Request started" in events
        assert "Request completed" not in events
        failed = events["Request failed"]
        assert failed["log_level"] == "error"
        assert failed["path"] == "/boom"
        assert failed["error"] == "boom"
