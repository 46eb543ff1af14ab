"""Tests for the FastAPI application."""

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient

from blogql import __version__
from blogql.api.app import build_default_app, create_app
from blogql.config import Settings
from blogql.store import DataStore


@pytest.fixture
def client(store: DataStore) -> Generator[TestClient, None, None]:
    with TestClient(create_app(store=store)) as test_client:
        yield test_client


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "healthy", "version": __version__}


def test_root_redirects_to_graphql(client: TestClient):
    response = client.get("/", follow_redirects=False)

    assert response.status_code in (302, 307)
    assert response.headers["location"] == "/graphql"


def test_graphql_query_over_http(client: TestClient):
    response = client.post(
        "/graphql",
        json={"query": "query Latest { latestPost { id title } }", "operationName": "Latest"},
    )

    assert response.status_code == 200
    assert response.json() == {"data": {"latestPost": {"id": 2, "title": "Second"}}}


def test_graphql_mutation_over_http(client: TestClient, store: DataStore):
    response = client.post(
        "/graphql",
        json={
            "query": 'mutation { createUser(username: "carol", name: "Carol") { id } }',
        },
    )

    assert response.status_code == 200
    assert response.json()["data"] == {"createUser": {"id": 3}}
    assert store.find_user("Carol") is not None


@pytest.mark.integration
def test_loads_bundled_data_when_no_store_given():
    with TestClient(create_app()) as client:
        response = client.post("/graphql", json={"query": "{ users { username } }"})

    assert response.status_code == 200
    assert len(response.json()["data"]["users"]) > 0


def _preflight(client: TestClient, origin: str):
    return client.options(
        "/graphql",
        headers={"Origin": origin, "Access-Control-Request-Method": "POST"},
    )


def test_create_app_uses_given_settings(store: DataStore):
    app_settings = Settings(cors_origins=["http://blog.test"], debug=False)

    app = create_app(store=store, app_settings=app_settings)

    assert app.debug is False
    with TestClient(app) as client:
        allowed = _preflight(client, "http://blog.test")
        denied = _preflight(client, "http://elsewhere.test")

    assert allowed.headers["access-control-allow-origin"] == "http://blog.test"
    assert "access-control-allow-origin" not in denied.headers


def test_build_default_app_reads_environment(monkeypatch: pytest.MonkeyPatch):
    logging_calls: list[dict] = []
    monkeypatch.setattr(
        "blogql.api.app.configure_logging", lambda **kwargs: logging_calls.append(kwargs)
    )
    monkeypatch.setenv("BLOGQL_LOG_LEVEL", "warning")
    monkeypatch.setenv("BLOGQL_DEBUG", "false")
    monkeypatch.setenv("BLOGQL_CORS_ORIGINS", '["http://env.test"]')
    monkeypatch.delenv("BLOGQL_DATA_DIR", raising=False)

    app = build_default_app()

    assert logging_calls == [{"debug": False, "log_level": "warning"}]
    assert app.debug is False
    with TestClient(app) as client:
        response = _preflight(client, "http://env.test")

    assert response.headers["access-control-allow-origin"] == "http://env.test"
