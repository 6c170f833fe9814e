"""HTTP routes served by the FastAPI app with in-memory repositories."""
from typing import Generator
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi.testclient import TestClient

from locallibrary.api.v1.routers import get_book_instance_repository, get_book_repository
from locallibrary.db import neo4j as neo4j_db
from locallibrary.main import create_app
from locallibrary.routes import diagnostics


@pytest.fixture
def app(library):
    books, copies = library
    app = create_app()
    app.dependency_overrides[get_book_repository] = lambda: books
    app.dependency_overrides[get_book_instance_repository] = lambda: copies
    return app


@pytest.fixture
def client(app) -> Generator[TestClient, None, None]:
    with TestClient(app) as test_client:
        yield test_client


def test_health(client):
    response = client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestBookDtls:
    def test_book_details(self, client):
        response = client.get("/api/v1/book_dtls", params={"id": "12345"})

        assert response.status_code == 200
        assert response.json() == {
            "title": "Mock Book Title",
            "author": "Mock Author",
            "copies": [
                {"imprint": "First Edition", "status": "Available"},
                {"imprint": "Second Edition", "status": "Checked Out"},
            ],
        }

    def test_path_route(self, client):
        response = client.get("/api/v1/books/uncopied")

        assert response.status_code == 200
        assert response.json() == {"title": "Never Printed", "author": "Mock Author", "copies": []}

    def test_nameless_author_is_omitted(self, client):
        response = client.get("/api/v1/books/nameless")

        assert response.status_code == 200
        assert "author" not in response.json()

    def test_unknown_book(self, client):
        response = client.get("/api/v1/book_dtls", params={"id": "missing"})

        assert response.status_code == 404
        assert response.text == "Book missing not found"

    def test_missing_id(self, client):
        response = client.get("/api/v1/book_dtls")

        assert response.status_code == 404
        assert response.text == "Book None not found"

    def test_empty_id(self, client):
        response = client.get("/api/v1/book_dtls", params={"id": ""})

        assert response.status_code == 404
        assert response.text == "Book  not found"

    def test_book_without_author(self, client):
        response = client.get("/api/v1/book_dtls", params={"id": "orphan"})

        assert response.status_code == 500
        assert response.text == "Error fetching book orphan"

    def test_repository_failure(self, app, client):
        failing = MagicMock()
        failing.find_one_with_author = AsyncMock(side_effect=ConnectionError("Database error"))
        app.dependency_overrides[get_book_repository] = lambda: failing

        response = client.get("/api/v1/book_dtls", params={"id": "12345"})

        assert response.status_code == 500
        assert response.text == "Error fetching book 12345"

    def test_null_copies(self, app, client):
        copies = MagicMock()
        copies.find_copies = AsyncMock(return_value=None)
        app.dependency_overrides[get_book_instance_repository] = lambda: copies

        response = client.get("/api/v1/book_dtls", params={"id": "12345"})

        assert response.status_code == 404
        assert response.text == "Book details not found for book 12345"


class TestDbStatus:
    def test_counts(self, client, monkeypatch):
        result = MagicMock()
        result.single = AsyncMock(return_value={"books": 2, "authors": 2, "copies": 4})
        session = MagicMock()
        session.run = AsyncMock(return_value=result)
        driver = MagicMock()
        driver.session.return_value.__aenter__.return_value = session
        monkeypatch.setattr(diagnostics, "get_driver", lambda: driver)
        monkeypatch.setattr(diagnostics, "verify_connection", AsyncMock(return_value=True))

        response = client.get("/api/db/status")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "connected"
        assert (body["books"], body["authors"], body["copies"]) == (2, 2, 4)

    def test_unreachable(self, client, monkeypatch):
        monkeypatch.setattr(diagnostics, "verify_connection", AsyncMock(return_value=False))

        response = client.get("/api/db/status")

        assert response.json() == {"status": "error", "message": "Neo4j connection test failed"}

    def test_driver_creation_failure_is_reported_in_body(self, client, monkeypatch):
        def bad_driver():
            raise ValueError("bad uri")

        monkeypatch.setattr(neo4j_db, "get_driver", bad_driver)

        response = client.get("/api/db/status")

        assert response.status_code == 200
        assert response.json() == {"status": "error", "message": "Neo4j connection test failed"}

    def test_driver_failure_after_connection_check(self, client, monkeypatch):
        def bad_driver():
            raise ValueError("bad uri")

        monkeypatch.setattr(diagnostics, "verify_connection", AsyncMock(return_value=True))
        monkeypatch.setattr(diagnostics, "get_driver", bad_driver)

        response = client.get("/api/db/status")

        assert response.status_code == 200
        assert response.json() == {"status": "error", "message": "bad uri"}
