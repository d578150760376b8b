import pytest
from fastapi.testclient import TestClient

from bookshelf_api.app.core import db
from bookshelf_api.app.core.config import settings
from bookshelf_api.app.main import app


@pytest.fixture
def db_file(tmp_path, monkeypatch):
    # Each test gets its own database file
    path = str(tmp_path / "books_test.db")
    monkeypatch.setattr(settings, "database_url", path)
    monkeypatch.setattr(settings, "create_schema", True)
    yield path
    db.close()


@pytest.fixture
def client(db_file):
    # Entering the client runs the lifespan, which opens the connection
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def create_book(client):
    def _create(title="Test Book", author="Test Author", price=19.99):
        response = client.post("/books", json={"title": title, "author": author, "price": price})
        assert response.status_code == 201
        return response.json()

    return _create
