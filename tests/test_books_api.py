import logging

import pytest


def test_get_books_empty(client):
    response = client.get("/books")
    assert response.status_code == 200
    assert response.json() == []


def test_get_books_returns_created_books(client, create_book):
    create_book(title="Dune", author="Frank Herbert", price=9.5)
    create_book(title="Emma", author="Jane Austen", price=4.25)

    response = client.get("/books")
    assert response.status_code == 200
    books = response.json()
    assert isinstance(books, list)
    assert [b["title"] for b in books] == ["Dune", "Emma"]
    for book in books:
        assert set(book) == {"id", "title", "author", "price"}


def test_post_book(client):
    payload = {"title": "Test Book", "author": "Test Author", "price": 19.99}
    response = client.post("/books", json=payload)
    assert response.status_code == 201
    created = response.json()
    assert created["title"] == payload["title"]
    assert created["author"] == payload["author"]
    assert created["price"] == payload["price"]
    assert isinstance(created["id"], int)
    assert created["id"] > 0


def test_post_book_ignores_client_id(client):
    response = client.post("/books", json={"id": 999, "title": "A", "author": "B", "price": 1})
    assert response.status_code == 201
    assert response.json()["id"] == 1
    assert client.get("/books/999").status_code == 404


def test_post_books_assigns_new_ids(client, create_book):
    first = create_book()
    second = create_book()
    assert second["id"] > first["id"]


def test_post_book_missing_fields_bind_to_zero_values(client):
    response = client.post("/books", json={"title": "Untitled"})
    assert response.status_code == 201
    body = response.json()
    assert body["author"] == ""
    assert body["price"] == 0.0


def test_post_book_malformed_json(client):
    response = client.post(
        "/books",
        content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.content == b""
    assert client.get("/books").json() == []


def test_post_book_wrong_type(client):
    response = client.post("/books", json={"title": "Bad", "author": "Price", "price": "cheap"})
    assert response.status_code == 400
    assert response.content == b""
    assert client.get("/books").json() == []


@pytest.mark.parametrize("raw_price", ["1e400", "-1e400", "NaN", "Infinity", "-Infinity"])
def test_post_book_non_finite_price(client, raw_price):
    response = client.post(
        "/books",
        content='{"title": "Huge", "author": "Overflow", "price": ' + raw_price + "}",
        headers={"Content-Type": "application/json"},
    )
    assert response.status_code == 400
    assert response.content == b""

    listing = client.get("/books")
    assert listing.status_code == 200
    assert listing.json() == []


def test_post_book_string_price(client):
    response = client.post("/books", json={"title": "Priced", "author": "As Text", "price": "19.99"})
    assert response.status_code == 400
    assert response.content == b""
    assert client.get("/books").json() == []


def test_post_book_string_fields_must_be_strings(client):
    response = client.post("/books", json={"title": 12, "author": "Numbers", "price": 1.0})
    assert response.status_code == 400
    assert response.content == b""


def test_post_book_integer_price(client):
    response = client.post("/books", json={"title": "Whole", "author": "Number", "price": 20})
    assert response.status_code == 201
    assert response.json()["price"] == 20.0


def test_get_book_by_id(client, create_book):
    created = create_book(title="Test Book", author="Test Author", price=19.99)

    response = client.get(f"/books/{created['id']}")
    assert response.status_code == 200
    book = response.json()
    assert book["id"] == created["id"]
    assert book["title"]
    assert book["author"]
    assert isinstance(book["price"], (int, float))


def test_created_book_round_trip(client, create_book):
    created = create_book(title="Round Trip", author="Someone", price=42.0)
    fetched = client.get(f"/books/{created['id']}").json()
    assert fetched == created


def test_get_book_not_found(client):
    response = client.get("/books/12345")
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


def test_get_book_non_numeric_id_not_found(client, create_book):
    create_book()
    response = client.get("/books/abc")
    assert response.status_code == 404
    assert response.json() == {"message": "Book not found"}


def test_store_error_is_reported_as_500(client, caplog):
    from bookshelf_api.app.core import db

    db.get_connection().execute("DROP TABLE Books")

    with caplog.at_level(logging.ERROR):
        response = client.get("/books")
    assert response.status_code == 500
    assert response.json() == {"message": "no such table: Books"}
    assert any(
        record.levelno == logging.ERROR
        and record.name == "bookshelf_api.app.api.endpoints.books"
        and "Failed to list books: no such table: Books" in record.getMessage()
        for record in caplog.records
    )

    response = client.get("/books/1")
    assert response.status_code == 500
    assert "no such table" in response.json()["message"]

    response = client.post("/books", json={"title": "A", "author": "B", "price": 1.0})
    assert response.status_code == 500
    assert "no such table" in response.json()["message"]


def test_responses_are_indented(client, create_book):
    create_book()
    response = client.get("/books")
    assert response.headers["content-type"].startswith("application/json")
    assert response.text.startswith("[\n    {\n        \"id\": 1,")


def test_unknown_route_uses_message_body(client):
    response = client.get("/authors")
    assert response.status_code == 404
    assert response.json() == {"message": "Not Found"}


def test_unsupported_method(client):
    response = client.delete("/books/1")
    assert response.status_code == 405


def test_requests_are_logged(client, caplog):
    with caplog.at_level(logging.INFO, logger="bookshelf_api.access"):
        client.get("/books/77")
    assert "GET /books/77 -> 404" in caplog.text
