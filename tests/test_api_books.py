"""
Tests for the books API endpoints.

Exercises the FastAPI routes end to end on SQLite.
Validates request validation, status codes, headers and error mapping.
"""

from uuid import UUID, uuid4

import pytest


def _create(client, payload: dict) -> dict:
    response = client.post("/books", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


class TestCreateBook:
    """Tests for POST /books."""

    def test_create_returns_201_with_location(self, client) -> None:
        response = client.post("/books", json={"title": "A", "author": "B", "isbn": "I1"})
        assert response.status_code == 201
        body = response.json()
        assert response.headers["location"] == f"/books/{body['id']}"
        assert body["title"] == "A"
        assert body["author"] == "B"
        assert body["isbn"] == "I1"
        assert body["publicationDate"] is None
        assert str(UUID(body["id"])) == body["id"]

    def test_create_echoes_publication_date(self, client, book_payload) -> None:
        body = _create(client, book_payload)
        assert body["publicationDate"] == "1965-08-01"

    def test_duplicate_isbn_returns_409(self, client) -> None:
        _create(client, {"title": "A", "author": "B", "isbn": "I1"})
        response = client.post("/books", json={"title": "X", "author": "Y", "isbn": "I1"})
        assert response.status_code == 409
        body = response.json()
        assert body["status"] == 409
        assert body["error"] == "Conflict"
        assert body["message"] == "ISBN already exists: I1"

    @pytest.mark.parametrize(
        ("field", "max_length"), [("title", 255), ("author", 255), ("isbn", 32)]
    )
    def test_field_at_max_length_accepted(self, client, book_payload, field, max_length) -> None:
        book_payload[field] = "x" * max_length
        body = _create(client, book_payload)
        assert body[field] == "x" * max_length

    @pytest.mark.parametrize(
        ("field", "max_length"), [("title", 255), ("author", 255), ("isbn", 32)]
    )
    def test_field_over_max_length_rejected(self, client, book_payload, field, max_length) -> None:
        book_payload[field] = "x" * (max_length + 1)
        response = client.post("/books", json=book_payload)
        assert response.status_code == 400
        body = response.json()
        assert body["message"] == "Validation failed"
        assert body["fields"][field] == f"size must be between 0 and {max_length}"

    @pytest.mark.parametrize("field", ["title", "author", "isbn"])
    def test_blank_field_rejected(self, client, book_payload, field) -> None:
        book_payload[field] = "   "
        response = client.post("/books", json=book_payload)
        assert response.status_code == 400
        assert response.json()["fields"][field] == "must not be blank"

    def test_every_offending_field_is_reported(self, client) -> None:
        response = client.post("/books", json={"title": "", "isbn": "x" * 40})
        assert response.status_code == 400
        fields = response.json()["fields"]
        assert set(fields) == {"title", "author", "isbn"}

    def test_omitted_publication_date_stored_as_absent(self, client) -> None:
        created = _create(client, {"title": "A", "author": "B", "isbn": "I1"})
        fetched = client.get(f"/books/{created['id']}").json()
        assert fetched["publicationDate"] is None

    def test_invalid_publication_date_rejected(self, client, book_payload) -> None:
        book_payload["publicationDate"] = "2024-13-45"
        response = client.post("/books", json=book_payload)
        assert response.status_code == 400
        assert "publicationDate" in response.json()["fields"]

    @pytest.mark.parametrize("value", [0, 1705276800, "2024-01-15T00:00:00", "15/01/2024"])
    def test_non_calendar_publication_date_rejected(self, client, book_payload, value) -> None:
        book_payload["publicationDate"] = value
        response = client.post("/books", json=book_payload)
        assert response.status_code == 400
        assert response.json()["fields"] == {
            "publicationDate": "must be a date in YYYY-MM-DD format"
        }
        assert client.get("/books").json() == []

    def test_malformed_json_rejected(self, client) -> None:
        response = client.post(
            "/books",
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )
        assert response.status_code == 400
        assert "body" in response.json()["fields"]


class TestReadBooks:
    """Tests for GET /books and GET /books/{id}."""

    def test_list_empty(self, client) -> None:
        response = client.get("/books")
        assert response.status_code == 200
        assert response.json() == []

    def test_list_returns_created_books(self, client) -> None:
        first = _create(client, {"title": "A", "author": "B", "isbn": "I1"})
        second = _create(client, {"title": "C", "author": "D", "isbn": "I2"})
        ids = {b["id"] for b in client.get("/books").json()}
        assert ids == {first["id"], second["id"]}

    def test_get_round_trip(self, client, book_payload) -> None:
        created = _create(client, book_payload)
        response = client.get(f"/books/{created['id']}")
        assert response.status_code == 200
        assert response.json() == created

    def test_get_unknown_returns_404(self, client) -> None:
        book_id = uuid4()
        response = client.get(f"/books/{book_id}")
        assert response.status_code == 404
        body = response.json()
        assert body["error"] == "Not Found"
        assert body["message"] == f"Book not found: {book_id}"

    def test_get_malformed_uuid_returns_400(self, client) -> None:
        response = client.get("/books/not-a-uuid")
        assert response.status_code == 400
        body = response.json()
        assert body["value"] == "not-a-uuid"
        assert body["message"] == "Invalid parameter: book_id"


class TestUpdateBook:
    """Tests for PUT /books/{id}."""

    def test_update_replaces_all_fields(self, client, book_payload) -> None:
        created = _create(client, book_payload)
        replacement = {"title": "T2", "author": "A2", "isbn": "I2"}
        response = client.put(f"/books/{created['id']}", json=replacement)
        assert response.status_code == 200
        assert response.json() == {**replacement, "id": created["id"], "publicationDate": None}
        assert client.get(f"/books/{created['id']}").json() == response.json()

    def test_update_unknown_returns_404(self, client, book_payload) -> None:
        response = client.put(f"/books/{uuid4()}", json=book_payload)
        assert response.status_code == 404

    def test_update_to_other_books_isbn_returns_409(self, client) -> None:
        _create(client, {"title": "A", "author": "B", "isbn": "I1"})
        second = _create(client, {"title": "C", "author": "D", "isbn": "I2"})
        response = client.put(
            f"/books/{second['id']}", json={"title": "C", "author": "D", "isbn": "I1"}
        )
        assert response.status_code == 409
        assert response.json()["message"] == "ISBN already exists: I1"

    def test_update_keeping_own_isbn_returns_200(self, client) -> None:
        created = _create(client, {"title": "A", "author": "B", "isbn": "I1"})
        response = client.put(
            f"/books/{created['id']}", json={"title": "A2", "author": "B", "isbn": "I1"}
        )
        assert response.status_code == 200
        assert response.json()["title"] == "A2"

    def test_update_with_empty_title_returns_400(self, client, book_payload) -> None:
        created = _create(client, book_payload)
        book_payload["title"] = ""
        response = client.put(f"/books/{created['id']}", json=book_payload)
        assert response.status_code == 400
        assert "title" in response.json()["fields"]

    def test_update_malformed_uuid_returns_400(self, client, book_payload) -> None:
        response = client.put("/books/123", json=book_payload)
        assert response.status_code == 400
        assert response.json()["value"] == "123"


class TestDeleteBook:
    """Tests for DELETE /books/{id}."""

    def test_delete_then_get_returns_404(self, client, book_payload) -> None:
        created = _create(client, book_payload)
        response = client.delete(f"/books/{created['id']}")
        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/books/{created['id']}").status_code == 404

    def test_delete_unknown_returns_404(self, client) -> None:
        response = client.delete(f"/books/{uuid4()}")
        assert response.status_code == 404
        assert response.json()["status"] == 404


class TestContentType:
    """JSON bodies declare their charset."""

    def test_success_and_error_bodies_are_utf8_json(self, client) -> None:
        ok = client.get("/books")
        missing = client.get(f"/books/{uuid4()}")
        for response in (ok, missing):
            assert response.headers["content-type"] == "application/json; charset=utf-8"

    def test_non_ascii_round_trip(self, client) -> None:
        created = _create(client, {"title": "Ébène", "author": "Kapuściński", "isbn": "I-ü"})
        fetched = client.get(f"/books/{created['id']}").json()
        assert fetched["title"] == "Ébène"
        assert fetched["author"] == "Kapuściński"
