"""
Tests for Books API Endpoints

This module tests all CRUD operations for the /books endpoints.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_create_book_success, test_get_book_not_found
"""

from fastapi import status

NOT_FOUND_BAD = {
    "error": {
        "message": "There is no book with an isbn 'bad",
        "status": 404,
    },
    "message": "There is no book with an isbn 'bad",
}


class TestListBooks:
    """Tests for GET /books endpoint."""

    def test_list_books_empty(self, client):
        """Test listing books when database is empty."""
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"books": []}

    def test_list_books_with_data(self, client, sample_book_json):
        """Test listing books returns the stored book."""
        response = client.get("/books")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"books": [sample_book_json]}

    def test_list_books_ordered_by_title(self, client, book_payload):
        """Test books come back sorted by title."""
        client.post("/books", json={**book_payload, "isbn": "1", "title": "Zen"})
        client.post("/books", json={**book_payload, "isbn": "2", "title": "Algebra"})

        response = client.get("/books")

        titles = [book["title"] for book in response.json()["books"]]
        assert titles == ["Algebra", "Zen"]


class TestGetBook:
    """Tests for GET /books/{isbn} endpoint."""

    def test_get_book_success(self, client, sample_book_json):
        """Test getting a book by isbn."""
        response = client.get(f"/books/{sample_book_json['isbn']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"book": sample_book_json}

    def test_get_book_not_found(self, client):
        """Test getting a non-existent book returns 404."""
        response = client.get("/books/bad")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == NOT_FOUND_BAD


class TestCreateBook:
    """Tests for POST /books endpoint."""

    def test_create_book_success(self, client, book_payload):
        """Test creating a book echoes the payload."""
        response = client.post("/books", json=book_payload)

        assert response.status_code == status.HTTP_201_CREATED
        assert response.json() == {"book": book_payload}

    def test_create_book_is_persisted(self, client, book_payload):
        """Test a created book can be fetched afterwards."""
        client.post("/books", json=book_payload)

        response = client.get(f"/books/{book_payload['isbn']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"book": book_payload}

    def test_create_book_missing_isbn(self, client, book_payload):
        """Test that a body without isbn is rejected."""
        del book_payload["isbn"]

        response = client.post("/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {
                "message": ['instance requires property "isbn"'],
                "status": 400,
            },
            "message": ['instance requires property "isbn"'],
        }

    def test_create_book_missing_several_fields(self, client):
        """Test every missing property is reported."""
        response = client.post("/books", json={"isbn": "123", "title": "Only"})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        messages = response.json()["message"]
        assert sorted(messages) == sorted([
            'instance requires property "amazon_url"',
            'instance requires property "author"',
            'instance requires property "language"',
            'instance requires property "pages"',
            'instance requires property "publisher"',
            'instance requires property "year"',
        ])

    def test_create_book_wrong_types(self, client, book_payload):
        """Test that JSON types are not coerced."""
        book_payload["pages"] = "264"
        book_payload["author"] = 42

        response = client.post("/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert sorted(response.json()["message"]) == [
            "instance.author is not of a type(s) string",
            "instance.pages is not of a type(s) integer",
        ]

    def test_create_book_boolean_is_not_integer(self, client, book_payload):
        """Test that booleans are rejected for integer fields."""
        book_payload["year"] = True

        response = client.post("/books", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == [
            "instance.year is not of a type(s) integer",
        ]

    def test_create_book_body_not_an_object(self, client):
        """Test that a JSON array body is rejected."""
        response = client.post("/books", json=["not", "a", "book"])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == [
            "instance is not of a type(s) object",
        ]

    def test_create_book_invalid_json(self, client):
        """Test that a malformed JSON body is rejected."""
        response = client.post(
            "/books",
            content=b'{"isbn": ',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == ["instance is not valid JSON"]


class TestUpdateBook:
    """Tests for PUT /books/{isbn} endpoint."""

    def test_update_book_success(self, client, sample_book_json):
        """Test updating replaces every field except isbn."""
        update_data = {
            "amazon_url": "http://a.co/eobPtX2",
            "author": "Matthew Lane",
            "language": "german",
            "pages": 264,
            "publisher": "Princeton University Press",
            "title": "Power-Up: Unlocking the Hidden Mathematics in Video Games",
            "year": 2020,
        }

        response = client.put(f"/books/{sample_book_json['isbn']}", json=update_data)

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "book": {"isbn": "0691161518", **update_data},
        }

    def test_update_book_persists(self, client, sample_book_json):
        """Test the update is visible on a later fetch."""
        update_data = {**sample_book_json, "language": "french"}
        del update_data["isbn"]

        client.put(f"/books/{sample_book_json['isbn']}", json=update_data)
        response = client.get(f"/books/{sample_book_json['isbn']}")

        assert response.json()["book"]["language"] == "french"

    def test_update_book_ignores_isbn_in_body(self, client, sample_book_json):
        """Test that the isbn cannot be changed through the body."""
        update_data = {**sample_book_json, "isbn": "9999999999", "year": 2021}

        response = client.put(f"/books/{sample_book_json['isbn']}", json=update_data)

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["book"]["isbn"] == "0691161518"
        assert response.json()["book"]["year"] == 2021
        assert client.get("/books/9999999999").status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_not_found(self, client, book_payload):
        """Test updating a non-existent book returns 404."""
        del book_payload["isbn"]

        response = client.put("/books/bad", json=book_payload)

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == NOT_FOUND_BAD

    def test_update_book_missing_field(self, client, sample_book_json):
        """Test that a partial body is rejected."""
        response = client.put(
            f"/books/{sample_book_json['isbn']}",
            json={"title": "Just a title"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'instance requires property "author"' in response.json()["message"]

    def test_update_book_does_not_require_isbn(self, client, sample_book_json):
        """Test that the body schema for updates has no isbn."""
        update_data = dict(sample_book_json)
        del update_data["isbn"]
        update_data["pages"] = "many"

        response = client.put(f"/books/{sample_book_json['isbn']}", json=update_data)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == [
            "instance.pages is not of a type(s) integer",
        ]


class TestDeleteBook:
    """Tests for DELETE /books/{isbn} endpoint."""

    def test_delete_book_success(self, client, sample_book_json):
        """Test deleting a book."""
        response = client.delete(f"/books/{sample_book_json['isbn']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"message": "Book deleted"}

        # Verify it's gone
        response = client.get(f"/books/{sample_book_json['isbn']}")
        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_not_found(self, client):
        """Test deleting a non-existent book returns 404."""
        response = client.delete("/books/bad")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == NOT_FOUND_BAD
