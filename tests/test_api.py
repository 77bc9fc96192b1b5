"""
Integration tests for the GraphQL HTTP endpoint.

Tests the full request/response cycle for POST and GET /graphql.
"""

import json

import pytest
from fastapi.testclient import TestClient

from bookql.api.main import create_app
from bookql.domain import Book
from bookql.engine import BookStore


BOOK_QUERY = '{ book(id: "%s") { id, name, genre } }'


class TestGraphQLPost:
    """Integration tests for POST /graphql."""

    @pytest.fixture
    def client(self):
        return TestClient(create_app())

    def test_root_reports_status(self, client):
        response = client.get("/")
        assert response.status_code == 200
        assert response.json()["status"] == "BookQL API is running"

    def test_existing_book(self, client):
        response = client.post("/graphql", json={"query": BOOK_QUERY % "2"})

        assert response.status_code == 200
        assert response.json() == {
            "data": {"book": {"id": "2", "name": "Book 2", "genre": "Fantasy"}}
        }

    def test_trailing_slash_path(self, client):
        response = client.post("/graphql/", json={"query": BOOK_QUERY % "1"})
        assert response.status_code == 200
        assert response.json()["data"]["book"]["name"] == "Book 1"

    def test_missing_book_is_null(self, client):
        response = client.post("/graphql", json={"query": BOOK_QUERY % "9"})

        assert response.status_code == 200
        assert response.json() == {"data": {"book": None}}

    def test_variables(self, client):
        response = client.post(
            "/graphql",
            json={
                "query": "query BookById($id: String!) { book(id: $id) { name } }",
                "variables": {"id": "3"},
                "operationName": "BookById",
            },
        )

        assert response.status_code == 200
        assert response.json() == {"data": {"book": {"name": "Book 3"}}}

    def test_variables_as_json_string(self, client):
        response = client.post(
            "/graphql",
            json={
                "query": "query ($id: String!) { book(id: $id) { name } }",
                "variables": json.dumps({"id": "2"}),
            },
        )

        assert response.status_code == 200
        assert response.json() == {"data": {"book": {"name": "Book 2"}}}

    def test_invalid_variables_string(self, client):
        response = client.post(
            "/graphql",
            json={"query": BOOK_QUERY % "1", "variables": "{not json"},
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"message": "Variables are invalid JSON."}]}

    def test_syntax_error(self, client):
        response = client.post("/graphql", json={"query": "{ book(id: "})

        assert response.status_code == 400
        errors = response.json()["errors"]
        assert len(errors) == 1
        assert errors[0]["message"].startswith("Syntax Error")

    def test_missing_query(self, client):
        response = client.post("/graphql", json={})

        assert response.status_code == 400
        assert response.json() == {"errors": [{"message": "Must provide query string."}]}

    def test_content_type_with_charset(self, client):
        response = client.post(
            "/graphql",
            content=json.dumps({"query": BOOK_QUERY % "1"}).encode("utf-8"),
            headers={"Content-Type": "application/json; charset=utf-8"},
        )
        assert response.status_code == 200
        assert response.json()["data"]["book"]["id"] == "1"

    def test_app_uses_injected_store(self):
        store = BookStore([Book(id="42", name="Answer", genre="Reference")])
        client = TestClient(create_app(store))

        response = client.post("/graphql", json={"query": BOOK_QUERY % "42"})
        assert response.json()["data"]["book"]["name"] == "Answer"

        response = client.post("/graphql", json={"query": BOOK_QUERY % "1"})
        assert response.json() == {"data": {"book": None}}


class TestGraphQLGet:
    """Integration tests for GET /graphql."""

    @pytest.fixture
    def client(self):
        return TestClient(create_app())

    def test_query_parameter(self, client):
        response = client.get("/graphql", params={"query": BOOK_QUERY % "3"})

        assert response.status_code == 200
        assert response.json()["data"]["book"] == {
            "id": "3", "name": "Book 3", "genre": "Sci-Fi"
        }

    def test_variables_parameter(self, client):
        response = client.get(
            "/graphql",
            params={
                "query": "query ($id: String!) { book(id: $id) { genre } }",
                "variables": json.dumps({"id": "1"}),
            },
        )

        assert response.status_code == 200
        assert response.json() == {"data": {"book": {"genre": "Fantasy"}}}

    def test_invalid_variables(self, client):
        response = client.get(
            "/graphql",
            params={"query": BOOK_QUERY % "1", "variables": "{not json"},
        )

        assert response.status_code == 400
        assert response.json() == {"errors": [{"message": "Variables are invalid JSON."}]}

    def test_missing_query(self, client):
        response = client.get("/graphql")
        assert response.status_code == 400
