"""HTTP tests for the record endpoints."""

from uuid import UUID, uuid4

import pytest
from fastapi.testclient import TestClient


def _create_author(client: TestClient, name: str = "Jane Austen") -> str:
    response = client.post("/author/create", json={"name": name, "born": "1775-12-16"})
    assert response.status_code == 201
    return response.json()


class TestCreate:
    def test_created_returns_id(self, client: TestClient):
        record_id = _create_author(client)
        assert UUID(record_id).version == 4

    def test_domain_validation_failure_is_422(self, client: TestClient):
        response = client.post("/author/create", json={"name": "J4ne", "born": "1775-12-16"})
        assert response.status_code == 422

    def test_malformed_date_is_422(self, client: TestClient):
        response = client.post("/author/create", json={"name": "Jane", "born": "16/12/1775"})
        assert response.status_code == 422

    @pytest.mark.parametrize("born", [0, 1700000000, 20000101.0, True])
    def test_numeric_date_is_422(self, client: TestClient, born):
        response = client.post("/author/create", json={"name": "Jane", "born": born})
        assert response.status_code == 422
        assert client.get("/author/count").json() == 0

    def test_store_failure_is_500(self, client: TestClient):
        response = client.post(
            "/book/create",
            json={
                "name": "Emma",
                "author_uuid": str(uuid4()),
                "editor": "John Murray",
                "release": "1815-12-23",
            },
        )
        assert response.status_code == 500

    def test_caller_id_is_ignored(self, client: TestClient):
        supplied = str(uuid4())
        response = client.post(
            "/author/create", json={"id": supplied, "name": "Jane", "born": "1775-12-16"}
        )
        assert response.status_code == 201
        assert response.json() != supplied


class TestGet:
    def test_found(self, client: TestClient):
        record_id = _create_author(client)
        response = client.get(f"/author/get/{record_id}")

        assert response.status_code == 200
        assert response.json() == {"id": record_id, "name": "Jane Austen", "born": "1775-12-16"}

    def test_absent_is_404(self, client: TestClient):
        assert client.get(f"/author/get/{uuid4()}").status_code == 404

    def test_malformed_id_is_400(self, client: TestClient):
        assert client.get("/author/get/not-a-uuid").status_code == 400


class TestSearch:
    def test_missing_token_is_400(self, client: TestClient):
        assert client.get("/author/search").status_code == 400

    def test_empty_token_returns_all(self, client: TestClient):
        _create_author(client, "Jane Austen")
        _create_author(client, "Mary Shelley")

        response = client.get("/author/search", params={"token": ""})
        assert response.status_code == 200
        assert len(response.json()) == 2

    @pytest.mark.parametrize("token,expected", [("AUST", 1), ("foo", 0)])
    def test_substring(self, client: TestClient, token: str, expected: int):
        _create_author(client, "Jane Austen")
        response = client.get("/author/search", params={"token": token})
        assert len(response.json()) == expected


class TestUpdate:
    def test_accepted(self, client: TestClient):
        record_id = _create_author(client)
        response = client.post(
            "/author/update", json={"id": record_id, "name": "Jane Austin", "born": "1775-12-16"}
        )

        assert response.status_code == 202
        assert response.json() == record_id
        assert client.get(f"/author/get/{record_id}").json()["name"] == "Jane Austin"

    def test_unknown_id_is_404(self, client: TestClient):
        response = client.post(
            "/author/update", json={"id": str(uuid4()), "name": "Jane", "born": "1775-12-16"}
        )
        assert response.status_code == 404

    def test_domain_validation_failure_is_500(self, client: TestClient):
        record_id = _create_author(client)
        response = client.post(
            "/author/update", json={"id": record_id, "name": "J4ne", "born": "1775-12-16"}
        )
        assert response.status_code == 500


class TestDelete:
    def test_no_content(self, client: TestClient):
        record_id = _create_author(client)
        response = client.post("/author/delete", json={"id": record_id})

        assert response.status_code == 204
        assert response.content == b""
        assert client.get(f"/author/get/{record_id}").status_code == 404

    def test_unknown_id_is_404(self, client: TestClient):
        assert client.post("/author/delete", json={"id": str(uuid4())}).status_code == 404


class TestCount:
    def test_count(self, client: TestClient):
        assert client.get("/costumer/count").json() == 0
        client.post(
            "/costumer/create",
            json={"name": "John Doe", "document": "12345678901", "born": "1990-05-17"},
        )
        response = client.get("/costumer/count")
        assert response.status_code == 200
        assert response.json() == 1


class TestBookRoutes:
    def test_search_by_editor(self, client: TestClient):
        author_id = _create_author(client)
        client.post(
            "/book/create",
            json={
                "name": "Emma",
                "author_uuid": author_id,
                "editor": "John Murray",
                "release": "1815-12-23",
            },
        )
        response = client.get("/book/search", params={"token": "murray"})

        assert response.status_code == 200
        assert [book["name"] for book in response.json()] == ["Emma"]
