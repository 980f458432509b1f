"""HTTP tests for the rental endpoints, joined and raw."""

from uuid import UUID, uuid4

from fastapi.testclient import TestClient


class TestRentalRoutes:
    def test_get_returns_joined_view(self, client: TestClient, rental_id: UUID):
        response = client.get(f"/rental/get/{rental_id}")

        assert response.status_code == 200
        assert response.json() == {
            "id": str(rental_id),
            "costumer_name": "John Doe",
            "book_name": "Emma",
            "borrowed_at": "2024-03-01",
            "due_date": "2024-03-15",
            "returned_at": None,
        }

    def test_get_raw(
        self, client: TestClient, rental_id: UUID, costumer_id: UUID, book_id: UUID
    ):
        response = client.get(f"/rental/get-raw/{rental_id}")

        assert response.status_code == 200
        body = response.json()
        assert body["costumer_uuid"] == str(costumer_id)
        assert body["book_uuid"] == str(book_id)
        assert body["returned_at"] is None

    def test_search_joined_and_raw(self, client: TestClient, rental_id: UUID):
        joined = client.get("/rental/search", params={"token": "emma"})
        raw = client.get("/rental/search-raw", params={"token": "emma"})

        assert [r["id"] for r in joined.json()] == [str(rental_id)]
        assert [r["id"] for r in raw.json()] == [str(rental_id)]

    def test_search_requires_token(self, client: TestClient):
        assert client.get("/rental/search").status_code == 400
        assert client.get("/rental/search-raw").status_code == 400

    def test_create(self, client: TestClient, costumer_id: UUID, book_id: UUID):
        response = client.post(
            "/rental/create",
            json={
                "costumer_uuid": str(costumer_id),
                "book_uuid": str(book_id),
                "borrowed_at": "2024-04-01",
                "due_date": "2024-04-15",
            },
        )
        assert response.status_code == 201
        assert client.get("/rental/count").json() == 1

    def test_update_returned_at(
        self, client: TestClient, rental_id: UUID, costumer_id: UUID, book_id: UUID
    ):
        response = client.post(
            "/rental/update",
            json={
                "id": str(rental_id),
                "costumer_uuid": str(costumer_id),
                "book_uuid": str(book_id),
                "borrowed_at": "2024-03-01",
                "due_date": "2024-03-15",
                "returned_at": "2024-03-09",
            },
        )
        assert response.status_code == 202
        assert client.get(f"/rental/get/{rental_id}").json()["returned_at"] == "2024-03-09"

    def test_deleted_costumer_hides_joined_view(
        self, client: TestClient, rental_id: UUID, costumer_id: UUID
    ):
        assert client.post("/costumer/delete", json={"id": str(costumer_id)}).status_code == 204

        assert client.get(f"/rental/get/{rental_id}").status_code == 404
        assert client.get(f"/rental/get-raw/{rental_id}").status_code == 200

    def test_get_unknown(self, client: TestClient):
        assert client.get(f"/rental/get/{uuid4()}").status_code == 404
        assert client.get("/rental/get-raw/xyz").status_code == 400
