from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from src.quote_api.main import app
from src.quote_api.repositories import get_repository

client = TestClient(app)


@pytest.fixture(autouse=True)
def clear_store():
    get_repository().reset()
    yield
    get_repository().reset()


def create_quote_payload(
    name="Test Quote",
    description="Something worth repeating",
    completed=False,
    **extra,
):
    payload = {
        "name": name,
        "description": description,
        "completed": completed,
    }
    payload.update(extra)
    return payload


def assert_quote_shape(quote: dict):
    for key in ["id", "name", "description", "author", "source", "category", "createdAt", "completed"]:
        assert key in quote
    assert isinstance(quote["id"], int)
    assert isinstance(quote["name"], str)
    assert isinstance(quote["completed"], bool)
    datetime.fromisoformat(quote["createdAt"])


class TestHealth:
    def test_health_check(self):
        res = client.get("/")
        assert res.status_code == 200
        assert res.json() == {"message": "Healthy", "count": 0}

    def test_health_check_counts_quotes(self):
        client.post("/api/items", json=create_quote_payload(name="One"))
        assert client.get("/").json()["count"] == 1


class TestListQuotes:
    def test_empty_list(self):
        res = client.get("/api/items")
        assert res.status_code == 200
        assert res.json() == []

    def test_list_ordered_by_id(self):
        for name in ["Banana", "Apple", "Cherry"]:
            assert client.post("/api/items", json=create_quote_payload(name=name)).status_code == 201
        items = client.get("/api/items").json()
        assert [it["name"] for it in items] == ["Banana", "Apple", "Cherry"]
        ids = [it["id"] for it in items]
        assert ids == sorted(ids)


class TestCreateQuote:
    def test_create_quote(self):
        res = client.post("/api/items", json=create_quote_payload(name="New Quote", description="New Description"))
        assert res.status_code == 201
        quote = res.json()
        assert_quote_shape(quote)
        assert quote["name"] == "New Quote"
        assert quote["description"] == "New Description"
        assert quote["completed"] is False

    def test_create_passes_through_optional_fields(self):
        payload = create_quote_payload(
            name="Attributed", author="Seneca", source="Letters", category="stoic", completed=True
        )
        quote = client.post("/api/items", json=payload).json()
        assert quote["author"] == "Seneca"
        assert quote["source"] == "Letters"
        assert quote["category"] == "stoic"
        assert quote["completed"] is True

    def test_create_ignores_client_id_and_created_at(self):
        payload = create_quote_payload(name="Sneaky", id=999, createdAt="2000-01-01T00:00:00")
        quote = client.post("/api/items", json=payload).json()
        assert quote["id"] == 1
        assert not quote["createdAt"].startswith("2000-01-01")

    def test_content_key_is_not_a_wire_field(self):
        res = client.post("/api/items", json={"name": "Wire", "content": "not accepted"})
        assert res.status_code == 201
        assert res.json()["description"] is None

    def test_missing_name_is_bad_request(self):
        res = client.post("/api/items", json={"description": "No name provided"})
        assert res.status_code == 400
        assert res.json()["error"] == "invalid_input"
        assert client.get("/api/items").json() == []

    def test_blank_name_is_bad_request(self):
        res = client.post("/api/items", json=create_quote_payload(name="   "))
        assert res.status_code == 400

    def test_too_long_name_is_bad_request(self):
        res = client.post("/api/items", json=create_quote_payload(name="x" * 101))
        assert res.status_code == 400

    def test_duplicate_name_is_conflict(self):
        assert client.post("/api/items", json=create_quote_payload(name="Same")).status_code == 201
        res = client.post("/api/items", json=create_quote_payload(name="Same", description="Other"))
        assert res.status_code == 409
        body = res.json()
        assert body["error"] == "duplicate_name"
        assert body["field"] == "name"

    def test_malformed_body_is_bad_request(self):
        res = client.post("/api/items", json={"name": "Typed", "completed": "not-a-bool"})
        assert res.status_code == 400
        body = res.json()
        assert body.get("error") == "ValidationError"
        assert body.get("message") == "Request validation failed"
        assert isinstance(body.get("detail"), list)


class TestGetQuote:
    def test_get_quote_and_not_found(self):
        created = client.post(
            "/api/items", json=create_quote_payload(name="Specific", description="Specific Description")
        ).json()

        res_get = client.get(f"/api/items/{created['id']}")
        assert res_get.status_code == 200
        fetched = res_get.json()
        assert fetched == created

        res_404 = client.get("/api/items/999999")
        assert res_404.status_code == 404
        assert res_404.json()["error"] == "not_found"

    def test_non_integer_id_is_bad_request(self):
        assert client.get("/api/items/abc").status_code == 400


class TestUpdateQuote:
    def test_put_replaces_fields_and_keeps_created_at(self):
        created = client.post(
            "/api/items", json=create_quote_payload(name="Original", description="A", author="Kept")
        ).json()

        res_put = client.put(
            f"/api/items/{created['id']}",
            json=create_quote_payload(name="Updated", description="B", completed=True, author="Ignored"),
        )
        assert res_put.status_code == 200
        updated = res_put.json()
        assert updated["id"] == created["id"]
        assert updated["name"] == "Updated"
        assert updated["description"] == "B"
        assert updated["completed"] is True
        assert updated["createdAt"] == created["createdAt"]
        assert updated["author"] == "Kept"

    def test_put_same_name_is_allowed(self):
        created = client.post("/api/items", json=create_quote_payload(name="Mine")).json()
        res = client.put(f"/api/items/{created['id']}", json=create_quote_payload(name="Mine", description="new"))
        assert res.status_code == 200

    def test_put_to_other_name_is_conflict(self):
        client.post("/api/items", json=create_quote_payload(name="First"))
        second = client.post("/api/items", json=create_quote_payload(name="Second", description="keep")).json()

        res = client.put(f"/api/items/{second['id']}", json=create_quote_payload(name="First"))
        assert res.status_code == 409
        assert client.get(f"/api/items/{second['id']}").json() == second

    def test_put_blank_name_is_bad_request(self):
        created = client.post("/api/items", json=create_quote_payload(name="Valid")).json()
        res = client.put(f"/api/items/{created['id']}", json=create_quote_payload(name=""))
        assert res.status_code == 400

    def test_put_not_found(self):
        res = client.put("/api/items/424242", json=create_quote_payload(name="Nope"))
        assert res.status_code == 404


class TestDeleteQuote:
    def test_delete_quote(self):
        created = client.post("/api/items", json=create_quote_payload(name="ToDelete")).json()

        res_del = client.delete(f"/api/items/{created['id']}")
        assert res_del.status_code == 204
        assert res_del.text == ""

        assert client.get(f"/api/items/{created['id']}").status_code == 404
        assert client.delete(f"/api/items/{created['id']}").status_code == 404

    def test_name_is_free_after_delete(self):
        created = client.post("/api/items", json=create_quote_payload(name="Reusable")).json()
        client.delete(f"/api/items/{created['id']}")
        assert client.post("/api/items", json=create_quote_payload(name="Reusable")).status_code == 201


class TestSearchQuotes:
    def test_search_is_case_insensitive_and_ordered(self):
        for name in ["Apple", "Banana", "Application"]:
            client.post("/api/items", json=create_quote_payload(name=name))

        res = client.get("/api/items/search", params={"name": "app"})
        assert res.status_code == 200
        assert [it["name"] for it in res.json()] == ["Apple", "Application"]

    def test_empty_query_matches_everything(self):
        for name in ["Apple", "Banana"]:
            client.post("/api/items", json=create_quote_payload(name=name))
        res = client.get("/api/items/search?name=")
        assert res.status_code == 200
        assert len(res.json()) == 2

    def test_missing_query_is_bad_request(self):
        res = client.get("/api/items/search")
        assert res.status_code == 400
        assert res.json()["error"] == "invalid_input"
