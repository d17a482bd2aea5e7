# tests/test_api_pets.py

import pytest
from fastapi.testclient import TestClient

from petstore.config import Settings
from petstore.main import create_app
from petstore.store.memory import PetStore

NOT_FOUND = {
    "code": 404,
    "message": "Endpoint not found. Available: GET/POST /pets, GET /pets/{id}",
}


class TestListPets:
    def test_list_returns_seeded_pets(self, client):
        response = client.get("/pets")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == [
            {"id": 1, "name": "Barnaby", "tag": "Vicious"},
            {"id": 2, "name": "Colin", "tag": "Accountant"},
        ]

    def test_list_omits_absent_tag(self, client):
        client.post("/pets", json={"name": "Plain"})

        pets = client.get("/pets").json()

        assert pets[-1] == {"id": 3, "name": "Plain"}

    def test_query_string_is_ignored(self, client):
        response = client.get("/pets?limit=1")

        assert response.status_code == 200
        assert len(response.json()) == 2


class TestCreatePet:
    def test_create_returns_201_and_pet(self, client):
        response = client.post("/pets", json={"name": "Rex", "tag": "Dog"})

        assert response.status_code == 201
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {"id": 3, "name": "Rex", "tag": "Dog"}

    def test_created_pet_is_retrievable(self, client):
        created = client.post("/pets", json={"name": "Rex", "tag": "Dog"}).json()

        response = client.get(f"/pets/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    def test_missing_name(self, client, store):
        response = client.post("/pets", json={})

        assert response.status_code == 400
        assert response.json() == {
            "code": 2000,
            "message": "Required property not defined: name",
        }
        assert len(store) == 2

    def test_non_object_body_has_no_name(self, client):
        response = client.post("/pets", json=["Rex"])

        assert response.status_code == 400
        assert response.json()["code"] == 2000

    @pytest.mark.parametrize(
        "body", [b"{name: Rex", b"", b"not json", b"[" * 100000]
    )
    def test_invalid_json(self, client, store, body):
        response = client.post(
            "/pets", content=body, headers={"Content-Type": "application/json"}
        )

        assert response.status_code == 400
        assert response.json() == {"code": 400, "message": "Invalid JSON"}
        assert len(store) == 2

    def test_unencodable_name_is_invalid_json(self, client, store):
        response = client.post(
            "/pets",
            content=b'{"name": "\\ud800"}',
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == 400
        assert response.json() == {"code": 400, "message": "Invalid JSON"}
        assert len(store) == 2
        assert client.get("/pets").status_code == 200


class TestGetPet:
    def test_get_seeded_pet(self, client):
        response = client.get("/pets/1")

        assert response.status_code == 200
        assert response.json() == {"id": 1, "name": "Barnaby", "tag": "Vicious"}

    def test_unknown_id(self, client):
        response = client.get("/pets/999")

        assert response.status_code == 400
        assert response.json() == {"code": 1000, "message": "Unknown Pet identifier"}

    @pytest.mark.parametrize("path", ["/pets/abc", "/pets/1x", "/pets/-1", "/pets/1/"])
    def test_non_digit_id_does_not_match(self, client, path):
        response = client.get(path)

        assert response.status_code == 404
        assert response.json() == NOT_FOUND


class TestUnmatchedRoutes:
    @pytest.mark.parametrize(
        "method, path",
        [
            ("DELETE", "/pets/1"),
            ("PUT", "/pets/1"),
            ("PATCH", "/pets"),
            ("GET", "/owners"),
            ("GET", "/"),
            ("GET", "/pets/"),
            ("GET", "/docs"),
        ],
    )
    def test_unmatched_route_is_404(self, client, method, path):
        response = client.request(method, path)

        assert response.status_code == 404
        assert response.headers["content-type"] == "application/json"
        assert response.json() == NOT_FOUND


class BrokenStore(PetStore):
    def list_pets(self):
        raise RuntimeError("boom")


def test_unexpected_failure_is_500():
    app = create_app(store=BrokenStore())

    with TestClient(app, raise_server_exceptions=False) as client:
        response = client.get("/pets")

    assert response.status_code == 500
    assert response.json() == {"code": 500, "message": "Internal server error"}


def test_api_prefix():
    app = create_app(settings=Settings(API_PREFIX="/openapi/code_first.php"))

    with TestClient(app) as client:
        assert client.get("/openapi/code_first.php/pets/2").json()["name"] == "Colin"
        assert client.get("/pets").status_code == 404


def test_api_key_header_is_ignored(client):
    response = client.get("/pets/1", headers={"api-key": "anything"})

    assert response.status_code == 200


def test_scenario(client):
    assert client.get("/pets/1").json() == {"id": 1, "name": "Barnaby", "tag": "Vicious"}

    created = client.post("/pets", json={"name": "Rex", "tag": "Dog"})
    assert (created.status_code, created.json()) == (201, {"id": 3, "name": "Rex", "tag": "Dog"})

    missing = client.get("/pets/999")
    assert (missing.status_code, missing.json()["code"]) == (400, 1000)

    invalid = client.post("/pets", json={})
    assert (invalid.status_code, invalid.json()["code"]) == (400, 2000)

    assert client.delete("/pets/1").status_code == 404
    assert len(client.get("/pets").json()) == 3
