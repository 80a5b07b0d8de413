import pytest

from playgrounds.services.legacy_service import LegacyPlaygroundService


@pytest.fixture
def legacy_item(db):
    return LegacyPlaygroundService.create_playground(name="demo", author="a", contents="v0")


@pytest.mark.django_db
class TestLegacyApi:
    def test_create(self, api_client):
        response = api_client.post(
            "/api", {"name": "demo", "author": "a", "contents": "x", "isPublic": False}, format="json"
        )

        assert response.status_code == 201
        body = response.json()
        assert body["contents"] == "x"
        assert body["item"]["version"] == 0
        assert body["item"]["isPublic"] is False
        assert len(body["item"]["id"]) == 12

    def test_create_keeps_whitespace_in_name_and_author(self, api_client):
        response = api_client.post(
            "/api", {"name": "  ", "author": "  ", "contents": "x"}, format="json"
        )

        assert response.status_code == 201
        assert response.json()["item"]["name"] == "  "
        assert response.json()["item"]["author"] == "  "

    @pytest.mark.parametrize(
        "body",
        [
            {"author": "a", "contents": "x"},
            {"name": "demo", "contents": "x"},
            {"name": "demo", "author": "a"},
        ],
    )
    def test_create_requires_name_author_and_contents(self, api_client, body):
        response = api_client.post("/api", body, format="json")

        assert response.status_code == 422
        assert response.json() == {"msg": "Invalid params, either name, author, or contents is empty."}

    def test_get_returns_version_zero(self, api_client, legacy_item):
        LegacyPlaygroundService.create_playground_version(
            legacy_item.playground_id, name="demo", author="a", contents="v1"
        )

        response = api_client.get(f"/api/{legacy_item.playground_id}")

        assert response.status_code == 200
        assert response.json()["contents"] == "v0"

    def test_get_specific_version(self, api_client, legacy_item):
        api_client.post(
            f"/api/{legacy_item.playground_id}",
            {"name": "demo", "author": "a", "contents": "v1"},
            format="json",
        )

        response = api_client.get(f"/api/{legacy_item.playground_id}/1")

        assert response.status_code == 200
        assert response.json()["item"]["version"] == 1
        assert response.json()["contents"] == "v1"

    def test_non_numeric_version_is_rejected(self, api_client, legacy_item):
        response = api_client.get(f"/api/{legacy_item.playground_id}/latest")

        assert response.status_code == 422
        assert response.json() == {"msg": "Invalid version, latest is not a number."}

    def test_missing_version_is_not_found(self, api_client, legacy_item):
        response = api_client.get(f"/api/{legacy_item.playground_id}/7")

        assert response.status_code == 404

    def test_unknown_id_is_not_found(self, api_client, db):
        assert api_client.get("/api/unknownid123").status_code == 404

    def test_new_version(self, api_client, legacy_item):
        response = api_client.post(
            f"/api/{legacy_item.playground_id}",
            {"name": "demo", "author": "a", "contents": "v1"},
            format="json",
        )

        assert response.status_code == 201
        assert response.json()["item"]["version"] == 1

    def test_new_version_of_unknown_id_is_not_found(self, api_client, db):
        response = api_client.post(
            "/api/unknownid123", {"name": "demo", "author": "a", "contents": "v1"}, format="json"
        )

        assert response.status_code == 404
        assert response.json() == {"msg": "No playground found with ID: unknownid123."}
