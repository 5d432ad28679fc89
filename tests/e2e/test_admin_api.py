"""End-to-end tests for admin curation and quality endpoints."""

import pytest
from fastapi.testclient import TestClient

from explora.interface.api.app import create_app
from explora.util.di.container import setup_di
from tests.conftest import make_location, make_tags
from tests.di import build_test_container


@pytest.fixture
def client():
    """Create test client backed by the seeded in-memory catalog."""
    app_instance = create_app()
    test_container = build_test_container(unmock={"persistence"})
    setup_di(app_instance, test_container)
    return TestClient(app_instance)


def location_payload(location_id: str = "belvedere", **tag_overrides) -> dict:
    return make_location(
        location_id, "Belvedere", tags=make_tags(**tag_overrides)
    ).model_dump(mode="json")


class TestLocationCuration:
    def test_validate_does_not_save(self, client):
        # Act
        response = client.post("/admin/locations/validate", json=location_payload())

        # Assert
        assert response.status_code == 200
        assert response.json()["quality_score"] == 100
        assert client.get("/locations/belvedere").status_code == 404

    def test_create_location(self, client):
        # Act
        response = client.post("/admin/locations", json=location_payload())

        # Assert
        assert response.status_code == 201
        assert response.json()["quality_score"] == 100
        assert client.get("/locations/belvedere").status_code == 200

    def test_create_rejects_bad_tags_with_every_error(self, client):
        # Act
        response = client.post(
            "/admin/locations",
            json=location_payload(primary=["Art Museums"], secondary=["Jetpack"]),
        )

        # Assert
        assert response.status_code == 400
        errors = response.json()["errors"]
        assert "Minimum 3 primary tags required. Current: 1" in errors
        assert "Invalid secondary tags: Jetpack" in errors

    def test_create_duplicate_id(self, client):
        response = client.post("/admin/locations", json=location_payload("stadtpark"))

        assert response.status_code == 400
        assert "already exists" in response.json()["detail"]

    def test_update_tags_verify_and_delete(self, client):
        # Arrange
        tags = make_tags(primary=["Street Art", "Urban Parks", "Historical Sites"])

        # Act
        updated = client.put(
            "/admin/locations/naschmarkt/tags", json=tags.model_dump(mode="json")
        )
        verified = client.post(
            "/admin/locations/naschmarkt/verify", json={"verified_by": "curator"}
        )
        deleted = client.delete("/admin/locations/naschmarkt")

        # Assert
        assert updated.status_code == 200
        assert updated.json()["tags"]["primary"][0] == "Street Art"
        assert verified.json()["verified_by"] == "curator"
        assert deleted.status_code == 204
        assert client.get("/locations/naschmarkt").status_code == 404

    def test_delete_unknown_location(self, client):
        response = client.delete("/admin/locations/atlantis")

        assert response.status_code == 404

    def test_import_reports_failures(self, client):
        # Act
        response = client.post(
            "/admin/locations/import",
            json={
                "locations": [
                    location_payload("augarten"),
                    {"id": "broken", "name": "Broken", "tags": {"primary": []}},
                ]
            },
        )

        # Assert
        assert response.status_code == 200
        body = response.json()
        assert body["imported"] == ["augarten"]
        assert body["failed"][0]["name"] == "Broken"


class TestQualityEndpoints:
    def test_quality_report(self, client):
        response = client.get("/admin/quality")

        assert response.status_code == 200
        body = response.json()
        assert body["total_locations"] == 7
        assert len(body["performance_analysis"]["recommendations"]) == 3

    def test_quality_range(self, client):
        response = client.get(
            "/admin/quality/locations", params={"min_score": 90, "max_score": 100}
        )

        assert response.status_code == 200
        assert response.json()["total"] == 7

    def test_reversed_quality_range(self, client):
        response = client.get(
            "/admin/quality/locations", params={"min_score": 90, "max_score": 10}
        )

        assert response.status_code == 400

    def test_catalog_validation(self, client):
        response = client.get("/admin/validation")

        assert response.status_code == 200
        assert response.json()["with_errors"] == 0
