"""Unit tests for the health and index endpoints."""

import pytest
from fastapi.testclient import TestClient

from lms import APP_VERSION
from lms.repository import Repository


@pytest.mark.unit
class TestHealth:
    """Tests for GET /health."""

    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        data = response.json()
        assert data["status"] == "healthy"
        assert data["version"] == APP_VERSION == "1.0.0"
        assert data["timestamp"]
        assert data["uptime"] >= 0


@pytest.mark.unit
class TestIndex:
    """Tests for GET /."""

    def test_index_documents_endpoints(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        data = response.json()
        assert "Welcome to the Learning Management System" in data["message"]
        assert data["version"] == APP_VERSION
        assert data["endpoints"]["courses"]["enroll"] == "POST /api/courses/:id/enroll"
        assert data["stats"] == {"totalUsers": 0, "totalCourses": 0}

    def test_index_stats(self, client: TestClient, repository: Repository) -> None:
        instructor = repository.create_user("Jane", "jane@example.com", "instructor")
        repository.create_course("Intro", "Basics", instructor.id)

        response = client.get("/")

        assert response.json()["stats"] == {"totalUsers": 1, "totalCourses": 1}
