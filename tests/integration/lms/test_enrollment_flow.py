"""Integration tests for the full enrollment flow over HTTP."""

import pytest
from fastapi.testclient import TestClient

from lms.api import create_app
from lms.config import Settings
from lms.repository import Repository


@pytest.fixture
def client():
    """Client for an app with an empty repository."""
    app = create_app(repository=Repository(), settings=Settings())
    with TestClient(app) as client:
        yield client


@pytest.mark.integration
class TestEnrollmentFlow:
    """Instructor creates and publishes a course; a student enrolls."""

    def test_full_scenario(self, client: TestClient) -> None:
        instructor = client.post(
            "/api/users",
            json={"name": "Dr. Jane Smith", "email": "jane@example.com", "role": "instructor"},
        ).json()["user"]
        assert instructor["id"] == 1

        course = client.post(
            "/api/courses",
            json={"title": "Intro", "description": "Basics", "instructorId": instructor["id"]},
        ).json()["course"]
        assert course["id"] == 1
        assert course["isPublished"] is False

        published = client.put(f"/api/courses/{course['id']}/publish").json()
        assert published["course"]["isPublished"] is True

        student = client.post(
            "/api/users",
            json={"name": "John Doe", "email": "john@example.com", "role": "student"},
        ).json()["user"]
        assert student["id"] == 2

        first = client.post(f"/api/courses/{course['id']}/enroll", json={"studentId": 2})
        assert first.status_code == 200
        assert first.json()["enrollmentCount"] == 1

        again = client.post(f"/api/courses/{course['id']}/enroll", json={"studentId": 2})
        assert again.status_code == 200
        assert again.json()["enrollmentCount"] == 1

        # Both sides of the enrollment are visible
        assert client.get("/api/users/2").json()["enrolledCourses"] == [1]
        assert client.get("/api/courses/1").json()["enrolledStudents"] == [2]
        users = client.get("/api/users").json()
        assert [u["enrolledCourses"] for u in users["users"]] == [0, 1]
        courses = client.get("/api/courses").json()
        assert courses["courses"][0]["enrolledStudents"] == 1

    def test_enroll_before_publish_then_after(self, client: TestClient) -> None:
        client.post(
            "/api/users",
            json={"name": "Jane", "email": "jane@example.com", "role": "instructor"},
        )
        client.post("/api/users", json={"name": "John", "email": "john@example.com"})
        client.post("/api/courses", json={"title": "T", "description": "D", "instructorId": 1})

        rejected = client.post("/api/courses/1/enroll", json={"studentId": 2})
        assert rejected.status_code == 400
        assert rejected.json() == {"error": "Course is not published"}
        assert client.get("/api/users/2").json()["enrolledCourses"] == []

        client.put("/api/courses/1/publish")
        accepted = client.post("/api/courses/1/enroll", json={"studentId": 2})
        assert accepted.status_code == 200

    def test_ids_not_reused_after_failures(self, client: TestClient) -> None:
        """Rejected creations don't consume IDs; successful ones always increase."""
        client.post("/api/users", json={"name": "A", "email": "a@example.com"})
        client.post("/api/users", json={"name": "B", "email": "bad-email"})
        client.post("/api/users", json={"name": "A2", "email": "a@example.com"})
        created = client.post("/api/users", json={"name": "C", "email": "c@example.com"})

        assert created.json()["user"]["id"] == 2
        assert client.get("/").json()["stats"]["totalUsers"] == 2
