"""Integration tests for course routes."""

import pytest
from fastapi.testclient import TestClient


@pytest.mark.integration
class TestCourseRoutes:
    """Tests for course endpoints."""

    def test_create_and_get(self, client: TestClient) -> None:
        create = client.post(
            "/api/v1/courses",
            json={
                "course_id": "CS301",
                "course_name": "Algorithms",
                "capacity": 30,
                "prerequisites": ["CS201"],
            },
        )
        assert create.status_code == 201
        data = create.json()["data"]
        assert data["enrolled"] == 0
        assert data["credits"] == 3
        assert data["prerequisites"] == ["CS201"]

        assert client.get("/api/v1/courses/CS301").json()["data"]["course_name"] == "Algorithms"

    def test_duplicate_is_conflict(self, seeded: TestClient) -> None:
        response = seeded.post(
            "/api/v1/courses", json={"course_id": "CS101", "course_name": "Dup", "capacity": 1}
        )

        assert response.status_code == 409
        assert response.json()["error"] == "Course with this id already exists"

    def test_missing_is_not_found(self, client: TestClient) -> None:
        for path in ("", "/seats", "/waitlist", "/enrollments"):
            response = client.get(f"/api/v1/courses/NOPE{path}")
            assert response.status_code == 404
            assert response.json()["error"] == "Course not found"

    def test_negative_capacity_rejected(self, client: TestClient) -> None:
        response = client.post(
            "/api/v1/courses", json={"course_id": "X1", "course_name": "X", "capacity": -1}
        )

        assert response.status_code == 422

    def test_seats_and_waitlist(self, seeded: TestClient) -> None:
        seeded.post("/api/v1/registrations", json={"student_id": "S1", "course_id": "CS101"})
        seeded.post("/api/v1/registrations", json={"student_id": "S2", "course_id": "CS101"})

        seats = seeded.get("/api/v1/courses/CS101/seats").json()["data"]
        waitlist = seeded.get("/api/v1/courses/CS101/waitlist").json()["data"]

        assert seats == {
            "course_id": "CS101",
            "capacity": 1,
            "enrolled": 1,
            "available": 0,
            "utilization": 100.0,
            "waitlist_size": 1,
            "waitlist_capacity": 2,
        }
        assert waitlist == {"course_id": "CS101", "students": ["S2"]}

    def test_list(self, seeded: TestClient) -> None:
        response = seeded.get("/api/v1/courses")

        assert [c["course_id"] for c in response.json()["data"]] == ["CS101"]
