"""Fixtures for API integration tests."""

import pytest
from fastapi.testclient import TestClient

from registrar.api.app import create_app


@pytest.fixture
def client():
    """Test client over a fresh in-memory store."""
    app = create_app(":memory:")
    with TestClient(app, raise_server_exceptions=False) as client:
        yield client


@pytest.fixture
def seeded(client: TestClient) -> TestClient:
    """Client with two students and a one-seat course."""
    for student_id, name in (("S1", "Ada"), ("S2", "Grace")):
        response = client.post("/api/v1/students", json={"student_id": student_id, "name": name})
        assert response.status_code == 201
    response = client.post(
        "/api/v1/courses",
        json={
            "course_id": "CS101",
            "course_name": "Intro to CS",
            "credits": 3,
            "capacity": 1,
            "waitlist_capacity": 2,
        },
    )
    assert response.status_code == 201
    return client
