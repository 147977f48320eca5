"""
Endpoint tests for the greeting API.
"""
import pytest
from fastapi.testclient import TestClient

from app.hello.services import GreetingService
from app.main import create_app


@pytest.fixture
def client():
    with TestClient(create_app()) as client:
        yield client


def test_root_returns_plain_text_greeting(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "Hello, World! You are visitor number 1"


def test_root_uses_name_parameter(client):
    client.get("/")
    response = client.get("/", params={"name": "Alice"})

    assert response.status_code == 200
    assert response.text == "Hello, Alice! You are visitor number 2"


def test_root_with_empty_name_greets_world(client):
    response = client.get("/?name=")

    assert response.status_code == 200
    assert response.text == "Hello, World! You are visitor number 1"


def test_root_handles_unicode_names(client):
    response = client.get("/", params={"name": "Zoë 🚀"})

    assert response.status_code == 200
    assert response.text == "Hello, Zoë 🚀! You are visitor number 1"


def test_post_hello_shares_the_visitor_count(client):
    client.get("/")
    response = client.post("/hello", json={"name": "Carol"})

    assert response.status_code == 200
    assert response.json() == {
        "message": "Hello, Carol! You are visitor number 2",
        "status": "success",
    }


def test_post_hello_without_name_greets_world(client):
    response = client.post("/hello", json={})

    assert response.status_code == 200
    assert response.json()["message"] == "Hello, World! You are visitor number 1"


def test_health_reports_visitors_without_counting(client):
    client.get("/")
    client.get("/")

    first = client.get("/health")
    second = client.get("/health")

    assert first.status_code == 200
    assert first.json() == {"message": "Server is running!", "status": "healthy", "visitors": 2}
    assert second.json()["visitors"] == 2
    assert client.get("/").text == "Hello, World! You are visitor number 3"


def test_apps_keep_separate_counts():
    service = GreetingService()
    service.greet()

    with TestClient(create_app(service)) as seeded, TestClient(create_app()) as fresh:
        assert seeded.get("/").text == "Hello, World! You are visitor number 2"
        assert fresh.get("/").text == "Hello, World! You are visitor number 1"


def test_greeting_failure_is_reported_as_server_error():
    class BrokenService(GreetingService):
        def greet(self, name=None):
            raise RuntimeError("counter unavailable")

    with TestClient(create_app(BrokenService())) as client:
        response = client.get("/")

    assert response.status_code == 500
    assert response.json() == {"detail": "Greeting error: counter unavailable"}
