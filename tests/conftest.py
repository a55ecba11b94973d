import pytest
from fastapi.testclient import TestClient

from string_analyzer.main import create_app
from string_analyzer.store import RecordStore


@pytest.fixture
def store():
    return RecordStore()


@pytest.fixture
def client(store):
    with TestClient(create_app(store)) as test_client:
        yield test_client


@pytest.fixture
def seeded_client(client):
    for value in ["racecar", "hello world", "A man a plan a canal Panama", "noon", "level up", "abc"]:
        assert client.post("/strings", json={"value": value}).status_code == 201
    return client
