from fastapi.testclient import TestClient

from personnel_api.main import app
from tests.helpers import create_user


def test_create_user_returns_sequential_id(repo):
    """Test the legacy user table assigns integer ids"""
    client = TestClient(app)
    first = client.post("/api/users", json={"name": "One", "email": "one@x.com"})
    second = client.post("/api/users", json={"name": "Two", "email": "two@x.com"})
    assert first.status_code == 201
    assert second.status_code == 201
    assert isinstance(first.json()["id"], int)
    assert second.json()["id"] == first.json()["id"] + 1
    assert second.json() == {"id": second.json()["id"], "name": "Two", "email": "two@x.com"}


def test_list_users(repo):
    """Test listing legacy users"""
    user_id = create_user(repo, "Legacy", "legacy@x.com")

    client = TestClient(app)
    r = client.get("/api/users")
    assert r.status_code == 200
    assert r.json() == [{"id": user_id, "name": "Legacy", "email": "legacy@x.com"}]


def test_get_user_not_found(repo):
    """Test getting non-existent user returns 404"""
    client = TestClient(app)
    r = client.get("/api/users/999")
    assert r.status_code == 404
    assert r.json()["detail"] == "User not found"


def test_get_user_requires_integer_id(repo):
    """Test a non-integer user id is a 400"""
    client = TestClient(app)
    r = client.get("/api/users/abc")
    assert r.status_code == 400
