from fastapi.testclient import TestClient
from sqlalchemy import create_engine

from personnel_api.db.repository import Repository
from personnel_api.db.session import get_repository
from personnel_api.main import app


def test_unreachable_store_is_a_500(tmp_path):
    """Test a pool checkout failure surfaces the driver message as a 500"""
    engine = create_engine(f"sqlite:///{tmp_path / 'missing-dir' / 'db.sqlite'}")
    app.dependency_overrides[get_repository] = lambda: Repository(engine)

    client = TestClient(app)
    r = client.get("/api/departments")
    assert r.status_code == 500
    assert r.json()["detail"].startswith("Database connection error: ")
    engine.dispose()


def test_store_failure_is_a_500(repo, engine):
    """Test a failing statement surfaces as a 500 with the driver message"""
    with engine.begin() as conn:
        conn.exec_driver_sql("DROP TABLE salary_grades")

    client = TestClient(app)
    r = client.get("/api/salary-grades")
    assert r.status_code == 500
    assert r.json()["detail"].startswith("Database error: ")
    assert "salary_grades" in r.json()["detail"]


def test_update_with_unknown_field_only_is_no_fields(repo):
    """Test that fields outside the schema are ignored by the request model"""
    client = TestClient(app)
    r = client.put("/api/departments/any", json={"budget": 10})
    assert r.status_code == 400
    assert r.json()["detail"] == "No fields to update"
