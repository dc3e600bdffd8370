from fastapi.testclient import TestClient

from personnel_api.main import app


def test_department_grade_employee_workflow(repo):
    """
    End-to-end: department -> salary grades -> employee -> regrade.
    """
    client = TestClient(app)

    r = client.post("/api/departments", json={"name": "Engineering", "head_id": None})
    assert r.status_code == 201
    dept = r.json()
    assert dept["name"] == "Engineering"

    r = client.post("/api/salary-grades", json={"code": "E1", "base_salary": 50000.0})
    assert r.status_code == 201
    grade = r.json()

    r = client.post("/api/salary-grades", json={"code": "E2", "base_salary": 60000.0})
    assert r.status_code == 201
    other_grade = r.json()

    r = client.post(
        "/api/employees",
        json={
            "first_name": "Ada",
            "last_name": "Lovelace",
            "email": "ada@x.com",
            "department_id": dept["id"],
            "salary_grade_id": grade["id"],
        },
    )
    assert r.status_code == 201
    created = r.json()
    assert created["role"] == "Employee"

    r = client.get(f"/api/employees/{created['id']}")
    assert r.status_code == 200
    before = r.json()
    assert before["first_name"] == "Ada"
    assert before["last_name"] == "Lovelace"
    assert before["email"] == "ada@x.com"
    assert before["department_id"] == dept["id"]
    assert before["salary_grade_id"] == grade["id"]
    assert before["role"] == "Employee"

    r = client.put(
        f"/api/employees/{created['id']}/salary-grade",
        json={"salary_grade_id": other_grade["id"]},
    )
    assert r.status_code == 200

    after = client.get(f"/api/employees/{created['id']}").json()
    assert after["salary_grade_id"] == other_grade["id"]
    for key in ("first_name", "last_name", "email", "department_id", "manager_id", "role", "hire_date", "active"):
        assert after[key] == before[key]

    listed = client.get(f"/api/departments/{dept['id']}/employees").json()
    assert [e["id"] for e in listed] == [created["id"]]
