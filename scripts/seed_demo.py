from personnel_api.core.config import settings
from personnel_api.core.logging import configure_logging
from personnel_api.db.base import Base
from personnel_api.db.repository import EntityKind, Repository
from personnel_api.db.session import create_db_engine


def main():
    configure_logging(settings.LOG_LEVEL)
    engine = create_db_engine(settings)
    try:
        # dev convenience: create any missing tables
        Base.metadata.create_all(bind=engine)
        repo = Repository(engine)

        dept_id = repo.create(EntityKind.DEPARTMENT, {"name": "Engineering", "head_id": None})
        junior_id = repo.create(EntityKind.SALARY_GRADE, {"code": "E1", "base_salary": 50000.0})
        senior_id = repo.create(
            EntityKind.SALARY_GRADE,
            {"code": "E2", "base_salary": 65000.0, "description": "Senior engineer"},
        )

        lead_id = repo.create(
            EntityKind.EMPLOYEE,
            {
                "first_name": "Grace",
                "last_name": "Hopper",
                "email": "grace@example.com",
                "department_id": dept_id,
                "salary_grade_id": senior_id,
                "role": "Lead",
            },
        )
        ada_id = repo.create(
            EntityKind.EMPLOYEE,
            {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@example.com",
                "department_id": dept_id,
                "salary_grade_id": junior_id,
            },
        )
        repo.update(EntityKind.EMPLOYEE, ada_id, {"manager_id": lead_id})
        repo.update(EntityKind.DEPARTMENT, dept_id, {"head_id": lead_id})

        print("Seeded:")
        print(f"  department_id:   {dept_id}")
        print(f"  salary grades:   E1={junior_id} E2={senior_id}")
        print(f"  lead employee:   {lead_id}")
        print(f"  ada employee:    {ada_id}")

        print("\nTry:")
        print(f"  GET /api/departments/{dept_id}/employees")
        print(f"  PUT /api/employees/{ada_id}/salary-grade  {{\"salary_grade_id\": \"{senior_id}\"}}")
        print()
    finally:
        engine.dispose()


if __name__ == "__main__":
    main()
