from personnel_api.db.repository import EntityKind, Repository


def create_department(repo: Repository, name: str = "Engineering", head_id: str | None = None) -> str:
    return repo.create(EntityKind.DEPARTMENT, {"name": name, "head_id": head_id})


def create_salary_grade(
    repo: Repository,
    code: str = "E1",
    base_salary: float = 50000.0,
    description: str | None = None,
) -> str:
    return repo.create(
        EntityKind.SALARY_GRADE,
        {"code": code, "base_salary": base_salary, "description": description},
    )


def create_employee(
    repo: Repository,
    first_name: str = "Ada",
    last_name: str = "Lovelace",
    email: str = "ada@x.com",
    **fields,
) -> str:
    return repo.create(
        EntityKind.EMPLOYEE,
        {"first_name": first_name, "last_name": last_name, "email": email, **fields},
    )


def create_user(repo: Repository, name: str = "Legacy User", email: str = "legacy@x.com") -> int:
    return repo.create(EntityKind.USER, {"name": name, "email": email})
