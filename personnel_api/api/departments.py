from fastapi import APIRouter, Depends, status

from personnel_api.api.employees import to_out as employee_to_out
from personnel_api.db.repository import EntityKind, Repository
from personnel_api.db.session import get_repository
from personnel_api.schemas.common import MessageOut
from personnel_api.schemas.department import (
    DepartmentCreate,
    DepartmentCreatedOut,
    DepartmentOut,
    DepartmentUpdate,
)
from personnel_api.schemas.employee import EmployeeOut

router = APIRouter(prefix="/api/departments", tags=["Departments"])


def to_out(row: dict) -> DepartmentOut:
    return DepartmentOut(**row)


@router.get("", response_model=list[DepartmentOut])
def list_departments(repo: Repository = Depends(get_repository)):
    return [to_out(r) for r in repo.list_all(EntityKind.DEPARTMENT)]


@router.get("/{department_id}", response_model=DepartmentOut)
def get_department(department_id: str, repo: Repository = Depends(get_repository)):
    return to_out(repo.get_by_id(EntityKind.DEPARTMENT, department_id))


@router.get("/{department_id}/employees", response_model=list[EmployeeOut], tags=["Employees"])
def list_department_employees(department_id: str, repo: Repository = Depends(get_repository)):
    """
    Active employees whose department_id is this department.
    """
    rows = repo.list_by_parent(EntityKind.EMPLOYEE, "department_id", department_id)
    return [employee_to_out(r) for r in rows]


@router.post("", response_model=DepartmentCreatedOut, status_code=status.HTTP_201_CREATED)
def create_department(payload: DepartmentCreate, repo: Repository = Depends(get_repository)):
    new_id = repo.create(EntityKind.DEPARTMENT, payload.model_dump())
    return DepartmentCreatedOut(id=new_id, name=payload.name, head_id=payload.head_id)


@router.put("/{department_id}", response_model=MessageOut)
def update_department(
    department_id: str,
    payload: DepartmentUpdate,
    repo: Repository = Depends(get_repository),
):
    repo.update(EntityKind.DEPARTMENT, department_id, payload.model_dump(exclude_unset=True))
    return MessageOut(message="Department updated successfully")


@router.delete("/{department_id}", response_model=MessageOut)
def delete_department(department_id: str, repo: Repository = Depends(get_repository)):
    # hard delete; an unknown id is not an error
    repo.delete(EntityKind.DEPARTMENT, department_id)
    return MessageOut(message="Department deleted successfully")
