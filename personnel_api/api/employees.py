from fastapi import APIRouter, Depends, Query, status

from personnel_api.db.repository import EntityKind, Repository, employee_role
from personnel_api.db.session import get_repository
from personnel_api.schemas.common import MessageOut
from personnel_api.schemas.employee import (
    AssignManagerRequest,
    AssignSalaryGradeRequest,
    EmployeeCreate,
    EmployeeCreatedOut,
    EmployeeOut,
    EmployeeUpdate,
)

router = APIRouter(prefix="/api/employees", tags=["Employees"])


def to_out(row: dict) -> EmployeeOut:
    return EmployeeOut(**row)


@router.get("", response_model=list[EmployeeOut])
def list_employees(
    include_inactive: str | None = Query(default=None, description="Include soft-deleted employees (true/false)"),
    repo: Repository = Depends(get_repository),
):
    """
    List employees. Only active employees unless ?include_inactive=true.
    """
    # anything other than "true" means active only
    rows = repo.list_all(EntityKind.EMPLOYEE, include_inactive=include_inactive == "true")
    return [to_out(r) for r in rows]


@router.get("/{employee_id}", response_model=EmployeeOut)
def get_employee(employee_id: str, repo: Repository = Depends(get_repository)):
    return to_out(repo.get_by_id(EntityKind.EMPLOYEE, employee_id))


@router.post("", response_model=EmployeeCreatedOut, status_code=status.HTTP_201_CREATED)
def create_employee(payload: EmployeeCreate, repo: Repository = Depends(get_repository)):
    fields = payload.model_dump()
    new_id = repo.create(EntityKind.EMPLOYEE, fields)
    return EmployeeCreatedOut(
        id=new_id,
        first_name=payload.first_name,
        last_name=payload.last_name,
        email=payload.email,
        role=employee_role(payload.role),
    )


@router.put("/{employee_id}", response_model=MessageOut)
def update_employee(
    employee_id: str,
    payload: EmployeeUpdate,
    repo: Repository = Depends(get_repository),
):
    """
    Partial update: only the fields present in the body are written.
    """
    repo.update(EntityKind.EMPLOYEE, employee_id, payload.model_dump(exclude_unset=True))
    return MessageOut(message="Employee updated successfully")


@router.delete("/{employee_id}", response_model=MessageOut)
def delete_employee(employee_id: str, repo: Repository = Depends(get_repository)):
    """
    Soft delete: marks the employee inactive and stamps deleted_at.
    """
    repo.delete(EntityKind.EMPLOYEE, employee_id)
    return MessageOut(message="Employee deleted successfully")


@router.put("/{employee_id}/manager", response_model=MessageOut)
def assign_manager(
    employee_id: str,
    payload: AssignManagerRequest,
    repo: Repository = Depends(get_repository),
):
    repo.update(EntityKind.EMPLOYEE, employee_id, {"manager_id": payload.manager_id})
    return MessageOut(message="Manager assigned successfully")


@router.put("/{employee_id}/salary-grade", response_model=MessageOut)
def assign_salary_grade(
    employee_id: str,
    payload: AssignSalaryGradeRequest,
    repo: Repository = Depends(get_repository),
):
    repo.update(EntityKind.EMPLOYEE, employee_id, {"salary_grade_id": payload.salary_grade_id})
    return MessageOut(message="Salary grade assigned successfully")
