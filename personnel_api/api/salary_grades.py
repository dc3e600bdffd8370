from fastapi import APIRouter, Depends, status

from personnel_api.db.repository import EntityKind, Repository
from personnel_api.db.session import get_repository
from personnel_api.schemas.common import MessageOut
from personnel_api.schemas.salary_grade import (
    SalaryGradeCreate,
    SalaryGradeCreatedOut,
    SalaryGradeOut,
    SalaryGradeUpdate,
)

router = APIRouter(prefix="/api/salary-grades", tags=["Salary Grades"])


def to_out(row: dict) -> SalaryGradeOut:
    return SalaryGradeOut(**row)


@router.get("", response_model=list[SalaryGradeOut])
def list_salary_grades(repo: Repository = Depends(get_repository)):
    return [to_out(r) for r in repo.list_all(EntityKind.SALARY_GRADE)]


@router.get("/{grade_id}", response_model=SalaryGradeOut)
def get_salary_grade(grade_id: str, repo: Repository = Depends(get_repository)):
    return to_out(repo.get_by_id(EntityKind.SALARY_GRADE, grade_id))


@router.post("", response_model=SalaryGradeCreatedOut, status_code=status.HTTP_201_CREATED)
def create_salary_grade(payload: SalaryGradeCreate, repo: Repository = Depends(get_repository)):
    new_id = repo.create(EntityKind.SALARY_GRADE, payload.model_dump())
    return SalaryGradeCreatedOut(
        id=new_id,
        code=payload.code,
        base_salary=payload.base_salary,
        description=payload.description,
    )


@router.put("/{grade_id}", response_model=MessageOut)
def update_salary_grade(
    grade_id: str,
    payload: SalaryGradeUpdate,
    repo: Repository = Depends(get_repository),
):
    repo.update(EntityKind.SALARY_GRADE, grade_id, payload.model_dump(exclude_unset=True))
    return MessageOut(message="Salary grade updated successfully")


@router.delete("/{grade_id}", response_model=MessageOut)
def delete_salary_grade(grade_id: str, repo: Repository = Depends(get_repository)):
    repo.delete(EntityKind.SALARY_GRADE, grade_id)
    return MessageOut(message="Salary grade deleted successfully")
