from datetime import date, datetime
from pydantic import BaseModel, Field


class EmployeeOut(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    department_id: str | None
    salary_grade_id: str | None
    manager_id: str | None
    role: str
    hire_date: date | None
    active: bool
    deleted_at: datetime | None
    created_at: datetime | None
    updated_at: datetime | None


class EmployeeCreate(BaseModel):
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    email: str = Field(min_length=1, max_length=320)
    department_id: str | None = None
    salary_grade_id: str | None = None
    manager_id: str | None = None
    role: str | None = Field(default=None, max_length=100)  # "Employee" when absent
    hire_date: date | None = None


class EmployeeCreatedOut(BaseModel):
    id: str
    first_name: str
    last_name: str
    email: str
    role: str


class EmployeeUpdate(BaseModel):
    """
    Every field is optional. Fields left out of the body are not touched;
    fields sent as null are set to NULL (nullable columns only).
    """
    first_name: str | None = Field(default=None, min_length=1, max_length=100)
    last_name: str | None = Field(default=None, min_length=1, max_length=100)
    email: str | None = Field(default=None, min_length=1, max_length=320)
    department_id: str | None = None
    salary_grade_id: str | None = None
    manager_id: str | None = None
    role: str | None = Field(default=None, max_length=100)
    hire_date: date | None = None
    active: bool | None = None


class AssignManagerRequest(BaseModel):
    manager_id: str


class AssignSalaryGradeRequest(BaseModel):
    salary_grade_id: str
