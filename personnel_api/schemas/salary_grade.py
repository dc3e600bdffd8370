from datetime import datetime
from pydantic import BaseModel, Field


class SalaryGradeOut(BaseModel):
    id: str
    code: str
    base_salary: float
    description: str | None
    created_at: datetime | None


class SalaryGradeCreate(BaseModel):
    code: str = Field(min_length=1, max_length=50)
    base_salary: float = Field(ge=0)
    description: str | None = None


class SalaryGradeCreatedOut(BaseModel):
    id: str
    code: str
    base_salary: float
    description: str | None


class SalaryGradeUpdate(BaseModel):
    code: str | None = Field(default=None, min_length=1, max_length=50)
    base_salary: float | None = Field(default=None, ge=0)
    description: str | None = None
