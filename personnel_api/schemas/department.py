from datetime import datetime
from pydantic import BaseModel, Field


class DepartmentOut(BaseModel):
    id: str
    name: str
    head_id: str | None
    created_at: datetime | None
    updated_at: datetime | None


class DepartmentCreate(BaseModel):
    name: str = Field(min_length=1, max_length=200)
    head_id: str | None = None


class DepartmentCreatedOut(BaseModel):
    id: str
    name: str
    head_id: str | None


class DepartmentUpdate(BaseModel):
    name: str | None = Field(default=None, min_length=1, max_length=200)
    head_id: str | None = None
