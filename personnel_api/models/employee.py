from datetime import date, datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, String
from sqlalchemy.orm import Mapped, mapped_column
import sqlalchemy as sa

from personnel_api.db.base import Base


class Employee(Base):
    __tablename__ = "employees"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)

    first_name: Mapped[str] = mapped_column(String(100), nullable=False)
    last_name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)

    department_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("departments.id", ondelete="SET NULL"), nullable=True
    )
    salary_grade_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("salary_grades.id", ondelete="SET NULL"), nullable=True
    )
    # self-referential
    manager_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("employees.id", ondelete="SET NULL"), nullable=True
    )

    role: Mapped[str] = mapped_column(String(100), nullable=False, default="Employee")
    hire_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    # soft delete: active=False always comes with deleted_at
    active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default=sa.true())
    deleted_at: Mapped[datetime | None] = mapped_column(DateTime, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=sa.func.now())
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        server_default=sa.func.now(),
        onupdate=sa.func.now(),
    )
