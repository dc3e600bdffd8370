from datetime import datetime

from sqlalchemy import DateTime, Double, String, Text
from sqlalchemy.orm import Mapped, mapped_column
import sqlalchemy as sa

from personnel_api.db.base import Base


class SalaryGrade(Base):
    __tablename__ = "salary_grades"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    code: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    base_salary: Mapped[float] = mapped_column(Double, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, server_default=sa.func.now())
