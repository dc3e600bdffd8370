from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from personnel_api.db.base import Base


class User(Base):
    """Legacy user table: integer ids assigned by the store, no soft delete."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
