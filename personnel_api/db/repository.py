import enum
import logging
import uuid
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Iterator, Mapping

from sqlalchemy import Connection, Engine, Table, delete, func, insert, null, select, true
from sqlalchemy.exc import SQLAlchemyError

from personnel_api.core.errors import NotFound, StoreConnectionError, StoreError, ValidationError
from personnel_api.db.partial_update import UpdateStatement, build_update
from personnel_api.models import Department, Employee, SalaryGrade, User

logger = logging.getLogger(__name__)


class EntityKind(str, enum.Enum):
    EMPLOYEE = "employee"
    DEPARTMENT = "department"
    SALARY_GRADE = "salary_grade"
    USER = "user"


@dataclass(frozen=True)
class EntityMapping:
    label: str
    table: Table
    updatable: tuple[str, ...]
    generated_id: bool = True  # False: the store assigns an integer id
    soft_delete: bool = False
    deletable: bool = True


ENTITIES: dict[EntityKind, EntityMapping] = {
    EntityKind.EMPLOYEE: EntityMapping(
        label="Employee",
        table=Employee.__table__,
        updatable=(
            "first_name",
            "last_name",
            "email",
            "department_id",
            "salary_grade_id",
            "manager_id",
            "role",
            "hire_date",
            "active",
        ),
        soft_delete=True,
    ),
    EntityKind.DEPARTMENT: EntityMapping(
        label="Department",
        table=Department.__table__,
        updatable=("name", "head_id"),
    ),
    EntityKind.SALARY_GRADE: EntityMapping(
        label="Salary grade",
        table=SalaryGrade.__table__,
        updatable=("code", "base_salary", "description"),
    ),
    EntityKind.USER: EntityMapping(
        label="User",
        table=User.__table__,
        updatable=("name", "email"),
        generated_id=False,
        deletable=False,
    ),
}

DEFAULT_EMPLOYEE_ROLE = "Employee"


def employee_role(role: str | None) -> str:
    return DEFAULT_EMPLOYEE_ROLE if role is None else role


class Repository:
    """
    Record repository over the personnel tables.

    Holds the engine (and so the connection pool) for the process lifetime.
    Every operation checks out one connection, runs its statement(s), commits,
    and returns the connection to the pool whatever happens.
    """

    def __init__(self, engine: Engine):
        self.engine = engine

    @contextmanager
    def _connection(self) -> Iterator[Connection]:
        try:
            conn = self.engine.connect()
        except SQLAlchemyError as e:
            logger.error(f"Could not check out a connection: {e}")
            raise StoreConnectionError(str(e)) from e

        with conn:
            try:
                yield conn
                conn.commit()
            except SQLAlchemyError as e:
                conn.rollback()
                logger.error(f"Statement failed: {e}")
                raise StoreError(str(e)) from e

    # ---- create ----

    def create(self, kind: EntityKind, fields: Mapping[str, Any]) -> str | int:
        entity = ENTITIES[kind]
        values = {k: v for k, v in fields.items() if k in entity.updatable}

        if entity.soft_delete:
            # new rows start active; deactivation goes through update/delete
            values.pop("active", None)

        if kind is EntityKind.EMPLOYEE:
            values["role"] = employee_role(values.get("role"))

        if entity.generated_id:
            values["id"] = str(uuid.uuid4())

        with self._connection() as conn:
            result = conn.execute(insert(entity.table).values(**values))
            new_id = values["id"] if entity.generated_id else result.inserted_primary_key[0]

        logger.info(f"Created {kind.value} {new_id}")
        return new_id

    # ---- reads ----

    def list_all(self, kind: EntityKind, include_inactive: bool = False) -> list[dict]:
        entity = ENTITIES[kind]
        stmt = select(entity.table)
        if entity.soft_delete and not include_inactive:
            stmt = stmt.where(entity.table.c.active == true())

        with self._connection() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(r) for r in rows]

    def get_by_id(self, kind: EntityKind, identifier: str | int) -> dict:
        entity = ENTITIES[kind]
        stmt = select(entity.table).where(entity.table.c.id == identifier)

        with self._connection() as conn:
            row = conn.execute(stmt).mappings().one_or_none()

        if row is None:
            raise NotFound(entity.label)
        return dict(row)

    def list_by_parent(self, kind: EntityKind, parent_column: str, parent_id: str) -> list[dict]:
        entity = ENTITIES[kind]
        if parent_column not in entity.updatable:
            raise ValidationError(f"Unknown field(s): {parent_column}")

        t = entity.table
        stmt = select(t).where(t.c[parent_column] == parent_id)
        if entity.soft_delete:
            stmt = stmt.where(t.c.active == true())

        with self._connection() as conn:
            rows = conn.execute(stmt).mappings().all()
        return [dict(r) for r in rows]

    # ---- writes ----

    def prepare_update(self, kind: EntityKind, identifier: str | int, changes: Mapping[str, Any]) -> UpdateStatement:
        entity = ENTITIES[kind]
        derived = None
        if entity.soft_delete and "active" in changes:
            # keep active/deleted_at in step
            t = entity.table
            if changes["active"] is False:
                derived = {"deleted_at": func.coalesce(t.c.deleted_at, func.now())}
            elif changes["active"] is True:
                derived = {"deleted_at": null()}
        return build_update(entity.table, entity.updatable, identifier, changes, derived)

    def update(self, kind: EntityKind, identifier: str | int, changes: Mapping[str, Any]) -> None:
        # built before checkout: an empty change set never reaches the store
        statement = self.prepare_update(kind, identifier, changes)
        logger.debug(f"{statement.sql} params={statement.params}")

        with self._connection() as conn:
            rowcount = conn.execute(statement.executable()).rowcount

        if rowcount == 0:
            logger.info(f"Update of {kind.value} {identifier} matched no rows")
        else:
            logger.info(f"Updated {kind.value} {identifier}: {', '.join(statement.columns)}")

    def delete(self, kind: EntityKind, identifier: str | int) -> None:
        entity = ENTITIES[kind]
        if not entity.deletable:
            raise ValidationError(f"{entity.label} records cannot be deleted")

        t = entity.table
        if entity.soft_delete:
            # first deletion time is kept on repeat deletes
            stmt = (
                t.update()
                .where(t.c.id == identifier)
                .values(active=False, deleted_at=func.coalesce(t.c.deleted_at, func.now()))
            )
        else:
            stmt = delete(t).where(t.c.id == identifier)

        with self._connection() as conn:
            rowcount = conn.execute(stmt).rowcount

        if rowcount == 0:
            logger.info(f"Delete of {kind.value} {identifier} matched no rows")
        else:
            logger.info(f"Deleted {kind.value} {identifier} ({'soft' if entity.soft_delete else 'hard'})")
