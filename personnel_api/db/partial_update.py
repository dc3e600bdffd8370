"""
Builds parameterized ``UPDATE`` statements from partial field sets.

A change set is a plain mapping with three states per field:

* key absent          -> leave the column untouched
* key present, value  -> ``<column> = ?`` bound to the value
* key present, None   -> ``<column> = ?`` bound to NULL (nullable columns only)

Clauses always follow the entity's declared field order, not the order of
the incoming mapping, so the generated SQL is stable for a given set of
fields. Column names only ever come from that declared list.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Sequence

from sqlalchemy import Table, update
from sqlalchemy.sql import ColumnElement
from sqlalchemy.sql.dml import Update

from personnel_api.core.errors import NoFieldsToUpdate, ValidationError


@dataclass(frozen=True)
class UpdateStatement:
    table: Table
    identifier: Any
    assignments: tuple[tuple[str, Any], ...]
    derived: tuple[tuple[str, ColumnElement], ...] = field(default=())

    @property
    def columns(self) -> list[str]:
        return [name for name, _ in self.assignments] + [name for name, _ in self.derived]

    @property
    def sql(self) -> str:
        clauses = [f"{name} = ?" for name, _ in self.assignments]
        clauses += [f"{name} = {expr}" for name, expr in self.derived]
        return f"UPDATE {self.table.name} SET {', '.join(clauses)} WHERE id = ?"

    @property
    def params(self) -> tuple:
        """Bound values in clause order, identifier last."""
        return tuple(value for _, value in self.assignments) + (self.identifier,)

    def executable(self) -> Update:
        t = self.table
        values = [(t.c[name], value) for name, value in self.assignments]
        values += [(t.c[name], expr) for name, expr in self.derived]
        return update(t).where(t.c.id == self.identifier).ordered_values(*values)


def build_update(
    table: Table,
    fields: Sequence[str],
    identifier: Any,
    changes: Mapping[str, Any],
    derived: Mapping[str, ColumnElement] | None = None,
) -> UpdateStatement:
    """
    Raises NoFieldsToUpdate when ``changes`` is empty and ValidationError for
    unknown field names or NULL on a NOT NULL column.
    """
    unknown = sorted(set(changes) - set(fields))
    if unknown:
        raise ValidationError(f"Unknown field(s): {', '.join(unknown)}")

    assignments: list[tuple[str, Any]] = []
    for name in fields:
        if name not in changes:
            continue
        value = changes[name]
        if value is None and not table.c[name].nullable:
            raise ValidationError(f"Field '{name}' cannot be null")
        assignments.append((name, value))

    if not assignments:
        raise NoFieldsToUpdate()

    return UpdateStatement(
        table=table,
        identifier=identifier,
        assignments=tuple(assignments),
        derived=tuple((derived or {}).items()),
    )
