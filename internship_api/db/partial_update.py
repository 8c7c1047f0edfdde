"""
Partial UPDATE construction shared by every record kind.

Only columns with a value are written; the record id and every value are
bound parameters. Table and column names come from the fixed table
definitions in records.py, never from the request.
"""

from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from sqlalchemy import bindparam, text
from sqlalchemy.ext.asyncio import AsyncConnection
from sqlalchemy.sql.elements import TextClause
from sqlalchemy.types import Integer, TypeEngine

from internship_api.core.errors import NoFieldsToUpdate, ValidationError

# (column name, SQL type, value)
FieldValue = Tuple[str, TypeEngine, Optional[Any]]

RECORD_ID_PARAM = "record_id"

# PostgreSQL INTEGER (int4) range
INT4_MIN = -2 ** 31
INT4_MAX = 2 ** 31 - 1


class UpdateOutcome(str, Enum):
    updated = "updated"
    not_found = "not_found"


def coerce_id(raw: Any) -> int:
    """Validate a record id as an integer in the INTEGER column range before it is bound."""
    if isinstance(raw, bool):
        raise ValidationError(f"Invalid id: {raw!r}")
    if isinstance(raw, int):
        value = raw
    else:
        try:
            value = int(str(raw).strip())
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid id: {raw!r}")
    if not INT4_MIN <= value <= INT4_MAX:
        raise ValidationError(f"Invalid id: {raw!r}")
    return value


def build_update(
    table: str,
    key_column: str,
    record_id: Any,
    fields: Sequence[FieldValue]
) -> Tuple[TextClause, Dict[str, Any]]:
    """
    Build "UPDATE table SET col = :col, ... WHERE key = :record_id".

    Triples whose value is None are left out entirely.

    Raises:
        NoFieldsToUpdate: no triple carried a value
        ValidationError: record_id is not an integer
    """
    included = [(column, type_, value) for column, type_, value in fields if value is not None]
    if not included:
        raise NoFieldsToUpdate()

    params: Dict[str, Any] = {RECORD_ID_PARAM: coerce_id(record_id)}
    binds = [bindparam(RECORD_ID_PARAM, type_=Integer())]
    assignments = []
    for column, type_, value in included:
        assignments.append(f"{column} = :{column}")
        binds.append(bindparam(column, type_=type_))
        params[column] = value

    statement = text(
        f"UPDATE {table} SET {', '.join(assignments)} WHERE {key_column} = :{RECORD_ID_PARAM}"
    ).bindparams(*binds)
    return statement, params


def outcome_from_rowcount(rowcount: int) -> UpdateOutcome:
    # more than one row cannot happen on a primary key; treat it as success
    if rowcount == 0:
        return UpdateOutcome.not_found
    return UpdateOutcome.updated


async def execute_update(
    conn: AsyncConnection,
    statement: TextClause,
    params: Dict[str, Any]
) -> UpdateOutcome:
    """Run a statement built by build_update and report whether the row existed."""
    result = await conn.execute(statement, params)
    return outcome_from_rowcount(result.rowcount)
