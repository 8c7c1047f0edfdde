"""
Record repositories - SQL for students, internships and placements.

Every call is one autonomous statement in its own transaction.
Reads go through static SELECTs; partial updates go through build_update().
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Tuple

from sqlalchemy import bindparam, text
from sqlalchemy.types import Date, Integer, String, TypeEngine

from internship_api.core.errors import MissingRequiredFields, NotFound
from internship_api.db.partial_update import (
    UpdateOutcome,
    build_update,
    coerce_id,
    execute_update,
    outcome_from_rowcount,
)
from internship_api.db.postgres import EngineSource, database_errors


@dataclass(frozen=True)
class RecordTable:
    """Fixed description of one record kind."""

    label: str
    table: str
    key: str
    # mutable columns, in statement order
    columns: Tuple[Tuple[str, TypeEngine], ...]
    required: Tuple[str, ...]
    select_sql: str
    key_ref: str
    defaults: Mapping[str, Any] = field(default_factory=dict)

    def field_values(self, values: Mapping[str, Any]) -> List[Tuple[str, TypeEngine, Any]]:
        return [(column, type_, values.get(column)) for column, type_ in self.columns]


# ============================================================
# TABLE DEFINITIONS
# ============================================================

STUDENTS = RecordTable(
    label="Student",
    table="students",
    key="student_id",
    columns=(
        ("roll_number", String()),
        ("first_name", String()),
        ("last_name", String()),
        ("email", String()),
        ("resume_url", String()),
    ),
    required=("roll_number", "first_name", "last_name", "email"),
    select_sql="""
        SELECT student_id, roll_number, first_name, last_name, email, resume_url
        FROM students
    """,
    key_ref="student_id",
)

INTERNSHIPS = RecordTable(
    label="Internship",
    table="internships",
    key="internship_id",
    columns=(
        ("student_id", Integer()),
        ("company", String()),
        ("role", String()),
        ("start_date", Date()),
        ("end_date", Date()),
    ),
    required=("student_id", "company", "role", "start_date", "end_date"),
    select_sql="""
        SELECT i.internship_id, i.student_id, s.first_name, s.last_name,
               i.company, i.role, i.start_date, i.end_date
        FROM internships i
        LEFT JOIN students s ON i.student_id = s.student_id
    """,
    key_ref="i.internship_id",
)

PLACEMENTS = RecordTable(
    label="Placement",
    table="placements",
    key="placement_id",
    columns=(
        ("student_id", Integer()),
        ("company", String()),
        ("role", String()),
        ("package", String()),
        ("placement_date", Date()),
    ),
    required=("student_id", "company", "package", "placement_date"),
    select_sql="""
        SELECT p.placement_id, p.student_id, s.first_name, s.last_name,
               p.company, p.role, p.package, p.placement_date
        FROM placements p
        LEFT JOIN students s ON p.student_id = s.student_id
    """,
    key_ref="p.placement_id",
    # Role is optional on create only; an absent Role on update is skipped
    defaults={"role": ""},
)

# Student creation picks one of two fixed shapes instead of the generic insert
STUDENT_INSERT = text("""
    INSERT INTO students (roll_number, first_name, last_name, email)
    VALUES (:roll_number, :first_name, :last_name, :email)
    RETURNING student_id
""")

STUDENT_INSERT_WITH_RESUME = text("""
    INSERT INTO students (roll_number, first_name, last_name, email, resume_url)
    VALUES (:roll_number, :first_name, :last_name, :email, :resume_url)
    RETURNING student_id
""")


# ============================================================
# HELPERS
# ============================================================

def _is_missing(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def check_required(table: RecordTable, values: Mapping[str, Any]) -> None:
    """Raise MissingRequiredFields before any write if a mandatory value is absent."""
    missing = [column for column in table.required if _is_missing(values.get(column))]
    if missing:
        raise MissingRequiredFields()


def build_insert(table: RecordTable, values: Mapping[str, Any]) -> Tuple[Any, Dict[str, Any]]:
    columns = [column for column, _ in table.columns]
    params = {column: values.get(column) for column in columns}
    for column, default in table.defaults.items():
        if params.get(column) is None:
            params[column] = default

    statement = text(
        f"INSERT INTO {table.table} ({', '.join(columns)}) "
        f"VALUES ({', '.join(':' + column for column in columns)}) "
        f"RETURNING {table.key}"
    ).bindparams(*[bindparam(column, type_=type_) for column, type_ in table.columns])
    return statement, params


# ============================================================
# OPERATIONS
# ============================================================
# Each operation validates its input and builds its statement before
# awaiting acquire(), so bad input is a 400 even while the database is down.

async def list_records(acquire: EngineSource, table: RecordTable) -> List[dict]:
    engine = await acquire()
    async with database_errors():
        async with engine.connect() as conn:
            result = await conn.execute(text(f"{table.select_sql} ORDER BY {table.key_ref}"))
            return [dict(row) for row in result.mappings().all()]


async def get_record(acquire: EngineSource, table: RecordTable, record_id: Any) -> dict:
    statement = text(f"{table.select_sql} WHERE {table.key_ref} = :record_id").bindparams(
        bindparam("record_id", type_=Integer())
    )
    params = {"record_id": coerce_id(record_id)}
    engine = await acquire()
    async with database_errors():
        async with engine.connect() as conn:
            row = (await conn.execute(statement, params)).mappings().first()
    if row is None:
        raise NotFound(f"{table.label} not found")
    return dict(row)


async def insert_record(acquire: EngineSource, table: RecordTable, values: Mapping[str, Any]) -> int:
    """Insert a record after validating mandatory fields. Returns the new id."""
    check_required(table, values)
    statement, params = build_insert(table, values)
    engine = await acquire()
    async with database_errors():
        async with engine.begin() as conn:
            result = await conn.execute(statement, params)
            return result.scalar_one()


async def create_student(acquire: EngineSource, values: Mapping[str, Any]) -> int:
    """Insert a student; ResumeUrl switches to the statement that carries it."""
    check_required(STUDENTS, values)
    params = {column: values[column] for column in STUDENTS.required}
    resume_url = values.get("resume_url")
    if resume_url:
        statement = STUDENT_INSERT_WITH_RESUME
        params["resume_url"] = resume_url
    else:
        statement = STUDENT_INSERT
    engine = await acquire()
    async with database_errors():
        async with engine.begin() as conn:
            result = await conn.execute(statement, params)
            return result.scalar_one()


async def update_record(
    acquire: EngineSource,
    table: RecordTable,
    record_id: Any,
    values: Mapping[str, Any]
) -> UpdateOutcome:
    """
    Partially update one record.

    Raises:
        NoFieldsToUpdate: values carried nothing to write (no storage access)
        NotFound: no row has this id
    """
    statement, params = build_update(table.table, table.key, record_id, table.field_values(values))
    engine = await acquire()
    async with database_errors():
        async with engine.begin() as conn:
            outcome = await execute_update(conn, statement, params)
    if outcome is UpdateOutcome.not_found:
        raise NotFound(f"{table.label} not found")
    return outcome


async def delete_record(acquire: EngineSource, table: RecordTable, record_id: Any) -> None:
    statement = text(f"DELETE FROM {table.table} WHERE {table.key} = :record_id").bindparams(
        bindparam("record_id", type_=Integer())
    )
    params = {"record_id": coerce_id(record_id)}
    engine = await acquire()
    async with database_errors():
        async with engine.begin() as conn:
            result = await conn.execute(statement, params)
            outcome = outcome_from_rowcount(result.rowcount)
    if outcome is UpdateOutcome.not_found:
        raise NotFound(f"{table.label} not found")
