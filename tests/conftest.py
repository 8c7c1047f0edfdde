import sqlite3

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from internship_api.core.errors import DatabaseFailure
from internship_api.db.postgres import get_engine_source
from internship_api.main import app

SCHEMA = """
CREATE TABLE students (
    student_id  INTEGER PRIMARY KEY AUTOINCREMENT,
    roll_number TEXT NOT NULL UNIQUE,
    first_name  TEXT NOT NULL,
    last_name   TEXT NOT NULL,
    email       TEXT NOT NULL,
    resume_url  TEXT
);
CREATE TABLE internships (
    internship_id INTEGER PRIMARY KEY AUTOINCREMENT,
    student_id    INTEGER,
    company       TEXT NOT NULL,
    role          TEXT NOT NULL,
    start_date    DATE NOT NULL,
    end_date      DATE NOT NULL
);
CREATE TABLE placements (
    placement_id   INTEGER PRIMARY KEY AUTOINCREMENT,
    student_id     INTEGER,
    company        TEXT NOT NULL,
    role           TEXT NOT NULL DEFAULT '',
    package        TEXT NOT NULL,
    placement_date DATE NOT NULL
);
"""


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "internships.db"
    conn = sqlite3.connect(path)
    try:
        conn.executescript(SCHEMA)
    finally:
        conn.close()
    return path


@pytest.fixture
def engine(db_path):
    # NullPool: TestClient runs the app on its own event loop
    return create_async_engine(f"sqlite+aiosqlite:///{db_path}", poolclass=NullPool)


@pytest.fixture
def client(engine):
    async def acquire():
        return engine

    app.dependency_overrides[get_engine_source] = lambda: acquire
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def count_rows(db_path):
    def _count(table: str) -> int:
        conn = sqlite3.connect(db_path)
        try:
            return conn.execute(f"SELECT COUNT(*) FROM {table}").fetchone()[0]
        finally:
            conn.close()
    return _count


@pytest.fixture
def student_id(client):
    response = client.post("/api/students", json={
        "RollNumber": "R1", "FirstName": "Asha", "LastName": "Bose", "Email": "asha@example.com"
    })
    assert response.status_code == 201
    return response.json()["StudentID"]


@pytest.fixture
def database_down(client):
    """Make every engine acquisition fail; returns the list of attempts."""
    attempts = []

    async def acquire():
        attempts.append(1)
        raise DatabaseFailure("connection refused")

    app.dependency_overrides[get_engine_source] = lambda: acquire
    return attempts
