#!/usr/bin/env python3
"""
Create the tables from scripts/schema.sql.

Statements use IF NOT EXISTS, so running this twice is harmless.
Usage: python scripts/init_db.py
"""
import asyncio
import sys
from pathlib import Path

sys.path.insert(0, '.')

from sqlalchemy import text

from internship_api.db.postgres import get_pool_manager

SCHEMA_FILE = Path(__file__).with_name("schema.sql")


def split_statements(sql: str) -> list:
    """Split the DDL file on semicolons, dropping comments and blanks."""
    lines = [line for line in sql.splitlines() if not line.strip().startswith("--")]
    return [stmt.strip() for stmt in "\n".join(lines).split(";") if stmt.strip()]


async def main():
    engine = await get_pool_manager().acquire()
    statements = split_statements(SCHEMA_FILE.read_text())
    async with engine.begin() as conn:
        for stmt in statements:
            await conn.execute(text(stmt))
    print(f"✅ Applied {len(statements)} statements from {SCHEMA_FILE.name}")
    await engine.dispose()


if __name__ == "__main__":
    asyncio.run(main())
