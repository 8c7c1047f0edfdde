"""
Database module - shared PostgreSQL engine and record SQL.
"""
from internship_api.db.postgres import (
    EngineSource, get_engine, get_engine_source, get_pool_manager, test_postgres_connection
)

__all__ = [
    "EngineSource",
    "get_engine",
    "get_engine_source",
    "get_pool_manager",
    "test_postgres_connection"
]
