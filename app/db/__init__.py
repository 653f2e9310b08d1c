"""
Database module - relational store connection and schema setup.
"""
from app.db.postgres import get_db_session, init_schema, test_database_connection

__all__ = [
    "get_db_session",
    "init_schema",
    "test_database_connection"
]
