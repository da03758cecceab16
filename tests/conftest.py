import os
import sqlite3

import pytest

from sqlfragment.compiler import PlaceholderCompiler
from sqlfragment.config import FragmentSettings
from sqlfragment.fragment import Fragment, identifier, sql

# SQLite understands ?NNN numbered parameters, so fragments render with a "?" prefix.
SQLITE_DB_PATH = os.getenv("SQLITE_DB_PATH", ":memory:")


@pytest.fixture(scope="function")
def sqlite_connection():
    """
    Yields a sqlite3 connection for a single test.
    File databases are reset before the test so each test starts empty.
    """
    if SQLITE_DB_PATH != ":memory:":
        db_dir = os.path.dirname(SQLITE_DB_PATH)
        if db_dir:
            os.makedirs(db_dir, exist_ok=True)
        if os.path.exists(SQLITE_DB_PATH):
            os.remove(SQLITE_DB_PATH)

    conn = sqlite3.connect(SQLITE_DB_PATH)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="session")
def sqlite_compiler():
    return PlaceholderCompiler(FragmentSettings(placeholder_prefix="?"))


@pytest.fixture(scope="function")
def run_fragment(sqlite_connection, sqlite_compiler):
    """
    Compiles a fragment and executes it, returning all fetched rows.
    """

    def _run(fragment: Fragment) -> list[tuple]:
        compiled = sqlite_compiler.compile(fragment)
        cursor = sqlite_connection.execute(compiled.sql, compiled.params)
        return cursor.fetchall()

    return _run


@pytest.fixture(scope="function")
def create_table(run_fragment):
    """
    Creates a table from (name, column definitions) and drops it after the test.
    """
    created_tables: list[str] = []

    def _create(table_name: str, columns: str) -> Fragment:
        table = identifier(table_name)
        run_fragment(sql(["CREATE TABLE ", " (", ")"], table, sql(columns)))
        created_tables.append(table_name)
        return table

    yield _create

    for table_name in reversed(created_tables):
        run_fragment(sql(["DROP TABLE IF EXISTS ", ""], identifier(table_name)))
