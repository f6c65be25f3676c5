"""Opening the SQLite database that holds containers and tasks."""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Iterable

logger = logging.getLogger(__name__)

DEFAULT_PATH = "todo.db"

_CONTAINER_COLUMNS = (
    "id INTEGER PRIMARY KEY NOT NULL",
    "title TEXT NOT NULL",
)

_TASK_COLUMNS = (
    "id INTEGER PRIMARY KEY AUTOINCREMENT",
    "title TEXT NOT NULL",
    "info TEXT NOT NULL",
    "weeks DATE",
    "days DATE",
    "container_id INTEGER NOT NULL",
    "FOREIGN KEY (container_id) REFERENCES containers(id)",
)


def _create_table(name: str, definitions: Iterable[str]) -> str:
    body = ", ".join(definitions)
    return f"CREATE TABLE IF NOT EXISTS {name} ({body})"


def _schema_statements() -> list[str]:
    return [
        _create_table("containers", _CONTAINER_COLUMNS),
        _create_table("tasks", _TASK_COLUMNS),
    ]


def open_database(path: str | os.PathLike[str] = DEFAULT_PATH) -> sqlite3.Connection:
    """Open the database at ``path``, creating the tables if they are missing."""
    connection = sqlite3.connect(os.fspath(path), check_same_thread=False)
    try:
        connection.execute("PRAGMA foreign_keys = ON")
        with connection:
            for statement in _schema_statements():
                connection.execute(statement)
    except sqlite3.Error:
        connection.close()
        raise
    logger.debug("Database connection created for %s", path)
    return connection