"""Creating, reading, updating and deleting tasks in the database."""

from __future__ import annotations

import sqlite3

from .models import Task, TaskInput

_SELECT_COLUMNS = "t.id, t.title, t.info, t.weeks, t.days, t.container_id"


class ContainerNotFoundError(LookupError):
    """Raised when no container carries the requested title."""

    def __init__(self, title: str) -> None:
        super().__init__(f"Container not found: {title!r}")
        self.title = title


def _row_to_task(row: tuple) -> Task:
    task_id, title, info, week, day, container_id = row
    return Task(id=task_id, title=title, info=info, week=week, day=day, container_id=container_id)


class TaskStore:
    """Task operations over an open database connection."""

    def __init__(self, connection: sqlite3.Connection) -> None:
        self.connection = connection

    def _container_id(self, title: str) -> int:
        row = self.connection.execute(
            "SELECT id FROM containers WHERE title = ?", (title,)
        ).fetchone()
        if row is None:
            raise ContainerNotFoundError(title)
        return row[0]

    def post_task(self, container_title: str, task: TaskInput) -> Task | None:
        """Add a task to the named container and return it as stored."""
        container_id = self._container_id(container_title)
        with self.connection:
            cursor = self.connection.execute(
                "INSERT INTO tasks (title, info, weeks, days, container_id) VALUES (?, ?, ?, ?, ?)",
                (task.title, task.info, task.week, task.day, container_id),
            )
        row = self.connection.execute(
            f"SELECT {_SELECT_COLUMNS} FROM tasks t WHERE t.id = ?", (cursor.lastrowid,)
        ).fetchone()
        return None if row is None else _row_to_task(row)

    def put_task(self, task_id: int, task: TaskInput) -> None:
        """Overwrite every field of the task with the given id."""
        with self.connection:
            self.connection.execute(
                "UPDATE tasks SET title = ?, info = ?, weeks = ?, days = ?, container_id = ? WHERE id = ?",
                (task.title, task.info, task.week, task.day, task.container_id, task_id),
            )

    def delete_task(self, task_id: int) -> None:
        """Remove the task with the given id, if there is one."""
        with self.connection:
            self.connection.execute("DELETE FROM tasks WHERE id = ?", (task_id,))

    def get_tasks(self, container_title: str, current_week: str) -> list[Task]:
        """Return the tasks of the named container for the given week."""
        rows = self.connection.execute(
            f"""SELECT {_SELECT_COLUMNS}
                FROM tasks t
                JOIN containers c ON t.container_id = c.id
                WHERE c.title = ? AND t.weeks = ?""",
            (container_title, current_week),
        )
        return [_row_to_task(row) for row in rows]