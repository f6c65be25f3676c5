"""Task records exchanged between the task store and its callers."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any


@dataclass(frozen=True)
class TaskInput:
    """The fields a caller supplies when creating or updating a task."""

    title: str
    info: str
    week: str | None = None
    day: str | None = None
    container_id: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Return the task input as a plain, serialisable dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class Task:
    """A stored task together with its identifier."""

    id: int
    title: str
    info: str
    week: str | None
    day: str | None
    container_id: int

    def to_dict(self) -> dict[str, Any]:
        """Return the task as a plain, serialisable dictionary."""
        return asdict(self)