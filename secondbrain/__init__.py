"""A weekly to-do planner: SQLite task storage, week arithmetic and a Flask web front end."""

__version__ = "0.1.0"
__all__ = ["database", "models", "tasks", "weeks", "web"]