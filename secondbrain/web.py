"""Web front end: the weekly to-do page and a JSON API over the task store."""

from __future__ import annotations

import argparse
import os
from typing import Any

from flask import Flask, abort, g, jsonify, redirect, render_template_string, request, url_for

from .database import DEFAULT_PATH, open_database
from .models import TaskInput
from .tasks import ContainerNotFoundError, TaskStore
from .weeks import WeekSelector

WEEKLY_LISTS: tuple[tuple[str, str], ...] = (
    ("todays-tasks", "Today's Tasks"),
    ("university", "University"),
    ("personal", "Personal"),
    ("life", "Life"),
)

_PAGE = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>Weekly Tasks</title></head>
<body>
<div class="nav-bar">
  <button class="nav-button">Weekly Tasks</button>
  <button class="nav-button">Tasks</button>
  <button class="nav-button" id="rewards">Rewards</button>
</div>
<div class="week-switcher">
  <a href="{{ url_for('weekly', offset=offset - 1) }}">&lt;-</a>
  <h3>{{ label }}</h3>
  {% if is_current %}<h3>(current)</h3>{% endif %}
  <a href="{{ url_for('weekly', offset=offset + 1) }}">-&gt;</a>
</div>
<div class="weekly-lists">
{% for container, title, tasks in lists %}
  <div class="element list" id="{{ container }}" tabindex="0">
    <div class="header"><h2>{{ title }}</h2></div>
    <div class="tasks">
    {% for task in tasks %}
      <h3 class="task">{{ task.info }}</h3>
      <form method="post" action="{{ url_for('update_task_form', task_id=task.id) }}">
        <input class="task" name="info" value="{{ task.info }}">
        <input type="hidden" name="title" value="{{ task.title }}">
        <input type="hidden" name="week" value="{{ task.week or '' }}">
        <input type="hidden" name="day" value="{{ task.day or '' }}">
        <input type="hidden" name="container_id" value="{{ task.container_id }}">
        <input type="hidden" name="offset" value="{{ offset }}">
      </form>
      <form method="post" action="{{ url_for('delete_task_form', task_id=task.id) }}">
        <input type="hidden" name="offset" value="{{ offset }}">
        <button type="submit">Delete</button>
      </form>
    {% endfor %}
      <form method="post" action="{{ url_for('add_task_form', container=container) }}">
        <input class="task" name="info" placeholder="Enter new task">
        <input type="hidden" name="offset" value="{{ offset }}">
      </form>
    </div>
  </div>
  {% if loop.first %}
  <div class="element" tabindex="0"></div>
  <div class="break"></div>
  {% endif %}
{% endfor %}
</div>
</body>
</html>
"""


def _selector_at(offset: int) -> WeekSelector:
    selector = WeekSelector()
    step = selector.next if offset > 0 else selector.previous
    for _ in range(abs(offset)):
        step()
    return selector


def _optional_text(value: str | None) -> str | None:
    return value if value else None


def _task_input_from_json(data: Any) -> TaskInput:
    if not isinstance(data, dict):
        abort(400, description="Expected a JSON object")
    title = data.get("title", "")
    info = data.get("info")
    week = data.get("week")
    day = data.get("day")
    container_id = data.get("container_id", 0)
    if not isinstance(title, str) or not isinstance(info, str):
        abort(400, description="title and info must be strings")
    if week is not None and not isinstance(week, str):
        abort(400, description="week must be a string or null")
    if day is not None and not isinstance(day, str):
        abort(400, description="day must be a string or null")
    if isinstance(container_id, bool) or not isinstance(container_id, int):
        abort(400, description="container_id must be an integer")
    return TaskInput(title=title, info=info, week=week, day=day, container_id=container_id)


def create_app(db_path: str | os.PathLike[str] = DEFAULT_PATH) -> Flask:
    """Build the web application backed by the database at ``db_path``."""
    app = Flask(__name__)
    app.config["DATABASE"] = os.fspath(db_path)
    open_database(app.config["DATABASE"]).close()

    def store() -> TaskStore:
        if "task_store" not in g:
            g.task_store = TaskStore(open_database(app.config["DATABASE"]))
        return g.task_store

    @app.teardown_appcontext
    def _close_store(_exc: BaseException | None) -> None:
        task_store = g.pop("task_store", None)
        if task_store is not None:
            task_store.connection.close()

    @app.errorhandler(ContainerNotFoundError)
    def _container_not_found(error: ContainerNotFoundError):
        return jsonify(error="Container not found", container=error.title), 404

    @app.get("/")
    def index():
        return redirect(url_for("weekly"))

    @app.get("/todo/weekly")
    def weekly():
        offset = request.args.get("offset", 0, type=int)
        selector = _selector_at(offset)
        week = selector.week_key()
        lists = [
            (container, title, store().get_tasks(container, week))
            for container, title in WEEKLY_LISTS
        ]
        return render_template_string(
            _PAGE,
            offset=offset,
            label=selector.label(),
            is_current=selector.is_current(),
            lists=lists,
        )

    @app.post("/todo/weekly/<container>/tasks")
    def add_task_form(container: str):
        offset = request.form.get("offset", 0, type=int)
        task = TaskInput(
            title="",
            info=request.form.get("info", ""),
            week=_selector_at(offset).week_key(),
            day=None,
            container_id=0,
        )
        store().post_task(container, task)
        return redirect(url_for("weekly", offset=offset))

    @app.post("/todo/weekly/tasks/<int:task_id>")
    def update_task_form(task_id: int):
        offset = request.form.get("offset", 0, type=int)
        container_id = request.form.get("container_id", type=int)
        if container_id is None:
            abort(400, description="container_id is required")
        task = TaskInput(
            title=request.form.get("title", ""),
            info=request.form.get("info", ""),
            week=_optional_text(request.form.get("week")),
            day=_optional_text(request.form.get("day")),
            container_id=container_id,
        )
        store().put_task(task_id, task)
        return redirect(url_for("weekly", offset=offset))

    @app.post("/todo/weekly/tasks/<int:task_id>/delete")
    def delete_task_form(task_id: int):
        offset = request.form.get("offset", 0, type=int)
        store().delete_task(task_id)
        return redirect(url_for("weekly", offset=offset))

    @app.get("/api/tasks")
    def api_get_tasks():
        container = request.args.get("container")
        week = request.args.get("week")
        if container is None or week is None:
            abort(400, description="container and week are required")
        return jsonify([task.to_dict() for task in store().get_tasks(container, week)])

    @app.post("/api/containers/<container>/tasks")
    def api_post_task(container: str):
        task = _task_input_from_json(request.get_json(silent=True))
        created = store().post_task(container, task)
        return jsonify(None if created is None else created.to_dict()), 201

    @app.put("/api/tasks/<int:task_id>")
    def api_put_task(task_id: int):
        task = _task_input_from_json(request.get_json(silent=True))
        store().put_task(task_id, task)
        return "", 204

    @app.delete("/api/tasks/<int:task_id>")
    def api_delete_task(task_id: int):
        store().delete_task(task_id)
        return "", 204

    return app


def main(argv: list[str] | None = None) -> None:
    """Run the web application from the command line."""
    parser = argparse.ArgumentParser(description="Serve the weekly to-do lists.")
    parser.add_argument("--db", default=DEFAULT_PATH, help="path of the SQLite database")
    parser.add_argument("--host", default="127.0.0.1", help="address to listen on")
    parser.add_argument("--port", type=int, default=8080, help="port to listen on")
    parser.add_argument("--debug", action="store_true", help="run in debug mode")
    args = parser.parse_args(argv)
    create_app(args.db).run(host=args.host, port=args.port, debug=args.debug)


if __name__ == "__main__":
    main()