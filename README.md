# secondbrain

A small weekly to-do planner. Tasks belong to named lists, which the
package calls containers. The weekly page shows four of them:
`todays-tasks` ("Today's Tasks"), `university`, `personal` and `life`.
Each task is filed under a week, and the page shows one week at a time.
Tasks are stored in a SQLite database file.

## Installing

```
pip install .
```

## Running the planner

```
secondbrain
```

This serves the Flask application. Options:

- `--db PATH`: the SQLite database file (default `todo.db` in the
  working directory; it is created if it does not exist)
- `--host HOST`: the address to listen on (default `127.0.0.1`)
- `--port PORT`: the port to listen on (default `8080`)
- `--debug`: run Flask in debug mode

Open `/todo/weekly` in a browser (`/` redirects there). The header
shows the selected week as a date range such as
`02/06/2025 - 08/06/2025`, marked `(current)` for this week. The
arrows move a week back or forward; the page keeps this in its
`offset` query parameter, counted in weeks from the current one.

In each list you can type a new task and press Enter to add it to the
week on screen. You can also edit a task's text and press Enter to save
it, or press its Delete button to remove it.

## JSON API

The same application offers:

- `GET /api/tasks?container=<title>&week=<dd/mm/YYYY>`: the tasks of
  one container for one week, as a JSON list. Both parameters are
  required.
- `POST /api/containers/<title>/tasks`: add a task. The body is a JSON
  object with `info` (string, required), and optionally `title` (string,
  default `""`), `week` and `day` (string or null) and `container_id`
  (integer, default `0`). The stored task is returned with status 201.
  The task is filed under the container named in the URL, whatever
  `container_id` says.
- `PUT /api/tasks/<id>`: replace every field of a task with the same
  kind of body. Returns 204.
- `DELETE /api/tasks/<id>`: remove a task. Returns 204.

A body that is not a JSON object, or has fields of the wrong type, gets
status 400. Adding a task to a container that does not exist gets
status 404 with `{"error": "Container not found", "container": ...}`.

## Using it from Python

```python
from secondbrain.database import open_database
from secondbrain.models import TaskInput
from secondbrain.tasks import TaskStore
from secondbrain.weeks import WeekSelector

connection = open_database("todo.db")
store = TaskStore(connection)

week = WeekSelector()
new_task = TaskInput(title="", info="Hand in the essay", week=week.week_key())
created = store.post_task("university", new_task)

for task in store.get_tasks("university", week.week_key()):
    print(task.id, task.info)
```

- `secondbrain.database.open_database(path)` opens the SQLite file,
  turns on foreign keys and creates the `containers` and `tasks` tables
  if they are missing.
- `secondbrain.models.TaskInput` and `Task` are frozen dataclasses;
  `to_dict()` returns their fields as a dictionary.
- `TaskStore.post_task(container_title, task)` adds a task to the
  container with that title and returns the stored `Task`. If no
  container has that title it raises
  `secondbrain.tasks.ContainerNotFoundError`.
- `TaskStore.put_task(task_id, task)` replaces every field of an
  existing task, `container_id` included.
- `TaskStore.delete_task(task_id)` removes a task; an unknown id is
  ignored.
- `TaskStore.get_tasks(container_title, current_week)` lists the tasks
  of one container whose week equals `current_week`.
- `secondbrain.weeks.week_start(moment)` moves a datetime back to the
  Monday of its week, keeping the time of day, and
  `format_date(moment)` writes it as `dd/mm/YYYY`.
- `WeekSelector(now=None)` tracks the current week and a selected week,
  both starting at the Monday of `now` (local time if omitted).
  `previous()` and `next()` move the selection by a week,
  `is_current()` tells whether it is the current week, `week_key()`
  gives the selected Monday as `dd/mm/YYYY`, and `label()` the
  `start - end` range of the selected week.
- `secondbrain.web.create_app(db_path)` builds the Flask application
  that the `secondbrain` command serves.

## What it does not do

The package never creates containers: a new database has an empty
`containers` table, and until rows are added to it every attempt to add
a task fails with "Container not found". Add them yourself, for example:

```python
import sqlite3

with sqlite3.connect("todo.db") as connection:
    connection.execute(
        "INSERT OR IGNORE INTO containers (id, title) VALUES "
        "(1, 'todays-tasks'), (2, 'university'), (3, 'personal'), (4, 'life')"
    )
```

The page has no way to set a task's `day`, and the box beside
"Today's Tasks" is an empty placeholder. The "Tasks" and "Rewards"
buttons in the navigation bar lead nowhere. There are no stylesheets.

## Running the tests

```
pip install .[test]
pytest
```