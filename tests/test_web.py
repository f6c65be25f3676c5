import pytest

from secondbrain.database import open_database
from secondbrain.tasks import TaskStore
from secondbrain.weeks import WeekSelector
from secondbrain.web import create_app, main


@pytest.fixture
def db_path(tmp_path):
    path = tmp_path / "todo.db"
    connection = open_database(path)
    with connection:
        connection.executemany(
            "INSERT INTO containers (id, title) VALUES (?, ?)",
            [(1, "todays-tasks"), (2, "university"), (3, "personal"), (4, "life")],
        )
    connection.close()
    return path


@pytest.fixture
def client(db_path):
    app = create_app(db_path)
    app.config["TESTING"] = True
    return app.test_client()


def _stored(db_path, container, week):
    connection = open_database(db_path)
    try:
        return TaskStore(connection).get_tasks(container, week)
    finally:
        connection.close()


def test_api_post_then_get(client):
    body = {"title": "t", "info": "essay", "week": "01/01/2024", "day": None, "container_id": 0}
    response = client.post("/api/containers/university/tasks", json=body)
    assert response.status_code == 201
    created = response.get_json()
    assert created["info"] == "essay"
    assert created["week"] == "01/01/2024"
    assert created["container_id"] == 2

    listed = client.get("/api/tasks", query_string={"container": "university", "week": "01/01/2024"})
    assert listed.get_json() == [created]


def test_api_get_filters_by_week(client):
    client.post("/api/containers/life/tasks", json={"info": "a", "week": "01/01/2024"})
    client.post("/api/containers/life/tasks", json={"info": "b", "week": "08/01/2024"})
    listed = client.get("/api/tasks", query_string={"container": "life", "week": "08/01/2024"})
    assert [task["info"] for task in listed.get_json()] == ["b"]


def test_api_post_unknown_container(client):
    response = client.post("/api/containers/nowhere/tasks", json={"info": "x"})
    assert response.status_code == 404
    assert response.get_json()["error"] == "Container not found"


def test_api_post_rejects_bad_body(client):
    response = client.post("/api/containers/life/tasks", data="not json")
    assert response.status_code == 400


def test_api_get_requires_parameters(client):
    assert client.get("/api/tasks", query_string={"container": "life"}).status_code == 400


def test_api_put_updates_task(client):
    created = client.post(
        "/api/containers/personal/tasks", json={"info": "old", "week": "01/01/2024"}
    ).get_json()
    update = {
        "title": created["title"],
        "info": "new",
        "week": created["week"],
        "day": None,
        "container_id": created["container_id"],
    }
    assert client.put(f"/api/tasks/{created['id']}", json=update).status_code == 204
    listed = client.get("/api/tasks", query_string={"container": "personal", "week": "01/01/2024"})
    assert [task["info"] for task in listed.get_json()] == ["new"]


def test_api_delete_removes_task(client):
    created = client.post(
        "/api/containers/personal/tasks", json={"info": "gone", "week": "01/01/2024"}
    ).get_json()
    assert client.delete(f"/api/tasks/{created['id']}").status_code == 204
    listed = client.get("/api/tasks", query_string={"container": "personal", "week": "01/01/2024"})
    assert listed.get_json() == []


def test_weekly_page_shows_lists_and_current_week(client):
    page = client.get("/todo/weekly").get_data(as_text=True)
    for title in ("University", "Personal", "Life", "Weekly Tasks"):
        assert title in page
    assert WeekSelector().label() in page
    assert "(current)" in page


def test_weekly_page_next_week_is_not_current(client):
    page = client.get("/todo/weekly", query_string={"offset": 1}).get_data(as_text=True)
    selector = WeekSelector()
    selector.next()
    assert selector.label() in page
    assert "(current)" not in page


def test_root_redirects_to_weekly(client):
    response = client.get("/")
    assert response.status_code == 302
    assert response.headers["Location"].endswith("/todo/weekly")


def test_form_add_update_delete(client, db_path):
    week = WeekSelector().week_key()
    response = client.post("/todo/weekly/university/tasks", data={"info": "read", "offset": "0"})
    assert response.status_code == 302
    tasks = _stored(db_path, "university", week)
    assert [task.info for task in tasks] == ["read"]
    assert "read" in client.get("/todo/weekly").get_data(as_text=True)

    task = tasks[0]
    client.post(
        f"/todo/weekly/tasks/{task.id}",
        data={
            "info": "write",
            "title": task.title,
            "week": task.week,
            "day": "",
            "container_id": str(task.container_id),
            "offset": "0",
        },
    )
    updated = _stored(db_path, "university", week)
    assert [(t.id, t.info, t.day) for t in updated] == [(task.id, "write", None)]

    client.post(f"/todo/weekly/tasks/{task.id}/delete", data={"offset": "0"})
    assert _stored(db_path, "university", week) == []


def test_form_add_to_unknown_container(client):
    response = client.post("/todo/weekly/nowhere/tasks", data={"info": "x"})
    assert response.status_code == 404


def test_main_rejects_bad_port():
    with pytest.raises(SystemExit) as excinfo:
        main(["--port", "abc"])
    assert excinfo.value.code == 2