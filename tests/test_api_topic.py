# =============================================================================
# File: tests/test_api_topic.py
# Purpose: JSON topic API smoke tests (list, create, read, delete).
# =============================================================================
from conftest import login, register


def test_add_requires_login(client):
    rv = client.post("/api/topic/add", json={"title": "Hello"})
    assert rv.status_code == 401
    assert rv.get_json()["error"] == "not_authenticated"


def test_add_get_all_delete(client):
    register(client)
    login(client)

    rv = client.post("/api/topic/add", json={"title": "Hello", "content": "First!", "board_id": 1})
    assert rv.status_code == 201
    topic = rv.get_json()
    assert topic["title"] == "Hello"
    assert topic["board_id"] == 1

    rv = client.get(f"/api/topic/{topic['id']}")
    assert rv.status_code == 200
    assert rv.get_json()["content"] == "First!"

    rv = client.get("/api/topic/all")
    assert [t["id"] for t in rv.get_json()] == [topic["id"]]

    rv = client.post("/api/topic/delete", json={"id": topic["id"]})
    assert rv.status_code == 200
    assert rv.get_json() == {"ok": True, "id": topic["id"]}

    rv = client.get(f"/api/topic/{topic['id']}")
    assert rv.status_code == 404


def test_add_validates_body(client):
    register(client)
    login(client)

    rv = client.post("/api/topic/add", json=["not", "an", "object"])
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "object_required"

    rv = client.post("/api/topic/add", json={"title": "   "})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "title_required"

    rv = client.post("/api/topic/add", json={"title": "x", "board_id": 999})
    assert rv.status_code == 400
    assert rv.get_json()["error"] == "unknown_board"


def test_delete_someone_elses_topic_is_forbidden(app):
    owner = app.test_client()
    register(owner, "owner", "owner1234")
    login(owner, "owner", "owner1234")
    topic_id = owner.post("/api/topic/add", json={"title": "Mine"}).get_json()["id"]

    other = app.test_client()
    register(other, "other", "other1234")
    login(other, "other", "other1234")
    rv = other.post("/api/topic/delete", json={"id": topic_id})
    assert rv.status_code == 403
