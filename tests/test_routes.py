# =============================================================================
# File: tests/test_routes.py
# Purpose: Server-rendered pages and the flash messages they leave behind.
# =============================================================================
from forum.models import Board, Reply, Topic, User

from forum import create_app

from conftest import TEST_SECRET, captured_templates, login, register


def _next_flash(app, client, path="/"):
    with captured_templates(app) as templates:
        client.get(path)
    return templates[0][1]["flash"]


def test_index_lists_seeded_boards(app, client):
    with captured_templates(app) as templates:
        rv = client.get("/")
    assert rv.status_code == 200
    _, context = templates[0]
    assert [b.title for b in context["boards"]] == ["General", "Share", "Ask", "Jobs"]
    assert context["topics"] == []


def test_register_rejects_weak_password(app, client):
    rv = client.post("/user/register", data={"username": "carol", "password": "short"})
    assert rv.status_code == 302
    flash = _next_flash(app, client, "/user/register")
    assert flash["category"] == "error"
    assert "8 characters" in flash["message"]


def test_new_topic_requires_login(app, client):
    rv = client.get("/topic/new")
    assert rv.status_code == 302
    assert "/user/login" in rv.headers["Location"]
    assert _next_flash(app, client, "/user/login")["message"] == "Please log in to access this page."


def test_topic_reply_flow(app, client):
    register(client)
    login(client)

    rv = client.post("/topic/add", data={"title": "Hi all", "content": "<script>x</script>", "board_id": "1"})
    assert rv.status_code == 302
    with app.extensions["forum.db"]() as s:
        topic = s.query(Topic).one()
        topic_id = topic.id
        assert topic.board_id == 1

    rv = client.get(f"/topic/{topic_id}")
    assert rv.status_code == 200
    assert b"Topic created." in rv.data
    assert b"<script>x</script>" not in rv.data
    assert b"&lt;script&gt;" in rv.data

    rv = client.post("/reply/add", data={"topic_id": str(topic_id), "content": "Welcome!"})
    assert rv.status_code == 302
    with app.extensions["forum.db"]() as s:
        assert [r.content for r in s.query(Reply).all()] == ["Welcome!"]
        assert s.get(Topic, topic_id).views == 1


def test_empty_reply_flashes_error(app, client):
    register(client)
    login(client)
    client.post("/topic/add", data={"title": "T"})
    client.get("/")  # consume "Topic created."

    client.post("/reply/add", data={"topic_id": "1", "content": "  "})
    assert _next_flash(app, client, "/topic/1")["message"] == "A reply cannot be empty."


def test_unknown_topic_is_not_found(client):
    assert client.get("/topic/42").status_code == 404


def test_board_add_needs_admin(app, client):
    register(client)
    login(client)
    client.get("/")

    rv = client.post("/board/add", data={"title": "Off-topic"})
    assert rv.status_code == 302
    assert _next_flash(app, client)["message"] == "Administrator permission is required."

    with app.extensions["forum.db"]() as s:
        s.query(User).filter_by(username="alice").update({"role": "admin"})
        s.commit()

    client.post("/board/add", data={"title": "Off-topic"})
    assert _next_flash(app, client, "/board/")["category"] == "success"
    with app.extensions["forum.db"]() as s:
        assert s.query(Board).filter_by(title="Off-topic").count() == 1


def test_logout_clears_session(client):
    register(client)
    login(client)
    client.get("/user/logout")
    with client.session_transaction() as sess:
        assert "user_id" not in sess


def test_login_only_redirects_to_local_paths(client):
    register(client)
    rv = client.post(
        "/user/login",
        data={"username": "alice", "password": "secret123", "next": "//evil.example"},
    )
    assert rv.headers["Location"] == "/"


def test_non_object_json_is_treated_as_empty_form(app, client):
    rv = client.post("/user/login", json=["alice", "secret123"])
    assert rv.status_code == 302
    assert _next_flash(app, client, "/user/login")["message"] == "Wrong username or password."

    rv = client.post("/user/register", json="alice")
    assert rv.status_code == 302
    assert _next_flash(app, client, "/user/register")["category"] == "error"


def test_each_app_keeps_its_own_database(app, client, tmp_path):
    other = create_app({
        "SECRET_KEY": TEST_SECRET,
        "DATABASE_URL": f"sqlite:///{tmp_path / 'other.sqlite'}",
        "SEED_BOARDS": False,
    })
    try:
        with captured_templates(app) as templates:
            client.get("/")
        assert len(templates[0][1]["boards"]) == 4

        with captured_templates(other) as templates:
            other.test_client().get("/")
        assert templates[0][1]["boards"] == []
    finally:
        other.extensions["forum.engine"].dispose()
