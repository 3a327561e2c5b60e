# forum/routes/api_topic.py
from flask import Blueprint, jsonify

from forum.auth import current_user
from forum.db import db_session
from forum.models import Board, Topic
from forum.pipeline import raw_request_body

bp = Blueprint("api_topic", __name__)


def _json_object() -> dict | None:
    body = raw_request_body()
    return body if isinstance(body, dict) else None


# -----------------------------------------------------------------
# Read
# -----------------------------------------------------------------
@bp.get("/all")
def all_topics():
    with db_session() as s:
        rows = s.query(Topic).order_by(Topic.id.desc()).all()
        return jsonify([t.to_dict() for t in rows])


@bp.get("/<int:topic_id>")
def get_topic(topic_id: int):
    with db_session() as s:
        t = s.get(Topic, topic_id)
        if t is None:
            return jsonify({"error": "not_found"}), 404
        return jsonify(t.to_dict())


# -----------------------------------------------------------------
# Write (session cookie required)
# -----------------------------------------------------------------
@bp.post("/add")
def add_topic():
    form = _json_object()
    if form is None:
        return jsonify({"error": "object_required"}), 400

    title = (form.get("title") or "").strip()
    if not title:
        return jsonify({"error": "title_required"}), 400

    with db_session() as s:
        me = current_user(s)
        if me is None:
            return jsonify({"error": "not_authenticated"}), 401

        board_id = form.get("board_id")
        if board_id is not None and (
            not isinstance(board_id, int) or s.get(Board, board_id) is None
        ):
            return jsonify({"error": "unknown_board"}), 400

        t = Topic(
            title=title,
            content=(form.get("content") or "").strip(),
            user_id=me.id,
            board_id=board_id,
        )
        s.add(t)
        s.commit()
        return jsonify(t.to_dict()), 201


@bp.post("/delete")
def delete_topic():
    form = _json_object()
    if form is None or not isinstance(form.get("id"), int):
        return jsonify({"error": "id_required"}), 400

    with db_session() as s:
        me = current_user(s)
        if me is None:
            return jsonify({"error": "not_authenticated"}), 401
        t = s.get(Topic, form["id"])
        if t is None:
            return jsonify({"error": "not_found"}), 404
        if t.user_id != me.id and not me.is_admin:
            return jsonify({"error": "forbidden"}), 403
        s.delete(t)
        s.commit()
        return jsonify({"ok": True, "id": form["id"]})
