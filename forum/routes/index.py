# forum/routes/index.py
from flask import Blueprint, render_template, request

from forum.auth import current_user
from forum.db import db_session
from forum.models import Board, Topic

bp = Blueprint("index", __name__)


@bp.get("/")
def index():
    """Topic list, newest first, optionally filtered by ?board_id=."""
    board_id = request.args.get("board_id", type=int)
    with db_session() as s:
        me = current_user(s)
        q = s.query(Topic)
        if board_id is not None:
            q = q.filter(Topic.board_id == board_id)
        topics = q.order_by(Topic.id.desc()).all()
        boards = s.query(Board).order_by(Board.id.asc()).all()
        return render_template(
            "index.html",
            user=me,
            topics=topics,
            boards=boards,
            board_id=board_id,
        )
