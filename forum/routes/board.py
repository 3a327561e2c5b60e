# forum/routes/board.py
from flask import Blueprint, redirect, render_template, session, url_for

from forum.auth import admin_required, current_user
from forum.db import db_session
from forum.models import Board
from forum.pipeline import request_body

bp = Blueprint("board", __name__)


@bp.get("/")
def index():
    with db_session() as s:
        boards = s.query(Board).order_by(Board.id.asc()).all()
        return render_template("board/index.html", boards=boards, user=current_user(s))


@bp.post("/add")
@admin_required
def add():
    title = (request_body().get("title") or "").strip()
    if not title:
        session.put_flash("A board needs a title.", "error")
        return redirect(url_for("board.index"))

    with db_session() as s:
        if s.query(Board).filter_by(title=title).first():
            session.put_flash(f"Board '{title}' already exists.", "error")
            return redirect(url_for("board.index"))
        s.add(Board(title=title))
        s.commit()

    session.put_flash(f"Board '{title}' created.", "success")
    return redirect(url_for("board.index"))
