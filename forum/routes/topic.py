# forum/routes/topic.py
from flask import Blueprint, abort, redirect, render_template, session, url_for

from forum.auth import current_user, login_required
from forum.db import db_session
from forum.models import Board, Topic
from forum.pipeline import request_body

bp = Blueprint("topic", __name__)


@bp.get("/<int:topic_id>")
def detail(topic_id: int):
    with db_session() as s:
        t = s.get(Topic, topic_id)
        if t is None:
            abort(404)
        t.views += 1
        s.commit()
        me = current_user(s)
        return render_template("topic/detail.html", topic=t, user=me)


@bp.get("/new")
@login_required
def new():
    with db_session() as s:
        boards = s.query(Board).order_by(Board.id.asc()).all()
        return render_template("topic/new.html", boards=boards, user=current_user(s))


@bp.post("/add")
@login_required
def add():
    form = request_body()
    title = (form.get("title") or "").strip()
    content = (form.get("content") or "").strip()
    if not title:
        session.put_flash("A topic needs a title.", "error")
        return redirect(url_for("topic.new"))

    board_id = form.get("board_id")
    with db_session() as s:
        me = current_user(s)
        if me is None:
            session.clear()
            return redirect(url_for("user.login"))
        board = s.get(Board, int(board_id)) if str(board_id or "").isdigit() else None
        t = Topic(title=title, content=content, user_id=me.id, board_id=board.id if board else None)
        s.add(t)
        s.commit()
        topic_id = t.id

    session.put_flash("Topic created.", "success")
    return redirect(url_for("topic.detail", topic_id=topic_id))


@bp.post("/<int:topic_id>/delete")
@login_required
def delete(topic_id: int):
    with db_session() as s:
        t = s.get(Topic, topic_id)
        if t is None:
            abort(404)
        me = current_user(s)
        if me is None or (me.id != t.user_id and not me.is_admin):
            session.put_flash("You can only delete your own topics.", "error")
            return redirect(url_for("topic.detail", topic_id=topic_id))
        s.delete(t)
        s.commit()

    session.put_flash("Topic deleted.", "success")
    return redirect(url_for("index.index"))
