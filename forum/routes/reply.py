# forum/routes/reply.py
from flask import Blueprint, abort, redirect, session, url_for

from forum.auth import current_user, login_required
from forum.db import db_session
from forum.models import Reply, Topic
from forum.pipeline import request_body

bp = Blueprint("reply", __name__)


@bp.post("/add")
@login_required
def add():
    form = request_body()
    topic_id = str(form.get("topic_id") or "")
    if not topic_id.isdigit():
        abort(404)
    content = (form.get("content") or "").strip()

    with db_session() as s:
        t = s.get(Topic, int(topic_id))
        if t is None:
            abort(404)
        if not content:
            session.put_flash("A reply cannot be empty.", "error")
            return redirect(url_for("topic.detail", topic_id=t.id))
        me = current_user(s)
        if me is None:
            session.clear()
            return redirect(url_for("user.login"))
        s.add(Reply(content=content, topic_id=t.id, user_id=me.id))
        s.commit()
        return redirect(url_for("topic.detail", topic_id=t.id))
