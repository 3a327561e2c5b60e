# forum/auth.py
import functools

from flask import session, redirect, url_for, request

from .db import db_session
from .models import User


def current_user(db_session):
    """Return the logged-in User from the signed session cookie, or None."""
    uid = session.get("user_id")
    if uid is None:
        return None
    try:
        uid = int(uid)
    except (TypeError, ValueError):
        return None
    return db_session.get(User, uid)


def login_required(view):
    """View decorator that redirects anonymous users to the login page."""
    @functools.wraps(view)
    def wrapped_view(**kwargs):
        if "user_id" not in session:
            session.put_flash("Please log in to access this page.", "info")
            return redirect(url_for("user.login", next=request.path))
        return view(**kwargs)
    return wrapped_view


def admin_required(view):
    """Like login_required, but only lets admins through."""
    @functools.wraps(view)
    def wrapped_view(**kwargs):
        with db_session() as s:
            me = current_user(s)
            is_admin = me is not None and me.is_admin
        if not is_admin:
            session.put_flash("Administrator permission is required.", "error")
            return redirect(url_for("index.index"))
        return view(**kwargs)
    return wrapped_view
