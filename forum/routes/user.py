# forum/routes/user.py
"""
User pages: register, login, logout and public profile.

Failed attempts put a flash message in the session and redirect, so the
message is shown exactly once on the next page.
"""
from flask import Blueprint, abort, redirect, render_template, request, session, url_for
from werkzeug.security import check_password_hash, generate_password_hash

from forum.auth import current_user
from forum.db import db_session
from forum.models import Topic, User
from forum.pipeline import request_body

bp = Blueprint("user", __name__)


# ---------------------------------------------------------------------------
# Helpers: validation
# ---------------------------------------------------------------------------


def validate_username(username: str) -> list[str]:
    """3 to 50 characters, no spaces."""
    errors: list[str] = []
    if len(username) < 3:
        errors.append("The username must be at least 3 characters long.")
    if len(username) > 50:
        errors.append("The username must be at most 50 characters long.")
    if " " in username:
        errors.append("The username cannot contain spaces.")
    return errors


def validate_password(password: str) -> list[str]:
    """
    Validate password complexity.

    Simple rules for now:
    - minimum 8 characters
    - at least 1 digit
    - at least 1 letter
    """
    errors: list[str] = []
    if len(password) < 8:
        errors.append("The password must be at least 8 characters long.")
    if not any(c.isdigit() for c in password):
        errors.append("The password must contain at least one digit.")
    if not any(c.isalpha() for c in password):
        errors.append("The password must contain at least one letter.")
    return errors


def _safe_next(target: str | None) -> str:
    # Only local paths, never another host
    if target and target.startswith("/") and not target.startswith("//"):
        return target
    return url_for("index.index")


# ---------------------------------------------------------------------------
# Register / login / logout
# ---------------------------------------------------------------------------


@bp.get("/register")
def register_page():
    return render_template("user/register.html")


@bp.post("/register")
def register():
    form = request_body()
    username = (form.get("username") or "").strip()
    password = form.get("password") or ""

    errors = validate_username(username) + validate_password(password)
    if errors:
        session.put_flash(" ".join(errors), "error")
        return redirect(url_for("user.register_page"))

    with db_session() as s:
        if s.query(User).filter_by(username=username).first():
            session.put_flash("This username is already taken.", "error")
            return redirect(url_for("user.register_page"))
        u = User(username=username, password_hash=generate_password_hash(password))
        s.add(u)
        s.commit()

    session.put_flash("Account created, you can log in now.", "success")
    return redirect(url_for("user.login"))


@bp.get("/login")
def login():
    return render_template("user/login.html", next=request.args.get("next", ""))


@bp.post("/login")
def login_submit():
    form = request_body()
    username = (form.get("username") or "").strip()
    password = form.get("password") or ""

    with db_session() as s:
        u = s.query(User).filter_by(username=username).first()
        if u is None or not check_password_hash(u.password_hash, password):
            session.put_flash("Wrong username or password.", "error")
            return redirect(url_for("user.login"))
        user_id = u.id

    session["user_id"] = user_id
    session.put_flash(f"Welcome back, {username}!", "success")
    return redirect(_safe_next(form.get("next")))


@bp.get("/logout")
def logout():
    session.clear()
    return redirect(url_for("index.index"))


# ---------------------------------------------------------------------------
# Profile
# ---------------------------------------------------------------------------


@bp.get("/<int:user_id>")
def profile(user_id: int):
    with db_session() as s:
        u = s.get(User, user_id)
        if u is None:
            abort(404)
        topics = (
            s.query(Topic)
            .filter_by(user_id=u.id)
            .order_by(Topic.id.desc())
            .all()
        )
        return render_template(
            "user/profile.html",
            profile=u,
            topics=topics,
            user=current_user(s),
        )
