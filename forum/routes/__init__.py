# =============================================================================
# File: forum/routes/__init__.py
# Purpose: Mount every forum blueprint under its path prefix.
# =============================================================================
from __future__ import annotations

from flask import Flask

from .index import bp as index_bp
from .topic import bp as topic_bp
from .reply import bp as reply_bp
from .board import bp as board_bp
from .user import bp as user_bp
from .api_topic import bp as api_topic_bp

MOUNTS = (
    ("/",          index_bp),
    ("/topic",     topic_bp),
    ("/reply",     reply_bp),
    ("/board",     board_bp),
    ("/user",      user_bp),
    ("/api/topic", api_topic_bp),
)


def register_routes(app: Flask) -> None:
    """Register the forum blueprints on the Flask app."""
    for prefix, bp in MOUNTS:
        app.register_blueprint(bp, url_prefix=prefix)
