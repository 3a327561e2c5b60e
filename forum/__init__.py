# forum/__init__.py
from pathlib import Path

from flask import Flask

from .config import load_config
from .db import init_db
from .filters import formatted_time
from .pipeline import (
    Pipeline,
    attach_session,
    decode_body,
    extract_flash,
    install_fallbacks,
    serve_static,
)
from .routes import register_routes
from .seed import seed_boards_from_yaml
from .sessions import ForumSessionInterface

PACKAGE_DIR = Path(__file__).resolve().parent
STATIC_DIR = PACKAGE_DIR / "static"


def create_app(overrides: dict | None = None) -> Flask:
    """Build a new forum app; nothing listens until run.py serves it."""
    settings = load_config(overrides)

    # Static files are answered by the pipeline, not by a Flask route.
    app = Flask(__name__, static_folder=None)
    app.config.from_mapping(settings)

    # ===== Sessions: signed cookie with a flash slot =====
    app.session_interface = ForumSessionInterface()

    # ===== Templates: autoescape everything, no template cache =====
    app.jinja_options = dict(app.jinja_options, autoescape=True, cache_size=0)
    app.config["TEMPLATES_AUTO_RELOAD"] = True
    app.add_template_filter(formatted_time, "formattedTime")

    # ===== Request pipeline =====
    static_prefix = settings["STATIC_URL_PATH"]
    pipeline = Pipeline([
        decode_body,
        attach_session,
        extract_flash,
        serve_static(static_prefix, str(STATIC_DIR)),
    ])
    pipeline.init_app(app)
    # url_for("static", filename=...) in templates
    app.add_url_rule(
        f"{static_prefix.rstrip('/')}/<path:filename>",
        endpoint="static",
        build_only=True,
    )

    engine, session_factory = init_db(settings["DATABASE_URL"])
    app.extensions["forum.engine"] = engine
    app.extensions["forum.db"] = session_factory
    if settings.get("SEED_BOARDS", True):
        seed_boards_from_yaml(session_factory)

    register_routes(app)
    install_fallbacks(app)

    return app
