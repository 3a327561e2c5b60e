# =============================================================================
# File: forum/pipeline.py
# Purpose: Ordered request stages run before routing, plus 404/500 fallbacks.
# =============================================================================
"""
Request pipeline for the forum.

Every request goes through the same stages, in order, before Flask routes it:

1. decode_body     -> parsed body in state.body (bad JSON = 400 for that request)
2. attach_session  -> signed cookie session in state.session
3. extract_flash   -> state.locals["flash"], removed from the session
4. serve_static    -> files under the static prefix, never routed

A stage returns None to continue, or a response to stop the chain there.
Whatever the stages leave in state.locals is visible to every template.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Optional

from flask import (
    Flask,
    Request,
    Response,
    g,
    jsonify,
    render_template,
    request,
    send_from_directory,
    session,
)
from werkzeug.exceptions import BadRequest, InternalServerError, NotFound

from .sessions import ForumSession

log = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "Something went wrong on our side. Please try again later."


@dataclass
class RequestState:
    """Per-request context shared by the stages and the route handlers."""

    body: Any = None
    session: Optional[ForumSession] = None
    locals: Dict[str, Any] = field(default_factory=dict)


Stage = Callable[[Request, RequestState], Optional[Any]]


class Pipeline:
    """Runs its stages in order; the first non-None result is the response."""

    def __init__(self, stages: Iterable[Stage]):
        self.stages: List[Stage] = list(stages)

    def run(self, req: Request, state: RequestState) -> Optional[Any]:
        for stage in self.stages:
            rv = stage(req, state)
            if rv is not None:
                log.debug("%s answered %s %s", stage.__name__, req.method, req.path)
                return rv
        return None

    def init_app(self, app: Flask) -> None:
        app.extensions["forum.pipeline"] = self
        app.before_request(self._before_request)
        app.context_processor(_response_locals)

    def _before_request(self):
        state = RequestState()
        g.request_state = state
        return self.run(request, state)


def _response_locals() -> Dict[str, Any]:
    state = g.get("request_state")
    if state is None:
        return {}
    return dict(state.locals)


def raw_request_body() -> Any:
    """Body exactly as decode_body parsed it (any JSON value, or None)."""
    state = g.get("request_state")
    return None if state is None else state.body


def request_body() -> Dict[str, Any]:
    """Form-like view of the body: a dict, or {} for absent or non-object bodies."""
    body = raw_request_body()
    return body if isinstance(body, dict) else {}


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------


def decode_body(req: Request, state: RequestState):
    """Parse JSON or form bodies into state.body."""
    if req.is_json:
        raw = req.get_data(cache=True)
        if not raw:
            state.body = {}
            return None
        try:
            data = req.get_json()
        except BadRequest:
            log.info("Malformed JSON body on %s %s", req.method, req.path)
            return jsonify({"error": "malformed_body"}), 400
        state.body = data
        return None

    if req.mimetype in ("application/x-www-form-urlencoded", "multipart/form-data"):
        state.body = req.form.to_dict()
        return None

    state.body = {}
    return None


def attach_session(req: Request, state: RequestState):
    """Expose the cookie session opened for this request."""
    # A cookie with a bad signature was already replaced by an empty session.
    state.session = session._get_current_object()
    return None


def extract_flash(req: Request, state: RequestState):
    """Move the pending flash payload from the session into the template locals."""
    flash = state.session.pop_flash()
    if flash is not None:
        log.debug("flash %r", flash)
    state.locals["flash"] = flash
    return None


def serve_static(url_prefix: str, directory: str) -> Stage:
    """
    Build a stage answering every request under url_prefix from directory.

    It runs after extract_flash, so an asset request also consumes a pending
    flash and its response carries Vary: Cookie. Pages are requested before
    their assets, so the flash still shows on the page that follows a redirect.
    """
    prefix = url_prefix.rstrip("/") + "/"

    def static_files(req: Request, state: RequestState):
        if not req.path.startswith(prefix):
            return None
        if req.method not in ("GET", "HEAD"):
            return Response(status=405, headers={"Allow": "GET, HEAD"})
        try:
            return send_from_directory(directory, req.path[len(prefix):])
        except NotFound:
            return Response(status=404)

    return static_files


# ---------------------------------------------------------------------------
# Fallbacks
# ---------------------------------------------------------------------------


def not_found(error):
    return render_template("404.html"), 404


def server_error(error: InternalServerError):
    # Flask has already logged the original exception with its traceback.
    return Response(SERVER_ERROR_MESSAGE, status=500, mimetype="text/plain")


def install_fallbacks(app: Flask) -> None:
    """Register the not-found page and the generic 500 reply."""
    # Otherwise TESTING/DEBUG would re-raise instead of answering 500.
    app.config["PROPAGATE_EXCEPTIONS"] = False
    app.register_error_handler(404, not_found)
    app.register_error_handler(InternalServerError, server_error)
