# =============================================================================
# File: forum/sessions.py
# Purpose: Signed-cookie session with a one-time flash slot.
# =============================================================================
from __future__ import annotations

from typing import Any, Optional

from flask.sessions import SecureCookieSession, SecureCookieSessionInterface

FLASH_KEY = "flash"


class ForumSession(SecureCookieSession):
    """
    Cookie session (signed, not encrypted) that carries at most one flash
    payload for the next request.
    """

    def put_flash(self, message: str, category: str = "info") -> None:
        """Store a message to be shown on the next page load."""
        self[FLASH_KEY] = {"message": message, "category": category}

    def pop_flash(self) -> Optional[Any]:
        """Return the pending flash payload and remove it from the session."""
        if FLASH_KEY not in self:
            return None
        return self.pop(FLASH_KEY)


class ForumSessionInterface(SecureCookieSessionInterface):
    # open_session() already falls back to an empty session on BadSignature
    session_class = ForumSession
