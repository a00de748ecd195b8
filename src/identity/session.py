"""Local session store — remembers which user is signed in.

The signed-in user is kept as a small JSON file (path from
``POCKETLAW_SESSION_FILE``) so CLI runs and the API share one session. An
unreadable or corrupt file is logged and treated as "nobody signed in".
"""

import os
from pathlib import Path

import structlog
from fastapi import HTTPException, status
from pydantic import ValidationError

from shared.snapshots import Actor

logger = structlog.get_logger(__name__)

DEFAULT_SESSION_FILE = "~/.pocketlaw/session.json"


class SessionStore:
    def __init__(self, path: str | Path | None = None):
        raw = path or os.environ.get("POCKETLAW_SESSION_FILE", DEFAULT_SESSION_FILE)
        self.path = Path(raw).expanduser()

    def current_user(self) -> Actor | None:
        if not self.path.exists():
            return None
        try:
            return Actor.model_validate_json(self.path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, ValidationError) as exc:
            logger.error("Could not read session file", path=str(self.path), error=str(exc))
            return None

    def sign_in(self, actor: Actor) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(actor.to_json(), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


_store: SessionStore | None = None


def get_session_store() -> SessionStore:
    """Return the process-wide session store (singleton)."""
    global _store
    if _store is None:
        _store = SessionStore()
    return _store


def set_session_store(store: SessionStore) -> SessionStore:
    global _store
    _store = store
    return store


def reset_session_store():
    global _store
    _store = None


def require_actor() -> Actor:
    """FastAPI dependency: the signed-in user, or 401."""
    actor = get_session_store().current_user()
    if actor is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not signed in")
    return actor
