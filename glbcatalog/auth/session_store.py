"""
Persisted login session.

One session per device, kept in a small JSON file so it survives
restarts. A session is valid iff ``save`` ran more recently than
``clear``; there is no expiry and no token.
"""

import os
import tempfile
import threading
from pathlib import Path

from pydantic import BaseModel, ValidationError

from glbcatalog.logging_config import get_logger
from glbcatalog.models.user import Role

logger = get_logger(__name__)


class SessionState(BaseModel):
    user_id: int | None = None
    username: str | None = None
    role: str | None = None
    logged_in: bool = False


class SessionStore:
    def __init__(self, path: str | os.PathLike):
        self.path = Path(path)
        self._lock = threading.Lock()

    def save(self, user_id: int, username: str, role: str) -> None:
        state = SessionState(user_id=user_id, username=username, role=role, logged_in=True)
        self._write(state)
        logger.info("session_saved", user_id=user_id, username=username, role=role)

    def clear(self) -> None:
        with self._lock:
            self.path.unlink(missing_ok=True)
        logger.info("session_cleared")

    def is_logged_in(self) -> bool:
        return self._read().logged_in

    def role(self) -> str | None:
        return self._read().role

    def username(self) -> str | None:
        return self._read().username

    def user_id(self) -> int | None:
        return self._read().user_id

    def is_admin(self) -> bool:
        return self.is_logged_in() and self.role() == Role.ADMIN.value

    def _read(self) -> SessionState:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return SessionState()
        except UnicodeDecodeError:
            logger.warning("session_file_unreadable", path=str(self.path))
            return SessionState()
        try:
            return SessionState.model_validate_json(raw)
        except ValidationError:
            logger.warning("session_file_unreadable", path=str(self.path))
            return SessionState()

    def _write(self, state: SessionState) -> None:
        # temp file + rename so readers never see a half-written session
        with self._lock:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp = tempfile.mkstemp(dir=self.path.parent, prefix=".session-", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    fh.write(state.model_dump_json())
                os.replace(tmp, self.path)
            except BaseException:
                Path(tmp).unlink(missing_ok=True)
                raise
