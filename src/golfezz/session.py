"""
Persisted authentication session for the GolfEzz client.
"""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from golfezz.utils.logging_utils import LoggerMixin


@dataclass
class Session:
    """Token pair and user payload of a signed-in user."""
    token: str | None = None
    refresh_token: str | None = None
    user: dict[str, Any] | None = field(default=None)

    @property
    def is_empty(self) -> bool:
        return not self.token and not self.refresh_token and not self.user

    def to_dict(self) -> dict[str, Any]:
        return {
            'token': self.token,
            'refresh_token': self.refresh_token,
            'user': self.user,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> 'Session':
        user = data.get('user')
        return cls(
            token=data.get('token') or None,
            refresh_token=data.get('refresh_token') or None,
            user=user if isinstance(user, dict) else None
        )


class SessionStore(Protocol):
    """Storage backend for the session."""

    def load(self) -> Session:
        ...

    def save(self, session: Session) -> None:
        ...

    def clear(self) -> None:
        ...


class MemorySessionStore:
    """Session store kept in process memory."""

    def __init__(self, session: Session | None = None):
        self._session = session or Session()

    def load(self) -> Session:
        return Session(
            token=self._session.token,
            refresh_token=self._session.refresh_token,
            user=dict(self._session.user) if self._session.user else None
        )

    def save(self, session: Session) -> None:
        self._session = Session(
            token=session.token,
            refresh_token=session.refresh_token,
            user=dict(session.user) if session.user else None
        )

    def clear(self) -> None:
        self._session = Session()


class FileSessionStore(LoggerMixin):
    """Session store persisted as a JSON file.

    Concurrent processes are not coordinated; the last write wins.
    """

    def __init__(self, path: str | Path):
        super().__init__()
        self.path = Path(path)

    def load(self) -> Session:
        """Load the session, returning an empty one when the file is missing or unreadable."""
        if not self.path.exists():
            return Session()
        try:
            with open(self.path, encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            self.warning("Ignoring unreadable session file", path=str(self.path), error=str(e))
            return Session()
        if not isinstance(data, dict):
            self.warning("Ignoring malformed session file", path=str(self.path))
            return Session()
        return Session.from_dict(data)

    def save(self, session: Session) -> None:
        """Write the session, readable only by the owner."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + '.tmp')
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            json.dump(session.to_dict(), f, indent=2)
        os.replace(tmp_path, self.path)
        self.debug("Saved session", path=str(self.path))

    def clear(self) -> None:
        try:
            self.path.unlink()
            self.debug("Cleared session", path=str(self.path))
        except FileNotFoundError:
            pass
