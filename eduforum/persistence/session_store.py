"""Process-held session store.

Sessions are deliberately not persisted: restarting the process logs
everybody out.
"""

from datetime import datetime, timedelta
from typing import Optional

from eduforum.domain.model.session import Session
from eduforum.domain.repository import SessionRepository


class ProcessSessionStore(SessionRepository):
    """Dictionary-backed session store shared by all requests of a process."""

    def __init__(self) -> None:
        self._sessions: dict[str, Session] = {}

    async def get(self, token: str) -> Optional[Session]:
        """Get a session by token."""
        return self._sessions.get(token)

    async def save(self, session: Session) -> Session:
        """Create or replace a session."""
        self._sessions[session.token] = session
        return session

    async def delete(self, token: str) -> bool:
        """Delete a session."""
        return self._sessions.pop(token, None) is not None

    async def purge_expired(self, timeout: timedelta, now: datetime) -> int:
        """Drop sessions whose inactivity window has elapsed."""
        stale = [
            token
            for token, session in self._sessions.items()
            if session.is_expired(timeout, now)
        ]
        for token in stale:
            del self._sessions[token]
        return len(stale)

    def __len__(self) -> int:
        return len(self._sessions)
