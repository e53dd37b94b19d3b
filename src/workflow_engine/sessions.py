"""Session storage for the workflow engine."""

import threading
import time

from .logging import get_logger
from .types import WorkflowSession

logger = get_logger(__name__)


class SessionStore:
    """Manages workflow sessions in memory.

    Sessions are kept until deleted or evicted by the retention policy.
    Only finished sessions are evicted; running ones are never dropped.
    """

    def __init__(self, max_sessions: int | None = None, session_ttl: int | None = None):
        """Initialize the session store.

        Args:
            max_sessions: Maximum number of sessions to keep (None for no limit)
            session_ttl: Seconds after their last update at which finished
                sessions expire (None for no expiry)
        """
        self._lock = threading.Lock()
        self._sessions: dict[str, WorkflowSession] = {}
        self._max_sessions = max_sessions
        self._ttl = session_ttl

    def add(self, session: WorkflowSession) -> None:
        """Store a session, applying the retention policy first."""
        with self._lock:
            self._evict_locked()
            self._sessions[session.id] = session

    def get(self, session_id: str) -> WorkflowSession | None:
        """Get a session by ID.

        Args:
            session_id: Session ID

        Returns:
            Session if found, None otherwise
        """
        with self._lock:
            return self._sessions.get(session_id)

    def list(self) -> list[WorkflowSession]:
        """Get all sessions, newest first."""
        with self._lock:
            sessions = list(self._sessions.values())
        return sorted(sessions, key=lambda s: s.created_at, reverse=True)

    def delete(self, session_id: str) -> bool:
        """Delete a session.

        Args:
            session_id: Session ID

        Returns:
            True if session was deleted, False if not found
        """
        with self._lock:
            return self._sessions.pop(session_id, None) is not None

    def cleanup_expired(self) -> int:
        """Apply the retention policy now.

        Returns:
            Number of sessions removed
        """
        with self._lock:
            return self._evict_locked()

    def _evict_locked(self) -> int:
        removed = 0

        if self._ttl is not None:
            now = time.time()
            expired = [
                sid for sid, s in self._sessions.items()
                if s.is_terminal and now - s.updated_at > self._ttl
            ]
            for sid in expired:
                del self._sessions[sid]
            removed += len(expired)

        # make room for one more session
        if self._max_sessions is not None and len(self._sessions) >= self._max_sessions:
            finished = sorted(
                (s for s in self._sessions.values() if s.is_terminal),
                key=lambda s: s.updated_at,
            )
            overflow = len(self._sessions) - self._max_sessions + 1
            for session in finished[:overflow]:
                del self._sessions[session.id]
                removed += 1

        if removed:
            logger.info(f"evicted {removed} finished session(s)")
        return removed

    @property
    def count(self) -> int:
        """Get number of stored sessions."""
        with self._lock:
            return len(self._sessions)
