"""Server-side registry of destroyed session identifiers."""

import threading
import time
from collections import OrderedDict

# Matches the default max_age of Starlette's SessionMiddleware.
DEFAULT_REVOCATION_TTL_SECONDS = 14 * 24 * 60 * 60


class InMemorySessionRevocations:
    """Remembers revoked session ids for as long as their cookies can be replayed.

    Cookie-backed sessions live in the client's token, so clearing the session
    only drops the outgoing cookie. Recording the session id here lets a
    replayed copy of the old token be recognised and treated as a new session.
    """

    def __init__(self, ttl_seconds: float = DEFAULT_REVOCATION_TTL_SECONDS) -> None:
        self.ttl_seconds = ttl_seconds
        self._revoked: OrderedDict[str, float] = OrderedDict()
        self._lock = threading.Lock()

    def revoke(self, session_id: str) -> None:
        now = time.monotonic()
        with self._lock:
            self._revoked[session_id] = now
            self._revoked.move_to_end(session_id)
            self._prune(now)

    def is_revoked(self, session_id: str) -> bool:
        now = time.monotonic()
        with self._lock:
            self._prune(now)
            return session_id in self._revoked

    def __len__(self) -> int:
        with self._lock:
            return len(self._revoked)

    def _prune(self, now: float) -> None:
        # Entries are kept in revocation order, oldest first.
        while self._revoked:
            session_id, revoked_at = next(iter(self._revoked.items()))
            if now - revoked_at < self.ttl_seconds:
                break
            del self._revoked[session_id]
