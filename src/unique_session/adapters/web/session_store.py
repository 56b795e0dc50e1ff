"""Session store adapters over a mutable session mapping."""

import logging
import secrets
from collections.abc import Callable, MutableMapping
from typing import Any

from unique_session.adapters.web.session_revocations import InMemorySessionRevocations
from unique_session.domain.models.binding_decision import UNIQUE_SESSION_KEY

logger = logging.getLogger(__name__)

SESSION_ID_KEY = "unique-session-id"


class MappingSessionStore:
    """Keeps the fingerprint in a dict-like session such as Starlette's ``request.session``.

    ``destroy`` clears the whole mapping and then calls ``on_destroy``, which
    server-side stores use to invalidate their record.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        on_destroy: Callable[[], None] | None = None,
        key: str = UNIQUE_SESSION_KEY,
    ) -> None:
        self._session = session
        self._on_destroy = on_destroy
        self._key = key

    def has_fingerprint(self) -> bool:
        return self._key in self._session

    def get_fingerprint(self) -> str | None:
        value = self._session.get(self._key)
        return value if isinstance(value, str) else None

    def set_fingerprint(self, fingerprint: str) -> None:
        self._session[self._key] = fingerprint

    def destroy(self) -> None:
        self._session.clear()
        if self._on_destroy is not None:
            self._on_destroy()


class RevocableSessionStore(MappingSessionStore):
    """Session store for cookie-backed sessions with server-side revocation.

    Binding also stamps the session with a random id. Destroying the session
    revokes that id, so a replayed copy of the old cookie is emptied on its
    next request and re-enters the unbound state.
    """

    def __init__(
        self,
        session: MutableMapping[str, Any],
        revocations: InMemorySessionRevocations,
        key: str = UNIQUE_SESSION_KEY,
    ) -> None:
        super().__init__(session, key=key)
        self._revocations = revocations

    @property
    def session_id(self) -> str | None:
        value = self._session.get(SESSION_ID_KEY)
        return value if isinstance(value, str) else None

    def _drop_if_revoked(self) -> None:
        session_id = self.session_id
        if session_id is not None and self._revocations.is_revoked(session_id):
            logger.info("Replayed token of a destroyed session, starting a new session")
            self._session.clear()

    def has_fingerprint(self) -> bool:
        self._drop_if_revoked()
        return super().has_fingerprint()

    def get_fingerprint(self) -> str | None:
        self._drop_if_revoked()
        return super().get_fingerprint()

    def set_fingerprint(self, fingerprint: str) -> None:
        self._drop_if_revoked()
        if self.session_id is None:
            self._session[SESSION_ID_KEY] = secrets.token_urlsafe(32)
        super().set_fingerprint(fingerprint)

    def destroy(self) -> None:
        session_id = self.session_id
        if session_id is not None:
            self._revocations.revoke(session_id)
        super().destroy()
