"""Session guard port."""

from typing import Protocol

from unique_session.domain.models.binding_decision import Decision
from unique_session.domain.models.request_attributes import RequestAttributes
from unique_session.domain.ports.session_store import SessionStore


class SessionGuard(Protocol):
    """Port used by web adapters to check a request against its session."""

    def fingerprint(self, attributes: RequestAttributes) -> str:
        """Compute the fingerprint for a request."""
        ...

    def check(self, attributes: RequestAttributes, session: SessionStore) -> Decision:
        """Apply the binding policy for a request and its session."""
        ...
