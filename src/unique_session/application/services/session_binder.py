"""Session binding policy."""

import logging

from unique_session.domain.models.binding_decision import Continue, Decision, Reject
from unique_session.domain.models.fingerprint_options import FingerprintOptions
from unique_session.domain.ports.session_store import SessionStore

logger = logging.getLogger(__name__)


class SessionBinder:
    """Binds a session to its first fingerprint and enforces it afterwards.

    An unbound session stores the fingerprint of its first request. A bound
    session lets through requests carrying the same fingerprint; any other
    fingerprint destroys the whole session and rejects the request. There is
    no retry: the client has to start a new session.
    """

    def __init__(self, options: FingerprintOptions) -> None:
        """Initialize with fingerprint options."""
        self._options = options

    def bind(self, session: SessionStore, fingerprint: str) -> Decision:
        """Apply the binding policy and return the decision for the request."""
        if not session.has_fingerprint():
            session.set_fingerprint(fingerprint)
            logger.debug(f"Session bound to fingerprint {fingerprint}")
            return Continue()

        if session.get_fingerprint() == fingerprint:
            return Continue()

        logger.warning("Found malicious activity, destroying session")
        session.destroy()
        return Reject(redirect_to=self._options.redirect_to)
