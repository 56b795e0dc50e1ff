"""Per-request guard composing fingerprint generation and session binding."""

import logging

from unique_session.application.services.fingerprint_generator import FingerprintGenerator
from unique_session.application.services.session_binder import SessionBinder
from unique_session.domain.models.binding_decision import Decision
from unique_session.domain.models.fingerprint_options import FingerprintOptions
from unique_session.domain.models.request_attributes import RequestAttributes
from unique_session.domain.ports.geo_lookup import GeoLookup
from unique_session.domain.ports.session_store import SessionStore

logger = logging.getLogger(__name__)


class UniqueSessionGuard:
    """Checks every request of a session against the session's first fingerprint.

    Construct once per process and share across requests; the guard holds no
    per-request state.
    """

    def __init__(self, options: FingerprintOptions, geo_lookup: GeoLookup) -> None:
        """Initialize with fingerprint options and a geo lookup."""
        self.options = options
        self._generator = FingerprintGenerator(options, geo_lookup)
        self._binder = SessionBinder(options)

        logger.info("Loaded unique session configuration:")
        logger.info(f"  hash_fields: {', '.join(options.hash_fields)}")
        logger.info(f"  ip_field: {options.ip_field}")
        logger.info(f"  redirect_to: {options.redirect_to}")
        logger.info(f"  hash_algorithm: {options.hash_algorithm}")

    def fingerprint(self, attributes: RequestAttributes) -> str:
        """Compute the fingerprint for a request."""
        return self._generator.generate(attributes)

    def check(self, attributes: RequestAttributes, session: SessionStore) -> Decision:
        """Fingerprint the request, then apply the binding policy to its session."""
        # The session is only touched once the fingerprint has been computed.
        fingerprint = self.fingerprint(attributes)
        return self._binder.bind(session, fingerprint)
