"""Application services."""

from unique_session.application.services.fingerprint_generator import FingerprintGenerator
from unique_session.application.services.session_binder import SessionBinder
from unique_session.application.services.unique_session_guard import UniqueSessionGuard

__all__ = [
    "FingerprintGenerator",
    "SessionBinder",
    "UniqueSessionGuard",
]
