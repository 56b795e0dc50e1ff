"""Domain layer - fingerprint and session binding models and ports."""

from unique_session.domain.models import (
    Continue,
    FingerprintOptions,
    GeoRecord,
    Reject,
    RequestAttributes,
)
from unique_session.domain.ports import GeoLookup, SessionGuard, SessionStore

__all__ = [
    "Continue",
    "FingerprintOptions",
    "GeoLookup",
    "GeoRecord",
    "Reject",
    "RequestAttributes",
    "SessionGuard",
    "SessionStore",
]
