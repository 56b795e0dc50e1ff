"""Ports (interfaces) for the ports-and-adapters architecture."""

from unique_session.domain.ports.geo_lookup import GeoLookup
from unique_session.domain.ports.session_guard import SessionGuard
from unique_session.domain.ports.session_store import SessionStore

__all__ = [
    "GeoLookup",
    "SessionGuard",
    "SessionStore",
]
