"""Web adapters for guarding Starlette applications."""

from unique_session.adapters.web.request_attributes import request_attributes_from_request
from unique_session.adapters.web.session_revocations import InMemorySessionRevocations
from unique_session.adapters.web.session_store import MappingSessionStore, RevocableSessionStore
from unique_session.adapters.web.unique_session_middleware import UniqueSessionMiddleware

__all__ = [
    "InMemorySessionRevocations",
    "MappingSessionStore",
    "RevocableSessionStore",
    "UniqueSessionMiddleware",
    "request_attributes_from_request",
]
