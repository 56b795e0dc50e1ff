"""Session hijacking middleware for Starlette."""

import logging
from collections.abc import Awaitable, Callable

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import RedirectResponse, Response

from unique_session.adapters.web.request_attributes import request_attributes_from_request
from unique_session.adapters.web.session_revocations import InMemorySessionRevocations
from unique_session.adapters.web.session_store import RevocableSessionStore
from unique_session.domain.models.binding_decision import Reject
from unique_session.domain.models.errors import SessionUnavailableError
from unique_session.domain.ports.session_guard import SessionGuard
from unique_session.domain.ports.session_store import SessionStore

logger = logging.getLogger(__name__)

SessionStoreFactory = Callable[[Request], SessionStore]


class UniqueSessionMiddleware(BaseHTTPMiddleware):
    """Middleware that destroys sessions whose client fingerprint changes.

    Must be installed inside a session middleware (e.g. Starlette's
    ``SessionMiddleware``) so that ``request.session`` is available. By default
    destroyed sessions are revoked in an in-memory registry, so replaying the
    old cookie starts a new, unbound session. Server-side session backends can
    pass their own ``session_store_factory`` instead.
    """

    def __init__(
        self,
        app: Callable,
        guard: SessionGuard,
        revocations: InMemorySessionRevocations | None = None,
        session_store_factory: SessionStoreFactory | None = None,
    ) -> None:
        """Initialize the middleware.

        Args:
            app: The ASGI application to wrap.
            guard: Guard applying the fingerprint binding policy.
            revocations: Registry of destroyed session ids shared by all requests.
            session_store_factory: Builds the session store for a request;
                overrides the revocation-backed default.
        """
        super().__init__(app)
        self.guard = guard
        self.revocations = revocations if revocations is not None else InMemorySessionRevocations()
        self._session_store_factory = session_store_factory or self._create_revocable_store

    def _create_revocable_store(self, request: Request) -> SessionStore:
        return RevocableSessionStore(request.session, self.revocations)

    def _get_session_store(self, request: Request) -> SessionStore:
        if "session" not in request.scope:
            raise SessionUnavailableError(
                "UniqueSessionMiddleware requires a session middleware to be installed first"
            )
        return self._session_store_factory(request)

    def _create_redirect_response(self, request: Request, redirect_to: str) -> Response:
        client = request.client.host if request.client else "unknown"
        logger.warning(f"Session fingerprint mismatch from {client}, redirecting to {redirect_to}")
        return RedirectResponse(url=redirect_to, status_code=302)

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Check the request fingerprint before handing over to the application."""
        session = self._get_session_store(request)
        attributes = request_attributes_from_request(request)

        decision = self.guard.check(attributes, session)
        if isinstance(decision, Reject):
            return self._create_redirect_response(request, decision.redirect_to)

        response: Response = await call_next(request)
        return response
