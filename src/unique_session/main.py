"""Demo host application guarded by the unique session middleware."""

import logging
import sys

import uvicorn
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.sessions import SessionMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from starlette.routing import Route

from unique_session.adapters.config import AppConfig
from unique_session.adapters.geoip import MaxMindGeoLookup, NullGeoLookup
from unique_session.adapters.web import InMemorySessionRevocations, UniqueSessionMiddleware
from unique_session.application.services import UniqueSessionGuard
from unique_session.domain.models import UNIQUE_SESSION_KEY
from unique_session.domain.ports import GeoLookup

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging for the entry points."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def create_geo_lookup(config: AppConfig) -> GeoLookup:
    """Open the configured GeoIP database, or fall back to header-only fingerprints."""
    if config.geoip_database:
        return MaxMindGeoLookup(config.geoip_database)
    logger.warning("No GeoIP database configured, fingerprints will not include the country")
    return NullGeoLookup()


def create_app(config: AppConfig, geo_lookup: GeoLookup | None = None) -> Starlette:
    """Create a Starlette app with cookie sessions protected by the guard."""
    guard = UniqueSessionGuard(
        config.to_fingerprint_options(),
        geo_lookup if geo_lookup is not None else create_geo_lookup(config),
    )

    revocations = InMemorySessionRevocations()

    async def session_info(request: Request) -> JSONResponse:
        return JSONResponse({"fingerprint": request.session.get(UNIQUE_SESSION_KEY)})

    app = Starlette(
        routes=[Route("/", session_info, methods=["GET"])],
        middleware=[
            # Outermost first: the session must be loaded before the guard runs.
            Middleware(SessionMiddleware, secret_key=config.session_secret),
            Middleware(UniqueSessionMiddleware, guard=guard, revocations=revocations),
        ],
    )
    app.state.session_revocations = revocations
    return app


def main() -> None:
    """Main application entry point."""
    try:
        config = AppConfig()
    except ValueError as e:
        configure_logging()
        logger.error(f"Invalid configuration: {e}")
        sys.exit(1)

    configure_logging(config.log_level)
    try:
        app = create_app(config)
    except (OSError, ValueError) as e:
        logger.error(f"Could not start the application: {e}")
        sys.exit(1)
    logger.info(f"Starting demo application on http://{config.host}:{config.port}")
    uvicorn.run(app, host=config.host, port=config.port, log_level=config.log_level.lower())


if __name__ == "__main__":
    main()
