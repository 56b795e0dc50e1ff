"""End-to-end session binding through the demo application."""

import pytest
from starlette.applications import Starlette
from starlette.testclient import TestClient

from unique_session.adapters.config import AppConfig
from unique_session.adapters.geoip import NullGeoLookup
from unique_session.main import create_app


@pytest.fixture
def app() -> Starlette:
    config = AppConfig(
        redirect_to="/login",
        hash_fields="user-agent",
        session_secret="test-secret",
        geoip_database=None,
    )
    return create_app(config, geo_lookup=NullGeoLookup())


def test_when_first_request_then_session_is_bound(app: Starlette) -> None:
    """Given a new client, when it requests the app, then its session carries a fingerprint."""
    client = TestClient(app)

    response = client.get("/", headers={"user-agent": "A"})

    assert response.status_code == 200
    assert response.json()["fingerprint"] is not None
    assert "session" in client.cookies


def test_when_same_client_returns_then_request_passes(app: Starlette) -> None:
    """Given a bound session, when the same client returns, then the fingerprint is unchanged."""
    client = TestClient(app)
    first = client.get("/", headers={"user-agent": "A"})

    second = client.get("/", headers={"user-agent": "A"})

    assert second.status_code == 200
    assert second.json()["fingerprint"] == first.json()["fingerprint"]


def test_when_fingerprint_changes_then_redirects_to_configured_target(app: Starlette) -> None:
    """Given a bound session, when the user agent changes, then the client is redirected."""
    client = TestClient(app)
    client.get("/", headers={"user-agent": "A"})

    response = client.get("/", headers={"user-agent": "B"}, follow_redirects=False)

    assert response.status_code == 302
    assert response.headers["location"] == "/login"


def test_when_destroyed_session_token_is_replayed_then_it_is_unbound(app: Starlette) -> None:
    """Given a session destroyed on mismatch, when its old cookie is replayed, then it rebinds."""
    victim = TestClient(app)
    bound = victim.get("/", headers={"user-agent": "A"})
    token = victim.cookies["session"]
    rejected = victim.get("/", headers={"user-agent": "B"}, follow_redirects=False)
    assert rejected.status_code == 302

    replay = TestClient(app)
    response = replay.get("/", headers={"user-agent": "B", "cookie": f"session={token}"})

    assert response.status_code == 200
    assert response.json()["fingerprint"] != bound.json()["fingerprint"]
    assert len(app.state.session_revocations) == 1


def test_when_replayed_session_rebinds_then_original_client_is_rejected(app: Starlette) -> None:
    """Given a replayed token rebound by another client, when the original returns, then it is redirected."""
    victim = TestClient(app)
    victim.get("/", headers={"user-agent": "A"})
    token = victim.cookies["session"]
    victim.get("/", headers={"user-agent": "B"}, follow_redirects=False)

    replay = TestClient(app)
    replay.get("/", headers={"user-agent": "B", "cookie": f"session={token}"})
    rebound_token = replay.cookies["session"]

    response = TestClient(app).get(
        "/",
        headers={"user-agent": "A", "cookie": f"session={rebound_token}"},
        follow_redirects=False,
    )

    assert response.status_code == 302
    assert response.headers["location"] == "/login"
