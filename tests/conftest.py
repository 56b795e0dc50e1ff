"""Shared test doubles for the session guard."""

import pytest

from unique_session.domain.models import GeoRecord


class FakeSessionStore:
    """In-memory session store recording destroy calls."""

    def __init__(self, fingerprint: str | None = None) -> None:
        self.data: dict[str, str] = {}
        if fingerprint is not None:
            self.data["unique-session"] = fingerprint
        self.destroyed = False

    def has_fingerprint(self) -> bool:
        return "unique-session" in self.data

    def get_fingerprint(self) -> str | None:
        return self.data.get("unique-session")

    def set_fingerprint(self, fingerprint: str) -> None:
        self.data["unique-session"] = fingerprint

    def destroy(self) -> None:
        self.data.clear()
        self.destroyed = True


class FakeGeoLookup:
    """Geo lookup answering from a fixed IP -> country table."""

    def __init__(self, countries: dict[str, str] | None = None) -> None:
        self.countries = countries or {}
        self.calls: list[str] = []

    def lookup(self, ip: str) -> GeoRecord | None:
        self.calls.append(ip)
        country = self.countries.get(ip)
        return GeoRecord(country=country) if country else None


@pytest.fixture
def geo_lookup() -> FakeGeoLookup:
    return FakeGeoLookup({"1.2.3.4": "US", "81.2.69.160": "GB"})


@pytest.fixture
def session_store() -> FakeSessionStore:
    return FakeSessionStore()
