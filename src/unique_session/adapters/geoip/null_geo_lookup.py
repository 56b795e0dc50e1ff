"""Geo lookup used when no GeoIP database is configured."""

from unique_session.domain.models.geo_record import GeoRecord


class NullGeoLookup:
    """Resolves every IP to no geo record, so fingerprints depend on headers only."""

    def lookup(self, ip: str) -> GeoRecord | None:  # noqa: ARG002
        return None
