"""Geo lookup port."""

from typing import Protocol

from unique_session.domain.models.geo_record import GeoRecord


class GeoLookup(Protocol):
    """Port for resolving a client IP to its country."""

    def lookup(self, ip: str) -> GeoRecord | None:
        """Return the geo record for an IP.

        Implementations return None for malformed, private or unknown addresses
        instead of raising.
        """
        ...
