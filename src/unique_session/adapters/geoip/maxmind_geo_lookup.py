"""Geo lookup backed by a local MaxMind database."""

from __future__ import annotations

import ipaddress
import logging
from types import TracebackType
from typing import TYPE_CHECKING, Any

import geoip2.database
import geoip2.errors

from unique_session.domain.models.geo_record import GeoRecord

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


def is_public_address(ip: str) -> bool:
    """Return True if ip parses as a globally routable address."""
    try:
        address = ipaddress.ip_address(ip)
    except ValueError:
        return False
    return not (
        address.is_private
        or address.is_loopback
        or address.is_link_local
        or address.is_multicast
        or address.is_reserved
        or address.is_unspecified
    )


class MaxMindGeoLookup:
    """Resolve client IPs to countries with a GeoLite2/GeoIP2 ``.mmdb`` file.

    Works with both country and city databases. Lookups are in-memory and
    synchronous, so the adapter can be shared by concurrent requests.
    """

    def __init__(self, database_path: str | Path, reader: Any = None) -> None:
        """Initialize the adapter.

        Args:
            database_path: Path to the MaxMind database.
            reader: Pre-opened reader, mainly for tests. When omitted, a
                ``geoip2.database.Reader`` is opened for database_path.
        """
        self.database_path = str(database_path)
        self._reader = reader if reader is not None else geoip2.database.Reader(self.database_path)
        database_type = str(getattr(self._reader.metadata(), "database_type", ""))
        self._use_city = "City" in database_type
        logger.info(f"Loaded GeoIP database {self.database_path} ({database_type or 'unknown type'})")

    def lookup(self, ip: str) -> GeoRecord | None:
        """Return the country for ip, or None for private, invalid or unknown addresses."""
        ip = ip.strip()
        if not is_public_address(ip):
            logger.debug(f"Skipping geo lookup for non-public address {ip!r}")
            return None

        try:
            response = self._reader.city(ip) if self._use_city else self._reader.country(ip)
        except geoip2.errors.AddressNotFoundError:
            logger.debug(f"Address {ip} not found in GeoIP database")
            return None
        except ValueError as e:
            logger.debug(f"Invalid address {ip!r} for GeoIP lookup: {e}")
            return None

        country = response.country.iso_code
        if not country:
            return None
        return GeoRecord(country=country, continent=response.continent.code)

    def close(self) -> None:
        """Close the underlying database reader."""
        self._reader.close()

    def __enter__(self) -> MaxMindGeoLookup:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()
