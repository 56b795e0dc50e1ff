"""Fingerprint generation from request attributes."""

import hashlib
import logging

from unique_session.domain.models.fingerprint_options import FingerprintOptions
from unique_session.domain.models.geo_record import GeoRecord
from unique_session.domain.models.request_attributes import RequestAttributes
from unique_session.domain.ports.geo_lookup import GeoLookup

logger = logging.getLogger(__name__)


def first_forwarded_ip(value: str | None) -> str | None:
    """Return the original client from a forwarding chain like ``client, proxy1``."""
    if not value:
        return None
    for candidate in value.split(","):
        candidate = candidate.strip()
        if candidate:
            return candidate
    return None


class FingerprintGenerator:
    """Derives a stable signature from selected headers and the client country.

    The signature is the hex digest of the configured header values followed by
    the country code, concatenated without a delimiter. Missing headers and
    unresolvable IPs contribute empty segments, so generation never fails for a
    well-formed configuration.
    """

    def __init__(self, options: FingerprintOptions, geo_lookup: GeoLookup) -> None:
        """Initialize with fingerprint options and a geo lookup."""
        self._options = options
        self._geo_lookup = geo_lookup

    def generate(self, attributes: RequestAttributes) -> str:
        """Return the fingerprint for a request."""
        header_values = self._extract_header_values(attributes)
        geo = self._lookup_geo(attributes)

        raw = "".join([*header_values, str(geo) if geo is not None else ""])
        logger.debug(f"Raw fingerprint input: {raw!r}")

        fingerprint = self.digest(raw)
        logger.debug(f"Fingerprint: {fingerprint}")
        return fingerprint

    def digest(self, raw: str) -> str:
        """Hash a composed fingerprint input with the configured algorithm."""
        digest = hashlib.new(
            self._options.hash_algorithm, raw.encode("utf-8"), usedforsecurity=False
        )
        return digest.hexdigest()

    def _extract_header_values(self, attributes: RequestAttributes) -> list[str]:
        values = []
        for name in self._options.hash_fields:
            value = attributes.header(name)
            if value is None:
                logger.debug(f"Header '{name}' missing, using empty segment")
                value = ""
            values.append(value)
        return values

    def _resolve_ip(self, attributes: RequestAttributes) -> str | None:
        ip = first_forwarded_ip(self._options.ip_path.resolve(attributes))
        if ip is None:
            logger.debug(f"No client IP at '{self._options.ip_path}'")
        return ip

    def _lookup_geo(self, attributes: RequestAttributes) -> GeoRecord | None:
        ip = self._resolve_ip(attributes)
        if ip is None:
            return None
        try:
            return self._geo_lookup.lookup(ip)
        except Exception as e:
            logger.warning(f"Geo lookup failed for {ip}, using empty geo segment: {e}")
            return None
