"""Geo lookup adapters."""

from unique_session.adapters.geoip.maxmind_geo_lookup import MaxMindGeoLookup
from unique_session.adapters.geoip.null_geo_lookup import NullGeoLookup

__all__ = ["MaxMindGeoLookup", "NullGeoLookup"]
