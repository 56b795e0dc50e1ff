"""Domain models for session fingerprinting."""

from unique_session.domain.models.binding_decision import (
    UNIQUE_SESSION_KEY,
    Continue,
    Decision,
    Reject,
)
from unique_session.domain.models.errors import InvalidIpFieldError, SessionUnavailableError
from unique_session.domain.models.fingerprint_options import (
    DEFAULT_HASH_FIELDS,
    DEFAULT_IP_FIELD,
    DEFAULT_REDIRECT_TO,
    FingerprintOptions,
)
from unique_session.domain.models.geo_record import GeoRecord
from unique_session.domain.models.ip_field_path import (
    DirectIpField,
    IpFieldPath,
    NestedIpField,
    parse_ip_field,
)
from unique_session.domain.models.request_attributes import RequestAttributes

__all__ = [
    "DEFAULT_HASH_FIELDS",
    "DEFAULT_IP_FIELD",
    "DEFAULT_REDIRECT_TO",
    "UNIQUE_SESSION_KEY",
    "Continue",
    "Decision",
    "DirectIpField",
    "FingerprintOptions",
    "GeoRecord",
    "InvalidIpFieldError",
    "IpFieldPath",
    "NestedIpField",
    "Reject",
    "RequestAttributes",
    "SessionUnavailableError",
    "parse_ip_field",
]
