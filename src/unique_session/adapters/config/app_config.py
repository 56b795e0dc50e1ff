"""12-factor configuration adapter using environment variables."""

import json
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from unique_session.domain.models.fingerprint_options import (
    DEFAULT_HASH_FIELDS,
    DEFAULT_IP_FIELD,
    DEFAULT_REDIRECT_TO,
    FingerprintOptions,
)
from unique_session.domain.models.ip_field_path import parse_ip_field


def parse_hash_fields(raw: str) -> list[str]:
    """Split hash_fields given as ``a,b`` or as a JSON list ``["a", "b"]``."""
    raw = raw.strip()
    if not raw.startswith("["):
        return [f.strip() for f in raw.split(",") if f.strip()]
    try:
        parsed = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ValueError(f"hash_fields is not valid JSON: {e}") from e
    if not isinstance(parsed, list) or not all(isinstance(f, str) for f in parsed):
        raise ValueError("hash_fields JSON must be a list of strings")
    return [f.strip() for f in parsed if f.strip()]


class AppConfig(BaseSettings):
    """Application configuration following 12-factor principles.

    Every setting is read from an ``UNIQUE_SESSION_``-prefixed environment
    variable or from a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="UNIQUE_SESSION_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Fingerprint configuration
    hash_fields: str = Field(
        default=",".join(DEFAULT_HASH_FIELDS),
        description="Comma-separated (or JSON list of) header names feeding the fingerprint",
    )
    ip_field: str = Field(
        default=DEFAULT_IP_FIELD,
        description="Location of the client IP, e.g. 'headers.x-forwarded-for' or 'client.host'",
    )
    redirect_to: str = Field(
        default=DEFAULT_REDIRECT_TO,
        description="Redirect target after a hijacked session is destroyed",
    )
    hash_algorithm: Literal["md5", "sha256"] = Field(
        default="sha256",
        description="Digest for fingerprints: 'sha256', or 'md5' for legacy signatures",
    )
    geoip_database: str | None = Field(
        default=None,
        description="Path to a MaxMind GeoLite2/GeoIP2 country or city database (.mmdb)",
    )

    # Demo host application
    session_secret: str = Field(
        default="change-me",
        description="Secret used to sign session cookies in the demo application",
    )
    host: str = Field(default="127.0.0.1", description="Host to bind the server to")
    port: int = Field(default=8000, description="Port to bind the server to")
    log_level: str = Field(default="INFO", description="Root logging level")

    @field_validator("ip_field")
    @classmethod
    def validate_ip_field(cls, v: str) -> str:
        """Validate ip_field has one or two segments."""
        parse_ip_field(v)
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError("log_level must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("hash_fields")
    @classmethod
    def validate_hash_fields(cls, v: str) -> str:
        """Validate hash_fields is a comma-separated list or a JSON list of strings."""
        parse_hash_fields(v)
        return v

    @field_validator("redirect_to")
    @classmethod
    def validate_redirect_to(cls, v: str) -> str:
        """Validate redirect_to is not empty."""
        if not v.strip():
            raise ValueError("redirect_to must not be empty")
        return v

    def get_hash_fields(self) -> list[str]:
        """Parse hash_fields from either a JSON list or a comma-separated string."""
        return parse_hash_fields(self.hash_fields)

    def to_fingerprint_options(self) -> FingerprintOptions:
        """Build the immutable options used by the guard."""
        return FingerprintOptions(
            hash_fields=tuple(self.get_hash_fields()),
            ip_field=self.ip_field,
            redirect_to=self.redirect_to,
            hash_algorithm=self.hash_algorithm,
        )
