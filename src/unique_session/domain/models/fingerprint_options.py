"""Fingerprint options domain model."""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from unique_session.domain.models.ip_field_path import IpFieldPath, parse_ip_field

DEFAULT_HASH_FIELDS: tuple[str, ...] = ("accept", "accept-language", "user-agent")
DEFAULT_IP_FIELD = "headers.x-forwarded-for"
DEFAULT_REDIRECT_TO = "/"

HashAlgorithm = Literal["md5", "sha256"]


class FingerprintOptions(BaseModel):
    """Immutable options shared by every request a guard processes."""

    model_config = ConfigDict(frozen=True)

    hash_fields: tuple[str, ...] = DEFAULT_HASH_FIELDS
    ip_field: str = DEFAULT_IP_FIELD
    redirect_to: str = DEFAULT_REDIRECT_TO
    # md5 keeps signatures compatible with sessions bound by older deployments
    hash_algorithm: HashAlgorithm = "sha256"

    _ip_path: IpFieldPath = PrivateAttr()

    @field_validator("hash_fields")
    @classmethod
    def normalize_hash_fields(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Lower-case header names so lookups match normalized headers."""
        fields = tuple(name.strip().lower() for name in v)
        if any(not name for name in fields):
            raise ValueError("hash_fields must not contain empty header names")
        return fields

    @field_validator("ip_field")
    @classmethod
    def validate_ip_field(cls, v: str) -> str:
        """Reject ip_field paths the resolver cannot express."""
        parse_ip_field(v)
        return v

    @field_validator("redirect_to")
    @classmethod
    def validate_redirect_to(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("redirect_to must not be empty")
        return v

    def model_post_init(self, __context: Any) -> None:
        self._ip_path = parse_ip_field(self.ip_field)

    @property
    def ip_path(self) -> IpFieldPath:
        """The parsed ip_field location."""
        return self._ip_path
