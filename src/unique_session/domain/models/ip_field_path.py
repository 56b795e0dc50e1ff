"""Location of the client IP within the request attributes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from unique_session.domain.models.errors import InvalidIpFieldError

if TYPE_CHECKING:
    from unique_session.domain.models.request_attributes import RequestAttributes

MAX_IP_FIELD_DEPTH = 2


@dataclass(frozen=True)
class DirectIpField:
    """The IP is read straight from a header, e.g. ``x-real-ip``."""

    header: str

    def resolve(self, attributes: RequestAttributes) -> str | None:
        return attributes.header(self.header)

    def __str__(self) -> str:
        return self.header


@dataclass(frozen=True)
class NestedIpField:
    """The IP is read from ``tree[segment1][segment2]``, e.g. ``client.host``."""

    segment1: str
    segment2: str

    def resolve(self, attributes: RequestAttributes) -> str | None:
        return attributes.resolve(self.segment1, self.segment2)

    def __str__(self) -> str:
        return f"{self.segment1}.{self.segment2}"


IpFieldPath = DirectIpField | NestedIpField


def parse_ip_field(path: str) -> IpFieldPath:
    """Parse a dotted ip_field path of at most two segments.

    Raises:
        InvalidIpFieldError: If the path is empty, has an empty segment, or is
            deeper than two segments.
    """
    segments = [segment.strip() for segment in path.split(".")]
    if not path.strip() or any(not segment for segment in segments):
        raise InvalidIpFieldError(f"ip_field must not be empty or contain empty segments: {path!r}")
    if len(segments) > MAX_IP_FIELD_DEPTH:
        raise InvalidIpFieldError(
            f"ip_field supports at most {MAX_IP_FIELD_DEPTH} segments, got {len(segments)}: {path!r}"
        )
    if len(segments) == 1:
        return DirectIpField(header=segments[0].lower())
    return NestedIpField(segment1=segments[0], segment2=segments[1])
