"""Tests for domain models."""

import pytest

from unique_session.domain.models import (
    DirectIpField,
    FingerprintOptions,
    GeoRecord,
    InvalidIpFieldError,
    NestedIpField,
    RequestAttributes,
    parse_ip_field,
)


def test_fingerprint_options_defaults() -> None:
    """Given no arguments, when creating options, then the documented defaults are used."""
    options = FingerprintOptions()

    assert options.hash_fields == ("accept", "accept-language", "user-agent")
    assert options.ip_field == "headers.x-forwarded-for"
    assert options.redirect_to == "/"
    assert options.hash_algorithm == "sha256"
    assert options.ip_path == NestedIpField("headers", "x-forwarded-for")


def test_fingerprint_options_are_immutable() -> None:
    """Given options, when assigning a field, then a validation error is raised."""
    options = FingerprintOptions()

    with pytest.raises(ValueError):
        options.redirect_to = "/elsewhere"  # type: ignore[misc]


def test_fingerprint_options_lowercase_hash_fields() -> None:
    """Given mixed-case header names, when creating options, then they are lower-cased."""
    options = FingerprintOptions(hash_fields=["Accept", " User-Agent "])

    assert options.hash_fields == ("accept", "user-agent")


def test_fingerprint_options_reject_empty_hash_field() -> None:
    """Given an empty header name, when creating options, then validation fails."""
    with pytest.raises(ValueError, match="hash_fields must not contain empty"):
        FingerprintOptions(hash_fields=["accept", ""])


def test_fingerprint_options_reject_deep_ip_field() -> None:
    """Given an ip_field deeper than two segments, when creating options, then it fails fast."""
    with pytest.raises(ValueError, match="at most 2 segments"):
        FingerprintOptions(ip_field="socket.client.ip")


def test_fingerprint_options_reject_empty_redirect() -> None:
    """Given an empty redirect target, when creating options, then validation fails."""
    with pytest.raises(ValueError, match="redirect_to must not be empty"):
        FingerprintOptions(redirect_to=" ")


def test_fingerprint_options_reject_unknown_algorithm() -> None:
    """Given an unsupported digest, when creating options, then validation fails."""
    with pytest.raises(ValueError):
        FingerprintOptions(hash_algorithm="sha1")  # type: ignore[arg-type]


def test_parse_ip_field_single_segment_is_header() -> None:
    """Given a single segment, when parsing, then a lower-cased header path is returned."""
    assert parse_ip_field("X-Real-IP") == DirectIpField(header="x-real-ip")


def test_parse_ip_field_two_segments_is_nested() -> None:
    """Given two segments, when parsing, then a nested path is returned."""
    path = parse_ip_field("client.host")

    assert path == NestedIpField(segment1="client", segment2="host")
    assert str(path) == "client.host"


@pytest.mark.parametrize("path", ["", "  ", "client.", ".host", "a..b", "a.b.c"])
def test_parse_ip_field_rejects_malformed_paths(path: str) -> None:
    """Given a malformed path, when parsing, then InvalidIpFieldError is raised."""
    with pytest.raises(InvalidIpFieldError):
        parse_ip_field(path)


def test_request_attributes_headers_are_case_insensitive() -> None:
    """Given headers with mixed case, when reading a header, then lookup ignores case."""
    attributes = RequestAttributes.build({"User-Agent": "A"})

    assert attributes.header("user-agent") == "A"
    assert attributes.header("USER-AGENT") == "A"
    assert attributes.header("accept") is None


def test_request_attributes_resolve_nested_branch() -> None:
    """Given a client branch, when resolving client.host, then the host is returned."""
    attributes = RequestAttributes.build({}, client={"host": "10.0.0.1", "port": 5000})

    assert attributes.resolve("client", "host") == "10.0.0.1"
    assert attributes.resolve("client", "port") == "5000"


def test_request_attributes_resolve_missing_levels_returns_none() -> None:
    """Given missing branches or keys, when resolving, then None is returned instead of raising."""
    attributes = RequestAttributes.build({}, client={"host": None})

    assert attributes.resolve("socket", "remoteAddress") is None
    assert attributes.resolve("client", "host") is None
    assert attributes.resolve("client", "missing") is None


def test_request_attributes_headers_branch_matches_header_lookup() -> None:
    """Given a header, when resolving headers.<name>, then it matches the direct lookup."""
    attributes = RequestAttributes.build({"X-Forwarded-For": "1.2.3.4"})

    assert attributes.resolve("headers", "X-Forwarded-For") == "1.2.3.4"
    assert attributes.tree["headers"]["x-forwarded-for"] == "1.2.3.4"


def test_geo_record_string_form_is_country() -> None:
    """Given a geo record, when converting to string, then the country code is returned."""
    record = GeoRecord(country="US", continent="NA")

    assert str(record) == "US"
