"""CLI for computing session fingerprints offline."""

import argparse
import json
import logging
import sys
from contextlib import ExitStack

from unique_session.adapters.geoip import MaxMindGeoLookup, NullGeoLookup
from unique_session.application.services import FingerprintGenerator
from unique_session.application.services.fingerprint_generator import first_forwarded_ip
from unique_session.domain.models import (
    DEFAULT_HASH_FIELDS,
    DEFAULT_IP_FIELD,
    DirectIpField,
    FingerprintOptions,
    GeoRecord,
    RequestAttributes,
)
from unique_session.domain.ports import GeoLookup


class FixedGeoLookup:
    """Geo lookup answering every IP with the same country."""

    def __init__(self, country: str) -> None:
        self._record = GeoRecord(country=country.upper())

    def lookup(self, ip: str) -> GeoRecord | None:  # noqa: ARG002
        return self._record


def parse_header(value: str) -> tuple[str, str]:
    """Parse a ``NAME=VALUE`` header argument."""
    name, sep, header_value = value.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"header must be NAME=VALUE, got {value!r}")
    return name.strip().lower(), header_value


def build_attributes(
    headers: dict[str, str], ip: str | None, options: FingerprintOptions
) -> RequestAttributes:
    """Place ip at the configured ip_field location alongside the headers."""
    branches: dict[str, dict[str, str]] = {}
    if ip is not None:
        path = options.ip_path
        if isinstance(path, DirectIpField):
            headers = {**headers, path.header: ip}
        elif path.segment1 == "headers":
            headers = {**headers, path.segment2.lower(): ip}
        else:
            branches[path.segment1] = {path.segment2: ip}
    return RequestAttributes.build(headers, **branches)


def create_geo_lookup(args: argparse.Namespace, stack: ExitStack) -> GeoLookup:
    """Pick the geo lookup; an opened database is closed when stack exits."""
    if args.country:
        return FixedGeoLookup(args.country)
    if args.geoip_database:
        return stack.enter_context(MaxMindGeoLookup(args.geoip_database))
    return NullGeoLookup()


def fingerprint_command(args: argparse.Namespace) -> dict[str, str | None]:
    """Compute the fingerprint described by the parsed arguments."""
    options = FingerprintOptions(
        hash_fields=tuple(args.hash_field or DEFAULT_HASH_FIELDS),
        ip_field=args.ip_field,
        hash_algorithm=args.hash_algorithm,
    )
    attributes = build_attributes(dict(args.header or []), args.ip, options)
    client_ip = first_forwarded_ip(args.ip)

    with ExitStack() as stack:
        geo_lookup = create_geo_lookup(args, stack)
        fingerprint = FingerprintGenerator(options, geo_lookup).generate(attributes)
        geo = geo_lookup.lookup(client_ip) if client_ip else None

    return {
        "fingerprint": fingerprint,
        "hash_algorithm": options.hash_algorithm,
        "hash_fields": ",".join(options.hash_fields),
        "ip": args.ip,
        "country": geo.country if geo else None,
    }


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="unique-session",
        description="Session fingerprint helper",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Fingerprint of a browser request behind a proxy
  unique-session fingerprint --header accept=text/html --header user-agent=Mozilla/5.0 \\
      --ip 81.2.69.160 --geoip-database GeoLite2-Country.mmdb

  # Same request with a fixed country and legacy md5 signatures
  unique-session fingerprint --header accept=text/html --ip 81.2.69.160 \\
      --country GB --hash-algorithm md5
        """,
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log fingerprint inputs")

    subparsers = parser.add_subparsers(dest="command", help="Command to execute")

    fingerprint_parser = subparsers.add_parser(
        "fingerprint", help="Compute the fingerprint for a request"
    )
    fingerprint_parser.add_argument(
        "--header",
        action="append",
        type=parse_header,
        metavar="NAME=VALUE",
        help="Request header (repeatable)",
    )
    fingerprint_parser.add_argument("--ip", help="Client IP address")
    fingerprint_parser.add_argument(
        "--hash-field",
        action="append",
        metavar="NAME",
        help=f"Header included in the fingerprint (repeatable, default: {', '.join(DEFAULT_HASH_FIELDS)})",
    )
    fingerprint_parser.add_argument(
        "--ip-field", default=DEFAULT_IP_FIELD, help="Location of the client IP"
    )
    fingerprint_parser.add_argument(
        "--hash-algorithm", choices=["md5", "sha256"], default="sha256", help="Digest to use"
    )
    geo_group = fingerprint_parser.add_mutually_exclusive_group()
    geo_group.add_argument("--geoip-database", help="Path to a MaxMind .mmdb database")
    geo_group.add_argument("--country", help="Use this country code instead of a GeoIP lookup")
    fingerprint_parser.add_argument("--json", action="store_true", help="Output as JSON")

    return parser


def main(argv: list[str] | None = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    try:
        if args.command == "fingerprint":
            result = fingerprint_command(args)
            if args.json:
                print(json.dumps(result, indent=2))
            else:
                print(result["fingerprint"])
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
