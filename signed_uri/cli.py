"""Command line entry point for creating and checking signed URLs."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import Sequence

from dotenv import find_dotenv, load_dotenv

from signed_uri.errors import SignedUrlError
from signed_uri.logic.codec import SignedUrlCodec
from signed_uri.settings import load_settings, settings_from_env
from signed_uri.utils.urls import DEFAULT_SECRET

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def _parse_param(raw: str) -> tuple[str, str | None]:
    name, sep, value = raw.partition("=")
    if not name:
        raise argparse.ArgumentTypeError(f"Invalid parameter {raw!r}, expected key=value")
    return name, value if sep else None


def _timeout(raw: str) -> int | str:
    return int(raw) if raw.lstrip("-").isdigit() else raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="signed-uri", description="Create and verify HMAC-signed URLs.")
    parser.add_argument("--secret", help="Signing secret (default: $SIGNING_SECRET)")
    parser.add_argument("--config", help="YAML file with signature_param / expires_param")
    sub = parser.add_subparsers(dest="command", required=True)

    create = sub.add_parser("create", help="Print a signed version of URL")
    create.add_argument("url")
    create.add_argument("-p", "--param", action="append", type=_parse_param, default=[], metavar="KEY=VALUE")
    create.add_argument("-t", "--timeout", type=_timeout, help="Unix timestamp, date or relative time like '+1 hour'")

    verify = sub.add_parser("verify", help="Check the signature of URL")
    verify.add_argument("url")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    logging.basicConfig(level=os.environ.get("LOG_LEVEL", "WARNING").upper())
    args = build_parser().parse_args(argv)

    secret = args.secret or os.environ.get("SIGNING_SECRET", DEFAULT_SECRET)
    try:
        settings = load_settings(args.config) if args.config else settings_from_env()
        codec = SignedUrlCodec(secret, settings=settings)
        if args.command == "create":
            print(codec.create(args.url, dict(args.param), args.timeout))
            return EXIT_OK
        valid = codec.verify(args.url)
    except (SignedUrlError, ValueError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_ERROR
    print("valid" if valid else "invalid")
    return EXIT_OK if valid else EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
