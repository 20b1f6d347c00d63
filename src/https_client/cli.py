"""Command line entry point for one-off requests."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
from typing import Sequence

from .client import HTTPSClient
from .exceptions import HTTPSError
from .request_options import RequestOptions, VALID_METHODS

PROJECTIONS = ("text", "mapping", "object")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def configure_logging(level: str = "WARNING") -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
        stream=sys.stderr,
    )


def _log_level(value: str) -> str:
    level = value.strip().upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(f"invalid log level {value!r} (choose from {', '.join(LOG_LEVELS)})")
    return level


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="https-request")
    parser.add_argument("url")
    parser.add_argument("-X", "--method", default="GET", help=f"one of {', '.join(sorted(VALID_METHODS))}")
    parser.add_argument("-H", "--header", action="append", default=[], dest="headers", metavar="'NAME: VALUE'")
    parser.add_argument("-d", "--data", default="", dest="body")
    parser.add_argument("--timeout", type=int, default=None)
    parser.add_argument("--connect-timeout", type=int, default=None)
    parser.add_argument("-k", "--insecure", action="store_true")
    parser.add_argument("--retries", type=int, default=None)
    parser.add_argument("--as", choices=PROJECTIONS, default="text", dest="projection")
    parser.add_argument(
        "--log-level",
        default=os.getenv("HTTPS_CLIENT_LOG_LEVEL", "WARNING"),
        type=_log_level,
    )
    return parser


def _render(response, projection: str) -> str:
    if projection == "mapping":
        return json.dumps(response.as_mapping(), indent=2)
    if projection == "object":
        return json.dumps(response.as_object(), indent=2, default=vars)
    return response.as_text()


def _main(argv: Sequence[str] | None = None, *, client: HTTPSClient | None = None) -> int:
    args = _build_parser().parse_args(argv)
    configure_logging(args.log_level)

    options = RequestOptions(
        url=args.url,
        method=args.method,
        headers=args.headers,
        body=args.body,
        timeout=args.timeout,
        connect_timeout=args.connect_timeout,
        verify=not args.insecure,
        retries=args.retries,
    )
    try:
        response = (client or HTTPSClient()).execute(options)
        output = _render(response, args.projection)
    except HTTPSError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    print(output)
    return 0


def main() -> None:
    raise SystemExit(_main())
