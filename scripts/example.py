#!/usr/bin/env python3
"""Fetch the example document and print it through each projection."""

from __future__ import annotations

import sys

from https_client import HTTPSClient, HTTPSError
from https_client.cli import configure_logging

EXAMPLE_URL = "https://raw.githubusercontent.com/rpurinton/https/master/example.json"
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
    "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/70.0.3538.77 Safari/537.36"
)


def main() -> int:
    configure_logging("INFO")
    client = HTTPSClient(headers={"User-Agent": USER_AGENT})
    try:
        response = client.execute(url=EXAMPLE_URL, method="GET", body="")
        print(f"Response as String: {response.as_text()}")
        print(f"Response as Mapping: {response.as_mapping()!r}")
        print(f"Response as Object: {response.as_object()!r}")
    except HTTPSError as exc:
        print(f"FAIL  {exc}", file=sys.stderr)
        return 1
    print(f"Status: {response.status_code} {response.status_text} ({response.status_class})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
