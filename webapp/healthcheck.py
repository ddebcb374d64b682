#!/usr/bin/env python3
"""
Single-shot health probe for container HEALTHCHECK directives.

Requests the service's /health endpoint once and exits with:
  0  the endpoint answered 200 with {"status": "healthy"}
  1  anything else (bad status, unexpected body, connection error, timeout)

No retries are made; the orchestrator decides how often to probe.
"""
import argparse
import logging
import sys
from typing import List, Optional

import httpx

from webapp.core.config import get_settings

DEFAULT_TIMEOUT = 2.0


def default_url() -> str:
    return f"http://127.0.0.1:{get_settings().port}/health"


def probe(url: str, timeout: float = DEFAULT_TIMEOUT, client: Optional[httpx.Client] = None) -> bool:
    owns_client = client is None
    if client is None:
        client = httpx.Client(timeout=timeout)
    try:
        resp = client.get(url)
    except httpx.HTTPError as exc:
        logging.error("Health probe to %s failed: %s", url, exc)
        return False
    finally:
        if owns_client:
            client.close()

    if resp.status_code != 200:
        logging.error("Health probe to %s returned HTTP %s", url, resp.status_code)
        return False
    try:
        payload = resp.json()
    except ValueError:
        logging.error("Health probe to %s returned a non-JSON body", url)
        return False
    if not isinstance(payload, dict) or payload.get("status") != "healthy":
        logging.error("Health probe to %s reported %r", url, payload)
        return False
    return True


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Probe the webapp /health endpoint once")
    parser.add_argument("--url", default=None, help="Health endpoint URL (default: http://127.0.0.1:$PORT/health)")
    parser.add_argument("--timeout", type=float, default=DEFAULT_TIMEOUT, help="Request timeout in seconds")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    args = parse_args(argv)
    url = args.url or default_url()
    return 0 if probe(url, timeout=args.timeout) else 1


if __name__ == "__main__":
    sys.exit(main())
