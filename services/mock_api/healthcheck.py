"""Probe a running instance's /health endpoint.

Exits 0 when the service answers 200 with ``status: "OK"``, 1 otherwise.
Meant for container HEALTHCHECK lines::

    mock-api-healthcheck --url http://127.0.0.1:3000 --timeout 2
"""
import argparse
import sys

import requests

from .config import get_config


def check(url, timeout=2.0):
    """Return ``(healthy, reason)`` for the service at ``url``."""
    try:
        response = requests.get(f"{url.rstrip('/')}/health", timeout=timeout)
    except requests.exceptions.Timeout:
        return False, f"timeout after {timeout}s"
    except requests.exceptions.RequestException as e:
        return False, f"request failed: {e}"

    if response.status_code != 200:
        return False, f"unexpected status {response.status_code}"

    try:
        body = response.json()
    except ValueError:
        return False, "invalid JSON in health response"

    if not isinstance(body, dict) or body.get('status') != 'OK':
        return False, f"unhealthy: {body!r}"
    return True, f"OK ({body.get('environment')}, uptime {body.get('uptime')}s)"


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check a mock-api instance's health")
    parser.add_argument('--url', default=None,
                        help="base URL of the service (default http://127.0.0.1:$PORT)")
    parser.add_argument('--timeout', type=float, default=2.0,
                        help="request timeout in seconds")
    args = parser.parse_args(argv)

    url = args.url or f"http://127.0.0.1:{get_config().port}"
    healthy, reason = check(url, timeout=args.timeout)
    if healthy:
        print(reason)
        return 0
    print(f"{url}: {reason}", file=sys.stderr)
    return 1


if __name__ == '__main__':
    sys.exit(main())
