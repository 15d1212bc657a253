#!/usr/bin/env python
"""Simple container healthcheck probing the Flask health endpoint."""

import os
import sys
from urllib import request, error


def main() -> int:
    host = os.getenv("HEALTHCHECK_HOST", "127.0.0.1")
    port = os.getenv("PORT", "3000")
    path = os.getenv("HEALTHCHECK_PATH", "/healthz")
    target = f"http://{host}:{port}{path}"
    try:
        with request.urlopen(target, timeout=5) as resp:
            return 0 if resp.status == 200 else 1
    except error.URLError:
        return 1


if __name__ == "__main__":
    sys.exit(main())
