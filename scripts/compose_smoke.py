#!/usr/bin/env python3
from __future__ import annotations

import json
import os
import sys
import time

from urllib.request import urlopen
from urllib.error import URLError


def main() -> int:
    base_url = os.getenv("JOURNALMETRICS_API_URL", "http://localhost:8080")
    health = f"{base_url.rstrip('/')}/healthz"
    report = f"{base_url.rstrip('/')}/"
    try:
        with urlopen(health, timeout=5) as r:
            print("/healthz:", r.read().decode("utf-8"))
        # Give the service a moment to finish boot
        time.sleep(0.5)
        with urlopen(report, timeout=10) as r2:
            records = json.loads(r2.read().decode("utf-8"))
            print("/:", f"{len(records)} journal records")
    except (URLError, ValueError) as exc:
        print(f"Smoke check failed: {exc}", file=sys.stderr)
        return 1
    print("Smoke check passed.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
