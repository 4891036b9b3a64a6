"""
Server status check.

Calls /health and the public courses endpoint of a running API and prints
what it finds. Exits non-zero when the server is unreachable or unhealthy.

Usage:
    python scripts/check_server.py [--base-url http://localhost:8000]
"""

import argparse
import asyncio
import os
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from app.client import AcademyApiClient, ApiClientError, ApiConnectionError

API_BASE = os.environ.get("API_BASE", "http://localhost:8000")


async def check_server(base_url: str) -> bool:
    async with AcademyApiClient(base_url) as client:
        print("1. Checking health endpoint...")
        try:
            health = await client.health()
        except ApiConnectionError:
            print(f"  FAIL: Server is not running at {base_url}")
            return False
        except ApiClientError as e:
            print(f"  FAIL: Health check failed: {e.message}")
            return False

        print(f"  OK: Server is running ({health})")
        if health.get("status") != "healthy":
            print("  WARN: Server reports degraded status - check DATABASE_URL")

        print("\n2. Checking public API routes...")
        try:
            courses = await client.list_courses()
        except ApiClientError as e:
            print(f"  FAIL: Courses endpoint: {e.message}")
            return False
        print(f"  OK: Courses endpoint answered ({len(courses)} courses)")

    return health.get("status") == "healthy"


def main() -> None:
    parser = argparse.ArgumentParser(description="Check a running academy API")
    parser.add_argument("--base-url", default=API_BASE)
    args = parser.parse_args()

    ok = asyncio.run(check_server(args.base_url))
    sys.exit(0 if ok else 1)


if __name__ == "__main__":
    main()
