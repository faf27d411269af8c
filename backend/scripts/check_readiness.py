#!/usr/bin/env python3
"""Run readiness checks and report pass/fail per item and overall. Exit 0 if all required checks pass, 1 otherwise."""
import asyncio
import sys
from pathlib import Path

# Ensure backend app is on path when run as script
_backend = Path(__file__).resolve().parent.parent
if str(_backend) not in sys.path:
    sys.path.insert(0, str(_backend))

from app.infra.storage import build_repositories
from app.readiness import is_ready, run_all_checks_async
from app.settings import settings


async def _run_checks():
    repos = build_repositories(settings)
    try:
        return await run_all_checks_async(repos)
    finally:
        await repos.close()


def main() -> int:
    checks = asyncio.run(_run_checks())
    ready, summary = is_ready(checks)
    for name, msg in summary.items():
        status = "OK" if checks[name][0] else "FAIL"
        print(f"  {name}: {status}  {msg}")
    print("")
    if ready:
        print("Readiness: READY (all required checks passed)")
        return 0
    print("Readiness: NOT READY (one or more required checks failed)")
    return 1


if __name__ == "__main__":
    sys.exit(main())
