"""Readiness checks: config, packages, storage."""
import logging
from typing import Optional

from app.infra.storage import Repositories

logger = logging.getLogger(__name__)

# Result: (passed: bool, message: str)
CheckResult = tuple[bool, str]
ChecksDict = dict[str, CheckResult]


def check_config() -> CheckResult:
    """Load settings and read the fields the app needs at startup."""
    try:
        from app.settings import get_settings
        s = get_settings()
        _ = s.app_name
        _ = s.storage_backend
        _ = s.database_url
        return True, "ok"
    except Exception as e:
        return False, str(e)


def check_packages() -> CheckResult:
    """Import critical modules: uvicorn, sqlalchemy, yaml."""
    missing = []
    try:
        import uvicorn  # noqa: F401
    except ImportError:
        missing.append("uvicorn")
    try:
        import sqlalchemy  # noqa: F401
    except ImportError:
        missing.append("sqlalchemy")
    try:
        import yaml  # noqa: F401
    except ImportError:
        missing.append("pyyaml")
    if missing:
        return False, f"missing: {', '.join(missing)}"
    return True, "ok"


async def check_storage(repos: Optional[Repositories]) -> CheckResult:
    """Ping the backing store. In-memory storage always passes."""
    if repos is None:
        return False, "storage not initialised"
    try:
        await repos.ping()
    except Exception as e:
        return False, str(e)
    if repos.engine is None:
        return True, "ok (memory)"
    return True, "ok"


async def run_all_checks_async(repos: Optional[Repositories]) -> ChecksDict:
    """Run all readiness checks. Use from async context (e.g. GET /ready)."""
    return {
        "config": check_config(),
        "packages": check_packages(),
        "storage": await check_storage(repos),
    }


def is_ready(checks: ChecksDict) -> tuple[bool, dict[str, str]]:
    """
    True if all required checks pass.
    Returns (ready: bool, checks_summary: dict of name -> "ok" | error message).
    """
    required = {"config", "packages", "storage"}
    summary = {name: msg for name, (_passed, msg) in checks.items()}
    all_required = all(checks[n][0] for n in required if n in checks)
    if not all_required:
        logger.warning("Not ready: %s", summary)
    return all_required, summary
