"""Main FastAPI application."""
import asyncio
import json
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from app.api.loyalty import router as loyalty_router
from app.api.product import router as product_router
from app.api.ranking import router as ranking_router
from app.api.review import router as review_router
from app.api.stamp_card import router as stamp_card_router
from app.api.user import router as user_router
from app.domain.common.errors import (
    ConflictError as DomainConflictError,
    InvalidStateError as DomainInvalidStateError,
    NotFoundError as DomainNotFoundError,
    PolicyViolationError as DomainPolicyViolationError,
    ValidationError as DomainValidationError,
)
from app.infra.seed import seed_sample_data
from app.infra.storage import Repositories, build_repositories
from app.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, (level or "INFO").upper(), logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


class LoggingMiddleware(BaseHTTPMiddleware):
    """Middleware to log all requests and responses."""

    async def dispatch(self, request: Request, call_next):
        start_time = time.time()
        logger.info("[REQUEST] %s %s", request.method, request.url.path)
        logger.debug("   Query params: %s", dict(request.query_params))

        response = await call_next(request)

        process_time = time.time() - start_time
        logger.info(
            "[RESPONSE] %s %s - %s (%.3fs)",
            request.method, request.url.path, response.status_code, process_time,
        )
        return response


def jsonable_errors(errors: list) -> list:
    # ctx may hold exception objects (e.g. ValueError from a validator)
    return json.loads(json.dumps(errors, default=str))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle validation errors with detailed logging."""
    logger.error("[VALIDATION ERROR] %s %s", request.method, request.url.path)
    if getattr(exc, "body", None):
        body = exc.body
        if isinstance(body, bytes):
            body = body.decode("utf-8", errors="replace")
        logger.error("   Request body: %s", body)

    errors = exc.errors()
    logger.error("   Validation errors (%d):", len(errors))
    for i, error in enumerate(errors, 1):
        logger.error("   Error %d: %s", i, json.dumps(error, default=str))

    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_errors(errors)},
    )


def _domain_handler(status_code: int):
    async def handler(request: Request, exc: Exception):
        logger.info("%s %s -> %d: %s", request.method, request.url.path, status_code, exc)
        return JSONResponse(
            status_code=status_code,
            content={"detail": exc.message if hasattr(exc, "message") else str(exc)},
        )
    return handler


# Domain error -> HTTP status. Subclasses (InsufficientStampsError, SelfPurchaseError) inherit.
DOMAIN_ERROR_STATUS = {
    DomainNotFoundError: 404,
    DomainValidationError: 422,
    DomainInvalidStateError: 409,
    DomainPolicyViolationError: 403,
    DomainConflictError: 409,
}


def create_app(
    settings: Optional[Settings] = None,
    repositories: Optional[Repositories] = None,
) -> FastAPI:
    """Build the application.

    ``repositories`` lets callers (tests, scripts) inject a storage registry;
    otherwise one is built from settings. Sample data is loaded at startup when
    ``settings.seed_sample_data`` is set.
    """
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    repos = repositories or build_repositories(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Application lifespan events."""
        await repos.init_schema()
        if settings.seed_sample_data:
            await seed_sample_data(repos, currency=settings.default_currency)
        logger.info("%s %s started (storage=%s)", settings.app_name, settings.app_version, repos.backend)

        yield

        # Shutdown (CancelledError here is normal on Ctrl+C)
        try:
            await repos.close()
        except asyncio.CancelledError:
            logger.info("Lifespan shutdown cancelled (e.g. Ctrl+C); cleanup attempted.")
            raise

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.repositories = repos

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD"],
        allow_headers=["*"],
    )
    # Add logging middleware AFTER CORS (CORS must be first)
    app.add_middleware(LoggingMiddleware)

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    for error_cls, status_code in DOMAIN_ERROR_STATUS.items():
        app.add_exception_handler(error_cls, _domain_handler(status_code))

    # Health check (root and under /v1 so GET /v1/health works behind a /v1 proxy)
    @app.get("/health")
    @app.get(f"{settings.api_v1_prefix}/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "version": settings.app_version}

    @app.get("/ready")
    async def readiness(request: Request):
        """Readiness endpoint: run all checks and return 200 if ready, 503 otherwise."""
        from app.readiness import is_ready, run_all_checks_async
        checks = await run_all_checks_async(request.app.state.repositories)
        ready, summary = is_ready(checks)
        if ready:
            return {"ready": True, "checks": summary}
        return JSONResponse(
            status_code=503,
            content={"ready": False, "checks": summary},
        )

    # API v1 routes
    app.include_router(product_router, prefix=settings.api_v1_prefix)
    app.include_router(review_router, prefix=settings.api_v1_prefix)
    app.include_router(ranking_router, prefix=settings.api_v1_prefix)
    app.include_router(stamp_card_router, prefix=settings.api_v1_prefix)
    app.include_router(user_router, prefix=settings.api_v1_prefix)
    app.include_router(loyalty_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host="0.0.0.0", port=8000, reload=True)
