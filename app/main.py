from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
import logging

from app.api.v1.router import router as api_v1_router
from app.core.cache import CacheService
from app.core.config import settings as app_settings
from app.core.database import engine
from app.core.exceptions import (
    DuplicateMemberEmailError,
    InvalidContactInfoError,
    InvalidRoutingRulesError,
    MemberNotFoundError,
    RoutingRulesNotFoundError,
)
from app.core.rate_limit import limiter
from app.dependencies import get_redis_client
from app.services.country_codes import CountryCodeService

# Configure logging
logging.basicConfig(level=app_settings.LOG_LEVEL)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Build process-wide services and release connections on shutdown."""
    redis_client = await get_redis_client()
    app.state.country_codes = CountryCodeService(
        cache=CacheService(redis_client=redis_client)
    )
    logger.info(
        "Country-code service ready (shared cache: %s)",
        "redis" if redis_client is not None else "disabled",
    )
    yield
    if redis_client is not None:
        await redis_client.aclose()
    await engine.dispose()
    logger.info("Connections closed")


app = FastAPI(
    title="Contact Routing Service",
    description="Assigns incoming contacts to account owners using prioritised routing rules",
    version="0.1.0",
    lifespan=lifespan,
)

# Attach rate limiter state so slowapi middleware can find it
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# CORS middleware – restricted to configured origins
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        o.strip() for o in app_settings.CORS_ORIGINS.split(",") if o.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(api_v1_router)


@app.exception_handler(RoutingRulesNotFoundError)
async def routing_rules_not_found_handler(
    request: Request, exc: RoutingRulesNotFoundError
):
    logger.warning("Routing rules not found: %s", request.url.path)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.detail, "type": "routing_rules_not_found"},
    )


@app.exception_handler(MemberNotFoundError)
async def member_not_found_handler(request: Request, exc: MemberNotFoundError):
    logger.warning("Member not found: %s", exc.detail)
    return JSONResponse(
        status_code=404,
        content={"detail": exc.detail, "type": "member_not_found"},
    )


@app.exception_handler(DuplicateMemberEmailError)
async def duplicate_member_email_handler(
    request: Request, exc: DuplicateMemberEmailError
):
    logger.warning("Duplicate member email: %s", exc.detail)
    return JSONResponse(
        status_code=409,
        content={"detail": exc.detail, "type": "duplicate_member_email"},
    )


@app.exception_handler(InvalidRoutingRulesError)
async def invalid_routing_rules_handler(
    request: Request, exc: InvalidRoutingRulesError
):
    logger.warning("Invalid routing rules: %s", exc.errors)
    return JSONResponse(
        status_code=400,
        content={
            "detail": exc.detail,
            "errors": exc.errors,
            "type": "invalid_routing_rules",
        },
    )


@app.exception_handler(InvalidContactInfoError)
async def invalid_contact_info_handler(
    request: Request, exc: InvalidContactInfoError
):
    logger.warning("Invalid contact info: %s", exc.errors)
    return JSONResponse(
        status_code=400,
        content={
            "detail": exc.detail,
            "errors": exc.errors,
            "type": "invalid_contact_info",
        },
    )


def _jsonable_errors(exc: RequestValidationError) -> list:
    """Strip non-serialisable ``ctx`` values (e.g. the raised ValueError)."""
    errors = []
    for error in exc.errors():
        error = dict(error)
        if "ctx" in error:
            error["ctx"] = {k: str(v) for k, v in error["ctx"].items()}
        errors.append(error)
    return errors


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning("Request validation error: %s", exc.errors())
    return JSONResponse(
        status_code=422,
        content={
            "detail": "Request validation failed",
            "errors": _jsonable_errors(exc),
            "type": "validation_error",
        },
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Catch-all handler for unexpected/unhandled exceptions.

    Returns a generic 500 response so that raw stack traces are never
    leaked to the client.
    """
    logger.error(
        "Unhandled exception on %s %s: %s",
        request.method,
        request.url.path,
        exc,
        exc_info=True,
    )
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected internal error occurred. Please try again later.",
            "type": "internal_server_error",
        },
    )
