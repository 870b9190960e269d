from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.database import check_database_connection

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("")
async def health() -> dict:
    """Liveness probe; does not touch the database."""
    return {"status": "ok"}


@router.get("/db")
async def database_health():
    """Readiness probe that runs ``SELECT 1`` against the database."""
    if await check_database_connection():
        return {"status": "ok", "database": "ok"}
    return JSONResponse(
        status_code=503,
        content={"status": "degraded", "database": "unavailable"},
    )
