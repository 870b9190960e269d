from fastapi import APIRouter

from app.api.v1.endpoints import health, members, routing_rules

router = APIRouter(prefix="/api/v1")

router.include_router(routing_rules.router)
router.include_router(members.router)
router.include_router(health.router)
