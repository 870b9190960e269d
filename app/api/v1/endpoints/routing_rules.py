from fastapi import APIRouter, Depends, Query, Request

from app.api.deps import (
    get_member_repo,
    get_routing_rules_repo,
    get_routing_rules_service,
)
from app.core.config import settings
from app.core.constants import DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from app.core.rate_limit import limiter
from app.repositories.member_repository import MemberRepository
from app.repositories.routing_rules_repository import RoutingRulesRepository
from app.schemas.contact import RouteContactEnvelope, RouteContactRequest
from app.schemas.routing_rules import (
    DeleteResponse,
    Pagination,
    RoutingRulesCreate,
    RoutingRulesListResponse,
    RoutingRulesResponse,
    RoutingRulesUpdate,
)
from app.services.routing_rules_service import RoutingRulesService

router = APIRouter(prefix="/routing-rules", tags=["Routing Rules"])


@router.post("", response_model=RoutingRulesResponse, status_code=201)
async def create_routing_rules(
    request_body: RoutingRulesCreate,
    service: RoutingRulesService = Depends(get_routing_rules_service),
    rules_repo: RoutingRulesRepository = Depends(get_routing_rules_repo),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> RoutingRulesResponse:
    """Create a rule set.

    Country codes used in conditions are checked against the reference
    list and every referenced member must exist.
    """
    routing_rules = await service.create_routing_rules(
        request_body, rules_repo=rules_repo, member_repo=member_repo
    )
    return RoutingRulesResponse(data=routing_rules)


@router.get("", response_model=RoutingRulesListResponse)
async def list_routing_rules(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE),
    service: RoutingRulesService = Depends(get_routing_rules_service),
    rules_repo: RoutingRulesRepository = Depends(get_routing_rules_repo),
) -> RoutingRulesListResponse:
    items, total = await service.list_routing_rules(page, limit, rules_repo=rules_repo)
    return RoutingRulesListResponse(
        data=items,
        pagination=Pagination(page=page, limit=limit, total=total),
    )


@router.get("/{routing_rules_id}", response_model=RoutingRulesResponse)
async def get_routing_rules(
    routing_rules_id: str,
    service: RoutingRulesService = Depends(get_routing_rules_service),
    rules_repo: RoutingRulesRepository = Depends(get_routing_rules_repo),
) -> RoutingRulesResponse:
    routing_rules = await service.get_routing_rules(routing_rules_id, rules_repo)
    return RoutingRulesResponse(data=routing_rules)


@router.put("/{routing_rules_id}", response_model=RoutingRulesResponse)
async def update_routing_rules(
    routing_rules_id: str,
    request_body: RoutingRulesUpdate,
    service: RoutingRulesService = Depends(get_routing_rules_service),
    rules_repo: RoutingRulesRepository = Depends(get_routing_rules_repo),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> RoutingRulesResponse:
    """Update a rule set; a ``rules`` list replaces the stored rules."""
    routing_rules = await service.update_routing_rules(
        routing_rules_id,
        request_body,
        rules_repo=rules_repo,
        member_repo=member_repo,
    )
    return RoutingRulesResponse(data=routing_rules)


@router.delete("/{routing_rules_id}", response_model=DeleteResponse)
async def delete_routing_rules(
    routing_rules_id: str,
    service: RoutingRulesService = Depends(get_routing_rules_service),
    rules_repo: RoutingRulesRepository = Depends(get_routing_rules_repo),
) -> DeleteResponse:
    await service.delete_routing_rules(routing_rules_id, rules_repo)
    return DeleteResponse(message="Routing rules deleted successfully")


@router.post(
    "/{routing_rules_id}/route",
    response_model=RouteContactEnvelope,
    response_model_exclude_none=True,
)
@limiter.limit(settings.ROUTE_RATE_LIMIT)
async def route_contact(
    request: Request,
    routing_rules_id: str,
    request_body: RouteContactRequest,
    service: RoutingRulesService = Depends(get_routing_rules_service),
    rules_repo: RoutingRulesRepository = Depends(get_routing_rules_repo),
    member_repo: MemberRepository = Depends(get_member_repo),
) -> RouteContactEnvelope:
    """Route a contact to a member.

    The response carries ``applied_rule_id`` / ``applied_rule_name`` only
    when a rule matched; otherwise the rule set's default member is used.
    """
    result = await service.route_contact(
        routing_rules_id,
        request_body.contact_info,
        rules_repo=rules_repo,
        member_repo=member_repo,
    )
    return RouteContactEnvelope(data=result)
