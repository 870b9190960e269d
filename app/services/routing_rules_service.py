import logging
from typing import Iterable, List, Optional, Sequence, Set, Tuple

from app.core.exceptions import (
    InvalidContactInfoError,
    InvalidRoutingRulesError,
    MemberNotFoundError,
    RoutingRulesNotFoundError,
)
from app.repositories.member_repository import MemberRepository
from app.repositories.routing_rules_repository import RoutingRulesRepository
from app.schemas.contact import ContactInfo, RouteContactResponse
from app.schemas.routing_rules import (
    RoutingRules,
    RoutingRulesCreate,
    RoutingRulesUpdate,
    RuleCreate,
)
from app.services.contact_validation import ContactValidator
from app.services.routing_engine import RoutingEngine

logger = logging.getLogger(__name__)


class RoutingRulesService:
    """Rule-set CRUD and contact routing.

    Dependencies are injected via the constructor so the class remains
    stateless and easily testable.  Repositories are passed per call so
    that they share the request's database session.
    """

    def __init__(self, engine: RoutingEngine, validator: ContactValidator) -> None:
        self._engine = engine
        self._validator = validator

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    async def _ensure_members_exist(
        self, member_ids: Iterable[int], member_repo: MemberRepository
    ) -> None:
        wanted: Set[int] = set(member_ids)
        found = {m.id for m in await member_repo.get_many(wanted)}
        missing = sorted(wanted - found)
        if missing:
            raise MemberNotFoundError(
                f"Member(s) not found: {', '.join(str(m) for m in missing)}"
            )

    async def _validate_rules(self, rules: Sequence[RuleCreate]) -> None:
        issues = await self._validator.validate_rules(rules)
        if issues:
            raise InvalidRoutingRulesError(
                errors=[issue.model_dump(exclude_none=True) for issue in issues]
            )

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    async def create_routing_rules(
        self,
        request: RoutingRulesCreate,
        rules_repo: RoutingRulesRepository,
        member_repo: MemberRepository,
    ) -> RoutingRules:
        """Validate and persist a new rule set."""
        await self._validate_rules(request.rules)
        await self._ensure_members_exist(
            [request.default_member_id, *(r.member_id for r in request.rules)],
            member_repo,
        )

        routing_rules = await rules_repo.create(
            name=request.name,
            default_member_id=request.default_member_id,
            rules=request.rules,
        )
        await rules_repo.commit()
        return routing_rules

    async def get_routing_rules(
        self, routing_rules_id: str, rules_repo: RoutingRulesRepository
    ) -> RoutingRules:
        routing_rules = await rules_repo.get_by_id(routing_rules_id)
        if routing_rules is None:
            raise RoutingRulesNotFoundError()
        return routing_rules

    async def list_routing_rules(
        self, page: int, limit: int, rules_repo: RoutingRulesRepository
    ) -> Tuple[List[RoutingRules], int]:
        return await rules_repo.list_all(offset=(page - 1) * limit, limit=limit)

    async def update_routing_rules(
        self,
        routing_rules_id: str,
        updates: RoutingRulesUpdate,
        rules_repo: RoutingRulesRepository,
        member_repo: MemberRepository,
    ) -> RoutingRules:
        """Apply partial changes; a new ``rules`` list replaces the old one."""
        member_ids: List[int] = []
        if updates.rules is not None:
            await self._validate_rules(updates.rules)
            member_ids.extend(r.member_id for r in updates.rules)
        if updates.default_member_id is not None:
            member_ids.append(updates.default_member_id)
        if member_ids:
            await self._ensure_members_exist(member_ids, member_repo)

        routing_rules = await rules_repo.update(
            routing_rules_id,
            name=updates.name,
            default_member_id=updates.default_member_id,
            rules=updates.rules,
        )
        if routing_rules is None:
            raise RoutingRulesNotFoundError()
        await rules_repo.commit()
        return routing_rules

    async def delete_routing_rules(
        self, routing_rules_id: str, rules_repo: RoutingRulesRepository
    ) -> None:
        deleted = await rules_repo.delete(routing_rules_id)
        if not deleted:
            raise RoutingRulesNotFoundError()
        await rules_repo.commit()
        logger.info("Deleted routing rules %s", routing_rules_id)

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    async def route_contact(
        self,
        routing_rules_id: str,
        contact: ContactInfo,
        rules_repo: RoutingRulesRepository,
        member_repo: Optional[MemberRepository] = None,
    ) -> RouteContactResponse:
        """Validate *contact*, load the rule set and pick the owner.

        When *member_repo* is given, the chosen member's name is attached
        to the result.
        """
        issues = await self._validator.validate_contact_info(contact)
        if issues:
            raise InvalidContactInfoError(
                errors=[issue.model_dump(exclude_none=True) for issue in issues]
            )

        routing_rules = await rules_repo.get_by_id(routing_rules_id)
        if routing_rules is None:
            raise RoutingRulesNotFoundError()

        result = await self._engine.route_contact(routing_rules, contact)

        if member_repo is not None:
            member = await member_repo.get_by_id(result.member_id)
            if member is not None:
                result.member_name = member.name

        logger.info(
            "Routed contact with rules %s to member %s (rule: %s)",
            routing_rules_id,
            result.member_id,
            result.applied_rule_id or "default",
        )
        return result
