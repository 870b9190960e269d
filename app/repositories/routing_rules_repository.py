import logging
from typing import List, Optional, Sequence, Tuple
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.orm import selectinload

from app.models.routing_rules import RoutingRule, RoutingRuleSet
from app.repositories.base import BaseRepository
from app.schemas.routing_rules import Rule, RuleCreate, RoutingRules

logger = logging.getLogger(__name__)


def _parse_id(routing_rules_id: str) -> Optional[UUID]:
    try:
        return UUID(str(routing_rules_id))
    except ValueError:
        return None


def _to_schema(row: RoutingRuleSet) -> RoutingRules:
    """Convert an ORM rule set into the value the routing engine consumes."""
    return RoutingRules(
        id=str(row.id),
        name=row.name,
        rules=[
            Rule(
                id=str(rule.id),
                name=rule.name,
                conditions=rule.conditions or [],
                member_id=rule.member_id,
                priority=rule.priority,
            )
            for rule in row.rules
        ],
        default_member_id=row.default_member_id,
        default_member_name=row.default_member.name if row.default_member else None,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def _build_rules(rules: Sequence[RuleCreate]) -> List[RoutingRule]:
    return [
        RoutingRule(
            name=rule.name,
            conditions=[c.model_dump(mode="json") for c in rule.conditions],
            member_id=rule.member_id,
            priority=rule.priority,
            position=position,
        )
        for position, rule in enumerate(rules)
    ]


class RoutingRulesRepository(BaseRepository):
    """Encapsulates every SQL query against ``routing_rules`` and ``rules``.

    All public methods return :class:`RoutingRules` schemas, never ORM
    rows, so callers can hand the result straight to the routing engine.
    """

    def _select(self):
        return select(RoutingRuleSet).options(
            selectinload(RoutingRuleSet.rules),
            selectinload(RoutingRuleSet.default_member),
        )

    async def _get_row(self, rule_set_id: UUID) -> Optional[RoutingRuleSet]:
        result = await self._db.execute(
            self._select()
            .where(RoutingRuleSet.id == rule_set_id)
            .execution_options(populate_existing=True)
        )
        return result.scalar_one_or_none()

    async def get_by_id(self, routing_rules_id: str) -> Optional[RoutingRules]:
        """Return a rule set with its rules, or ``None`` if it does not exist."""
        rule_set_id = _parse_id(routing_rules_id)
        if rule_set_id is None:
            return None
        row = await self._get_row(rule_set_id)
        return _to_schema(row) if row else None

    async def list_all(
        self, offset: int = 0, limit: int = 10
    ) -> Tuple[List[RoutingRules], int]:
        """Return one page of rule sets (newest first) and the total count."""
        total = await self._db.scalar(select(func.count()).select_from(RoutingRuleSet))
        result = await self._db.execute(
            self._select()
            .order_by(RoutingRuleSet.created_at.desc())
            .offset(offset)
            .limit(limit)
        )
        return [_to_schema(row) for row in result.scalars().all()], total or 0

    async def create(
        self, name: str, default_member_id: int, rules: Sequence[RuleCreate]
    ) -> RoutingRules:
        """Insert a rule set and its rules in the current transaction."""
        row = RoutingRuleSet(
            name=name,
            default_member_id=default_member_id,
            rules=_build_rules(rules),
        )
        self._db.add(row)
        await self._db.flush()
        logger.info("Created routing rules %s with %d rule(s)", row.id, len(rules))
        return _to_schema(await self._get_row(row.id))

    async def update(
        self,
        routing_rules_id: str,
        name: Optional[str] = None,
        default_member_id: Optional[int] = None,
        rules: Optional[Sequence[RuleCreate]] = None,
    ) -> Optional[RoutingRules]:
        """Apply partial changes; a given ``rules`` list replaces the old one."""
        rule_set_id = _parse_id(routing_rules_id)
        if rule_set_id is None:
            return None
        row = await self._get_row(rule_set_id)
        if row is None:
            return None

        if name is not None:
            row.name = name
        if default_member_id is not None:
            row.default_member_id = default_member_id
        if rules is not None:
            # delete-orphan cascade removes the replaced rules on flush
            row.rules = _build_rules(rules)
        row.updated_at = func.now()

        await self._db.flush()
        return _to_schema(await self._get_row(rule_set_id))

    async def delete(self, routing_rules_id: str) -> bool:
        """Delete a rule set (its rules cascade). Returns ``False`` if absent."""
        rule_set_id = _parse_id(routing_rules_id)
        if rule_set_id is None:
            return False
        result = await self._db.execute(
            delete(RoutingRuleSet)
            .where(RoutingRuleSet.id == rule_set_id)
            .returning(RoutingRuleSet.id)
        )
        return result.scalar_one_or_none() is not None
