import operator
from typing import Any, Callable, Dict, Mapping, Optional, Union

from pydantic import BaseModel

from app.core.dates import parse_iso_datetime
from app.schemas.common import Operator
from app.schemas.condition import Condition, DateCondition, NumberCondition
from app.schemas.contact import ContactInfo, RouteContactResponse
from app.schemas.routing_rules import Rule, RoutingRules

ContactLike = Union[ContactInfo, Mapping[str, Any]]

_ORDERINGS: Dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.GREATER_THAN: operator.gt,
    Operator.LESS_THAN: operator.lt,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _resolve_operator(raw: Any) -> Optional[Operator]:
    try:
        return Operator(raw)
    except ValueError:
        return None


def _as_mapping(contact: ContactLike) -> Mapping[str, Any]:
    if isinstance(contact, BaseModel):
        return contact.model_dump()
    return contact


def _equals(left: Any, right: Any) -> bool:
    # bool is an int subclass; True must not equal a company size of 1
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    if _is_number(left) or _is_number(right):
        return _is_number(left) and _is_number(right) and left == right
    return left == right


def evaluate_condition(condition: Condition, contact: ContactLike) -> bool:
    """Return ``True`` when *condition* holds for *contact*.

    A missing or ``None`` contact value never matches.  Ordering
    operators only apply to number and date fields; date values that do
    not parse, unknown operators, and any other combination evaluate to
    ``False`` instead of raising.
    """
    field_value = _as_mapping(contact).get(condition.field)
    if field_value is None:
        return False

    op = _resolve_operator(condition.operator)
    if op is None:
        return False

    if op is Operator.EQUALS:
        return _equals(field_value, condition.value)

    compare = _ORDERINGS[op]

    if isinstance(condition, NumberCondition):
        if not (_is_number(field_value) and _is_number(condition.value)):
            return False
        return compare(field_value, condition.value)

    if isinstance(condition, DateCondition):
        contact_date = parse_iso_datetime(field_value)
        rule_date = parse_iso_datetime(condition.value)
        if contact_date is None or rule_date is None:
            return False
        return compare(contact_date, rule_date)

    return False


def rule_matches(rule: Rule, contact: ContactLike) -> bool:
    """A rule matches when it has no conditions or when ANY condition holds."""
    if not rule.conditions:
        return True
    return any(evaluate_condition(condition, contact) for condition in rule.conditions)


def route(routing_rules: RoutingRules, contact: ContactLike) -> RouteContactResponse:
    """Pick the owner for *contact* from *routing_rules*.

    Rules are tried in ascending ``priority``; rules sharing a priority
    keep their original order (``sorted`` is stable).  The first matching
    rule wins.  When nothing matches, the rule set's default member is
    returned with no applied-rule fields set.
    """
    contact_data = _as_mapping(contact)
    for rule in sorted(routing_rules.rules, key=lambda r: r.priority):
        if rule_matches(rule, contact_data):
            return RouteContactResponse(
                member_id=rule.member_id,
                applied_rule_id=rule.id,
                applied_rule_name=rule.name,
            )

    return RouteContactResponse(member_id=routing_rules.default_member_id)


class RoutingEngine:
    """Asynchronous facade over :func:`route` for the service layer.

    Holds no state; a single instance can be shared by every request.
    """

    async def route_contact(
        self, routing_rules: RoutingRules, contact: ContactLike
    ) -> RouteContactResponse:
        return route(routing_rules, contact)
