import logging
from typing import Any, List, Optional, Sequence

from pydantic import BaseModel

from app.core.constants import COUNTRY_FIELDS
from app.schemas.contact import ContactInfo
from app.schemas.routing_rules import RuleCreate
from app.services.country_codes import CountryCodeLookup

logger = logging.getLogger(__name__)


class ValidationIssue(BaseModel):
    """One field-level problem reported back to the client."""

    field: str
    message: str
    value: Optional[Any] = None


class ContactValidator:
    """Checks that need the country-code reference list.

    Shape, numeric range and date checks live on the pydantic schemas;
    this class only adds the lookups that require the async
    :class:`CountryCodeLookup` capability.
    """

    def __init__(self, country_codes: CountryCodeLookup) -> None:
        self._country_codes = country_codes

    async def validate_contact_info(self, contact: ContactInfo) -> List[ValidationIssue]:
        """Return every country-code problem in *contact* (empty if valid)."""
        issues: List[ValidationIssue] = []
        for field in sorted(COUNTRY_FIELDS):
            code = getattr(contact, field)
            if code is None:
                continue
            if not await self._country_codes.is_valid_code(code):
                issues.append(
                    ValidationIssue(
                        field=field,
                        message=(
                            f"Invalid country code: {code}. Must be a valid ISO "
                            "3166-1 alpha-2 country code (e.g., US, GB, FR)"
                        ),
                        value=code,
                    )
                )
        if issues:
            logger.warning("Contact info failed validation: %d issue(s)", len(issues))
        return issues

    async def validate_rules(self, rules: Sequence[RuleCreate]) -> List[ValidationIssue]:
        """Return every unknown country code used in *rules* conditions."""
        issues: List[ValidationIssue] = []
        for rule_index, rule in enumerate(rules):
            for condition_index, condition in enumerate(rule.conditions):
                if condition.field not in COUNTRY_FIELDS:
                    continue
                if not await self._country_codes.is_valid_code(condition.value):
                    issues.append(
                        ValidationIssue(
                            field=(
                                f"rules[{rule_index}].conditions"
                                f"[{condition_index}].value"
                            ),
                            message=(
                                f"Invalid country code: {condition.value}. Must be "
                                "a valid ISO 3166-1 alpha-2 country code"
                            ),
                            value=condition.value,
                        )
                    )
        if issues:
            logger.warning("Routing rules failed validation: %d issue(s)", len(issues))
        return issues
