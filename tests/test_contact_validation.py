import pytest

from app.schemas.contact import ContactInfo
from app.schemas.routing_rules import RuleCreate
from app.services.contact_validation import ContactValidator


def _rule(*conditions) -> RuleCreate:
    return RuleCreate(name="r", member_id=2, conditions=list(conditions))


class TestValidateContactInfo:
    @pytest.mark.asyncio
    async def test_valid_contact_has_no_issues(self, country_codes):
        validator = ContactValidator(country_codes)
        contact = ContactInfo(contact_country="US", company_hq_country="IL")

        assert await validator.validate_contact_info(contact) == []

    @pytest.mark.asyncio
    async def test_unknown_country_is_reported(self, country_codes):
        validator = ContactValidator(country_codes)
        contact = ContactInfo(contact_country="XX", company_hq_country="FR")

        issues = await validator.validate_contact_info(contact)

        assert len(issues) == 1
        assert issues[0].field == "contact_country"
        assert issues[0].value == "XX"
        assert issues[0].message.startswith("Invalid country code: XX")

    @pytest.mark.asyncio
    async def test_every_bad_country_field_is_reported(self, country_codes):
        validator = ContactValidator(country_codes)
        contact = ContactInfo(contact_country="XX", company_hq_country="QQ")

        issues = await validator.validate_contact_info(contact)

        assert [i.field for i in issues] == ["company_hq_country", "contact_country"]

    @pytest.mark.asyncio
    async def test_absent_country_fields_are_not_looked_up(self, country_codes):
        validator = ContactValidator(country_codes)

        await validator.validate_contact_info(ContactInfo(company_name="WIX"))

        assert country_codes.calls == []

    @pytest.mark.asyncio
    async def test_lookup_is_case_sensitive(self, country_codes):
        validator = ContactValidator(country_codes)

        issues = await validator.validate_contact_info(ContactInfo(contact_country="us"))

        assert len(issues) == 1


class TestValidateRules:
    @pytest.mark.asyncio
    async def test_known_countries_pass(self, country_codes):
        validator = ContactValidator(country_codes)
        rules = [
            _rule({"field": "contact_country", "value": "US"}),
            _rule({"field": "company_name", "value": "WIX"}),
        ]

        assert await validator.validate_rules(rules) == []

    @pytest.mark.asyncio
    async def test_issue_path_points_at_condition(self, country_codes):
        validator = ContactValidator(country_codes)
        rules = [
            _rule({"field": "contact_country", "value": "US"}),
            _rule(
                {"field": "company_size", "operator": ">", "value": 10},
                {"field": "company_hq_country", "value": "ZZ"},
            ),
        ]

        issues = await validator.validate_rules(rules)

        assert len(issues) == 1
        assert issues[0].field == "rules[1].conditions[1].value"
        assert issues[0].value == "ZZ"

    @pytest.mark.asyncio
    async def test_non_country_fields_are_not_looked_up(self, country_codes):
        validator = ContactValidator(country_codes)

        await validator.validate_rules([_rule({"field": "first_page", "value": "/x"})])

        assert country_codes.calls == []
