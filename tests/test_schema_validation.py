import pytest
from pydantic import TypeAdapter, ValidationError

from app.schemas.common import CompanyIndustry, ContactDevice, Operator
from app.schemas.condition import (
    Condition,
    CountryCondition,
    DateCondition,
    EnumCondition,
    NumberCondition,
    StringCondition,
)
from app.schemas.contact import ContactInfo
from app.schemas.member import MemberUpdate
from app.schemas.routing_rules import RoutingRulesCreate, RoutingRulesUpdate

_condition = TypeAdapter(Condition)


class TestConditionVariants:
    """The ``field`` name selects the condition variant."""

    @pytest.mark.parametrize(
        "field,value,expected",
        [
            ("company_name", "WIX", StringCondition),
            ("first_page", "/pricing", StringCondition),
            ("contact_country", "US", CountryCondition),
            ("company_hq_country", "IL", CountryCondition),
            ("company_size", 50, NumberCondition),
            ("company_industry", "BANKING", EnumCondition),
            ("contact_device", "Mobile", EnumCondition),
            ("first_seen", "2024-01-01", DateCondition),
            ("last_seen", "2024-01-01T12:30:00Z", DateCondition),
        ],
    )
    def test_field_selects_variant(self, field, value, expected):
        condition = _condition.validate_python(
            {"field": field, "operator": "=", "value": value}
        )
        assert isinstance(condition, expected)

    def test_operator_defaults_to_equals(self):
        condition = _condition.validate_python({"field": "company_name", "value": "X"})
        assert condition.operator is Operator.EQUALS

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError):
            _condition.validate_python(
                {"field": "favourite_colour", "operator": "=", "value": "red"}
            )

    def test_enum_values_are_parsed(self):
        industry = _condition.validate_python(
            {"field": "company_industry", "operator": "=", "value": "ACCOUNTING"}
        )
        device = _condition.validate_python(
            {"field": "contact_device", "operator": "=", "value": "Tablet"}
        )
        assert industry.value is CompanyIndustry.ACCOUNTING
        assert device.value is ContactDevice.TABLET


class TestConditionOperators:
    @pytest.mark.parametrize(
        "field,value",
        [
            ("company_name", "WIX"),
            ("contact_country", "US"),
            ("company_industry", "BANKING"),
        ],
    )
    @pytest.mark.parametrize("operator", [">", "<"])
    def test_ordering_rejected_on_equality_only_fields(self, field, value, operator):
        with pytest.raises(ValidationError, match="not supported"):
            _condition.validate_python(
                {"field": field, "operator": operator, "value": value}
            )

    @pytest.mark.parametrize("operator", ["=", ">", "<"])
    def test_number_and_date_accept_all_operators(self, operator):
        _condition.validate_python(
            {"field": "company_size", "operator": operator, "value": 10}
        )
        _condition.validate_python(
            {"field": "last_seen", "operator": operator, "value": "2024-12-31"}
        )

    def test_unknown_operator_rejected(self):
        with pytest.raises(ValidationError):
            _condition.validate_python(
                {"field": "company_size", "operator": ">=", "value": 10}
            )


class TestConditionValues:
    def test_industry_value_on_device_field_rejected(self):
        with pytest.raises(ValidationError, match="not a valid contact_device"):
            _condition.validate_python(
                {"field": "contact_device", "operator": "=", "value": "ACCOUNTING"}
            )

    def test_device_value_on_industry_field_rejected(self):
        with pytest.raises(ValidationError, match="not a valid company_industry"):
            _condition.validate_python(
                {"field": "company_industry", "operator": "=", "value": "PC"}
            )

    def test_invalid_date_value_rejected(self):
        with pytest.raises(ValidationError, match="valid ISO date"):
            _condition.validate_python(
                {"field": "first_seen", "operator": ">", "value": "yesterday"}
            )

    def test_number_value_must_be_numeric(self):
        with pytest.raises(ValidationError):
            _condition.validate_python(
                {"field": "company_size", "operator": ">", "value": "100"}
            )

    def test_country_value_must_be_two_letters(self):
        with pytest.raises(ValidationError):
            _condition.validate_python(
                {"field": "contact_country", "operator": "=", "value": "USA"}
            )


class TestContactInfo:
    def test_all_fields_optional(self):
        contact = ContactInfo()
        assert contact.model_dump(exclude_none=True) == {}

    def test_negative_company_size_rejected(self):
        with pytest.raises(ValidationError, match="positive number"):
            ContactInfo(company_size=-1)

    def test_zero_company_size_allowed(self):
        assert ContactInfo(company_size=0).company_size == 0

    def test_invalid_seen_date_rejected(self):
        with pytest.raises(ValidationError, match="Last seen must be a valid ISO date"):
            ContactInfo(last_seen="31/12/2024")

    def test_first_seen_after_last_seen_rejected(self):
        with pytest.raises(ValidationError, match="before or equal"):
            ContactInfo(first_seen="2024-09-01", last_seen="2024-08-01")

    def test_first_seen_equal_to_last_seen_allowed(self):
        contact = ContactInfo(first_seen="2024-08-01", last_seen="2024-08-01")
        assert contact.first_seen == contact.last_seen

    def test_unknown_industry_rejected(self):
        with pytest.raises(ValidationError):
            ContactInfo(company_industry="SPACE_MINING")


class TestRoutingRulesRequests:
    def test_create_requires_default_member(self):
        with pytest.raises(ValidationError):
            RoutingRulesCreate(name="Rules", rules=[])

    def test_create_accepts_rule_without_conditions(self):
        request = RoutingRulesCreate(
            name="Rules",
            default_member_id=1,
            rules=[{"name": "Everyone", "member_id": 2, "priority": 0}],
        )
        assert request.rules[0].conditions == []

    def test_update_requires_at_least_one_field(self):
        with pytest.raises(ValidationError, match="Update data is required"):
            RoutingRulesUpdate()

    def test_update_with_only_name(self):
        assert RoutingRulesUpdate(name="Renamed").rules is None


class TestMemberUpdate:
    @pytest.mark.parametrize("field", ["name", "is_active"])
    def test_explicit_null_rejected_for_required_columns(self, field):
        with pytest.raises(ValidationError, match=f"{field} cannot be null"):
            MemberUpdate.model_validate({field: None})

    def test_email_may_be_cleared(self):
        update = MemberUpdate.model_validate({"email": None})
        assert update.model_dump(exclude_unset=True) == {"email": None}

    def test_empty_update_rejected(self):
        with pytest.raises(ValidationError, match="Update data is required"):
            MemberUpdate()
