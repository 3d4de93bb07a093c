"""
Tests for validate()/check(): required, optional, permissive and strict
handling, nested shapes and union diagnostics.
"""
import pytest

from starling.adapters.services.account import AccountService
from starling.adapters.services.oauth import OAuthService, TOKEN_GRANT
from starling.core.errors import UnknownShapeError, ValidationError
from starling.core.validation import (
    MIN_API_PARAMETERS,
    check,
    interface,
    matching_alternative,
    validate,
)
from tests.conftest import ACCOUNT_UID, API_URL, TOKEN

BASE = {"api_url": API_URL, "access_token": TOKEN}


class TestRequiredAndOptional:
    def test_missing_required_field_is_named(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(AccountService.ACCOUNT, dict(BASE))
        err = exc_info.value
        assert err.fields == ["account_uid"]
        assert err.issues[0].code == "required"
        assert "account_uid is required" in err.message

    def test_none_counts_as_absent(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(AccountService.ACCOUNT, {**BASE, "account_uid": None})
        assert exc_info.value.issues[0].code == "required"

    def test_optional_field_may_be_omitted(self):
        validate(
            AccountService.STATEMENT_FOR_RANGE,
            {**BASE, "account_uid": ACCOUNT_UID, "start": "2024-01-01", "format": "text/csv", "response_type": "stream"},
        )

    def test_optional_field_is_still_checked_when_present(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(
                AccountService.STATEMENT_FOR_RANGE,
                {
                    **BASE,
                    "account_uid": ACCOUNT_UID,
                    "start": "2024-01-01",
                    "end": "tomorrow",
                    "format": "text/csv",
                    "response_type": "stream",
                },
            )
        assert exc_info.value.fields == ["end"]

    def test_wrong_type_names_expected_and_received(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(AccountService.ACCOUNT, {**BASE, "account_uid": "not-a-uuid"})
        issue = exc_info.value.issues[0]
        assert issue.code == "invalid"
        assert "UUID" in issue.expected
        assert issue.received == "str 'not-a-uuid'"

    def test_all_field_issues_are_reported(self):
        issues = check(AccountService.CONFIRMATION_OF_FUNDS, {"api_url": API_URL})
        assert [i.field for i in issues] == ["access_token", "account_uid", "target_amount_in_minor_units"]

    def test_secrets_are_redacted(self):
        issues = check(MIN_API_PARAMETERS, {"api_url": API_URL, "access_token": 12345})
        assert issues[0].received == "int (redacted)"
        assert "12345" not in issues[0].message

    def test_enum_violation(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(
                AccountService.STATEMENT_FOR_PERIOD,
                {
                    **BASE,
                    "account_uid": ACCOUNT_UID,
                    "year_month": "2024-01",
                    "format": "application/json",
                    "response_type": "stream",
                },
            )
        assert exc_info.value.fields == ["format"]


class TestUnknownFields:
    def test_permissive_by_default(self):
        validate(MIN_API_PARAMETERS, {**BASE, "client_secret": "s", "whatever": 1})

    def test_strict_mode_rejects_unknown_fields(self):
        with pytest.raises(ValidationError) as exc_info:
            validate(MIN_API_PARAMETERS, {**BASE, "whatever": 1}, strict=True)
        issue = exc_info.value.issues[0]
        assert issue.field == "whatever"
        assert issue.code == "unknown"


class TestNestedAndUnion:
    CODE_GRANT = {
        "code": "abc",
        "grant_type": "authorization_code",
        "client_id": "i",
        "client_secret": "s",
        "redirect_uri": "r",
    }

    def test_authorization_code_branch_passes(self):
        validate(OAuthService.OAUTH_TOKEN, {"api_url": API_URL, "parameters": self.CODE_GRANT})

    def test_refresh_branch_passes(self):
        validate(
            TOKEN_GRANT,
            {"refresh_token": "r", "grant_type": "refresh_token", "client_id": "i", "client_secret": "s"},
        )

    def test_code_with_refresh_grant_type_fails(self):
        data = {**self.CODE_GRANT, "grant_type": "refresh_token"}
        with pytest.raises(ValidationError) as exc_info:
            validate(OAuthService.OAUTH_TOKEN, {"api_url": API_URL, "parameters": data})
        # Closest alternative is the authorization_code branch (4 of 5 fields valid).
        assert exc_info.value.fields == ["parameters.grant_type"]

    def test_closest_alternative_for_refresh_input(self):
        data = {"grant_type": "refresh_token", "client_id": "i", "client_secret": "s"}
        issues = check(TOKEN_GRANT, data)
        assert [i.field for i in issues] == ["refresh_token"]

    def test_nested_value_must_be_mapping(self):
        issues = check(OAuthService.OAUTH_TOKEN, {"api_url": API_URL, "parameters": "code=abc"})
        assert issues[0].field == "parameters"
        assert issues[0].expected == "an object"

    def test_matching_alternative(self):
        branch = matching_alternative(TOKEN_GRANT, self.CODE_GRANT)
        assert branch is TOKEN_GRANT.alternatives[0]
        assert matching_alternative(TOKEN_GRANT, {}) is None


class TestContract:
    def test_validation_is_idempotent(self):
        data = {**BASE, "account_uid": "bad"}
        first = check(AccountService.ACCOUNT, data)
        second = check(AccountService.ACCOUNT, data)
        assert first == second
        assert data == {**BASE, "account_uid": "bad"}

    def test_non_mapping_input(self):
        issues = check(MIN_API_PARAMETERS, ["api_url"])
        assert issues[0].field == "$"

    def test_unknown_shape_is_a_programming_error(self):
        with pytest.raises(UnknownShapeError):
            validate({"api_url": "string"}, BASE)

    def test_validation_error_is_a_value_error(self):
        with pytest.raises(ValueError):
            validate(interface({"x": "number"}), {"x": "1"})
