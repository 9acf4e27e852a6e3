"""Tests for the form catalog and the FormValidationEngine."""

import pytest
from structlog.testing import capture_logs

from crmforms.validators import (
    FORM_RULES,
    FormValidationEngine,
    Rule,
    UnknownFormError,
    form_validation_engine,
    get_form_rules,
)

VALID_MEMBER = {
    "username": "asha.k",
    "email": "asha@goldline.in",
    "password": "hallmark22",
    "first_name": "Asha",
    "last_name": "Kumar",
    "role": "inhouse_sales",
    "department": "Sales",
    "position": "Executive",
    "store": "3",
}


class TestCatalog:
    def test_known_forms(self):
        assert set(FORM_RULES) == {
            "login",
            "forgot_password",
            "basic_info",
            "business_details",
            "team_invite",
            "add_member",
            "edit_member",
            "add_customer",
        }

    def test_unknown_form(self):
        with pytest.raises(UnknownFormError) as exc_info:
            get_form_rules("checkout")
        assert exc_info.value.form_name == "checkout"
        assert "login" in str(exc_info.value)

    def test_unknown_form_is_lookup_error(self):
        with pytest.raises(LookupError):
            get_form_rules("checkout")

    def test_rule_sets_are_read_only(self):
        with pytest.raises(TypeError):
            FORM_RULES["login"]["username"] = Rule()

    def test_add_member_extends_edit_member(self):
        assert set(FORM_RULES["edit_member"]) < set(FORM_RULES["add_member"])


class TestCatalogForms:
    def test_login(self):
        errors = form_validation_engine.validate("login", {"username": "", "password": "abc"})
        assert errors == {
            "username": "Username is required",
            "password": "Password must be at least 6 characters",
        }

    def test_basic_info_mobile_is_optional(self):
        data = {
            "first_name": "Ravi",
            "last_name": "Menon",
            "email": "ravi@example.com",
            "password": "longenough",
        }
        assert form_validation_engine.validate("basic_info", data) == {}

    @pytest.mark.parametrize("mobile", ["98765 43210", "(987) 654-3210"])
    def test_basic_info_mobile_formatting_ignored(self, mobile):
        assert form_validation_engine.validate_field("basic_info", "mobile", mobile) is None

    def test_basic_info_bad_mobile(self):
        error = form_validation_engine.validate_field("basic_info", "mobile", "12345")
        assert error == "Please enter a valid 10-digit mobile number"

    def test_business_details_all_required(self):
        errors = form_validation_engine.validate("business_details", {"business_name": "Goldline"})
        assert set(errors) == {"store_name", "city", "state"}

    def test_add_member_valid(self):
        assert form_validation_engine.validate("add_member", VALID_MEMBER) == {}

    def test_add_member_store_must_be_numeric(self):
        data = {**VALID_MEMBER, "store": "main"}
        assert form_validation_engine.validate("add_member", data) == {"store": "Store is required"}

    def test_add_member_short_username(self):
        data = {**VALID_MEMBER, "username": "ak"}
        assert form_validation_engine.validate("add_member", data) == {
            "username": "Username must be at least 3 characters",
        }

    def test_edit_member_ignores_add_only_fields(self):
        data = {**VALID_MEMBER, "username": "", "password": "", "store": ""}
        assert form_validation_engine.validate("edit_member", data) == {}

    def test_add_customer(self):
        errors = form_validation_engine.validate(
            "add_customer", {"name": "Meera", "email": "meera-at-example", "phone": ""}
        )
        assert errors == {"email": "Email is invalid", "phone": "Phone number is required"}

    def test_team_invite_uses_email_preset(self):
        assert form_validation_engine.validate("team_invite", {"email": "x@y.z"}) == {}

    def test_forgot_password_bad_email_wording(self):
        errors = form_validation_engine.validate("forgot_password", {"email": "owner@goldline"})
        assert errors == {"email": "Please enter a valid email address"}

    def test_business_details_select_wording(self):
        errors = form_validation_engine.validate(
            "business_details", {"business_name": "Goldline", "store_name": "MG Road"}
        )
        assert errors == {"city": "Please select a city", "state": "Please select a state"}

    def test_basic_info_password_wording(self):
        error = form_validation_engine.validate_field("basic_info", "password", "short")
        assert error == "Password must be at least 8 characters long"

    @pytest.mark.parametrize("store", ["٣", "１２", "३"])
    def test_add_member_store_rejects_non_ascii_digits(self, store):
        assert form_validation_engine.validate_field("add_member", "store", store) == "Store is required"

    @pytest.mark.parametrize("mobile", ["٩" * 10, "९८७६५४३२१०", "98765٤٣٢١٠"])
    def test_basic_info_mobile_rejects_non_ascii_digits(self, mobile):
        error = form_validation_engine.validate_field("basic_info", "mobile", mobile)
        assert error == "Please enter a valid 10-digit mobile number"

    @pytest.mark.parametrize("mobile", ["", "   ", "\t"])
    def test_basic_info_blank_mobile_counts_as_not_entered(self, mobile):
        assert form_validation_engine.validate_field("basic_info", "mobile", mobile) is None


class TestEngine:
    def test_is_valid(self):
        assert form_validation_engine.is_valid("forgot_password", {"email": "a@b.co"})
        assert not form_validation_engine.is_valid("forgot_password", {"email": ""})

    def test_field_without_rule_never_validated(self):
        assert form_validation_engine.validate_field("login", "remember_me", "") is None

    def test_unknown_form(self):
        with pytest.raises(UnknownFormError):
            form_validation_engine.validate("checkout", {})
        with pytest.raises(UnknownFormError):
            form_validation_engine.validate_field("checkout", "email", "")

    def test_custom_catalog(self):
        engine = FormValidationEngine({"feedback": {"comment": Rule(required=True, max_length=10)}})
        assert engine.form_names() == ["feedback"]
        assert engine.validate("feedback", {"comment": "far too long here"}) == {
            "comment": "Maximum length is 10 characters",
        }

    def test_custom_catalog_with_wording(self):
        engine = FormValidationEngine(
            {"feedback": {"comment": Rule(required=True), "rating": Rule(pattern=r"^[1-5]\Z")}},
            messages={"feedback": {"comment": {"This field is required": "Tell us what you think"}}},
        )
        assert engine.validate("feedback", {"comment": " ", "rating": "9"}) == {
            "comment": "Tell us what you think",
            "rating": "Invalid format",
        }
        assert engine.validate_field("feedback", "comment", "") == "Tell us what you think"

    def test_empty_catalog_is_respected(self):
        engine = FormValidationEngine({})
        assert engine.form_names() == []

    def test_validation_is_logged(self):
        with capture_logs() as logs:
            form_validation_engine.validate("login", {"username": "", "password": "secret1", "extra": "x"})

        assert len(logs) == 1
        entry = logs[0]
        assert entry["event"] == "form_validated"
        assert entry["form"] == "login"
        assert entry["valid"] is False
        assert entry["error_count"] == 1
        assert entry["invalid_fields"] == ["username"]
        assert entry["ignored_fields"] == ["extra"]
