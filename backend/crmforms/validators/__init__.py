"""Form Validator: declarative field and form validation for the CRM dashboard.

Usage:
    from crmforms.validators import COMMON_RULES, validate_form

    errors = validate_form({"email": "nope"}, {"email": COMMON_RULES["email"]})
    # {"email": "Invalid format"}
"""

from crmforms.validators.checks import (
    validate_age,
    validate_file_size,
    validate_file_type,
    validate_password_confirmation,
)
from crmforms.validators.engine import FormValidationEngine, form_validation_engine
from crmforms.validators.errors import UnknownFormError
from crmforms.validators.forms import FORM_RULES, get_form_rules
from crmforms.validators.models import ErrorMap, FormData, Rule, RuleSet, UploadedFile
from crmforms.validators.patterns import COMMON_RULES, VALIDATION_PATTERNS
from crmforms.validators.rules import validate_field, validate_form

__all__ = [
    "Rule",
    "RuleSet",
    "FormData",
    "ErrorMap",
    "UploadedFile",
    "validate_field",
    "validate_form",
    "validate_password_confirmation",
    "validate_age",
    "validate_file_size",
    "validate_file_type",
    "VALIDATION_PATTERNS",
    "COMMON_RULES",
    "FORM_RULES",
    "get_form_rules",
    "FormValidationEngine",
    "form_validation_engine",
    "UnknownFormError",
]
