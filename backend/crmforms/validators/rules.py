"""Field and form validation against declarative rules.

Both functions are pure: no I/O, no logging, no state. The same inputs always
produce the same result, so they are safe to call on every keystroke.
"""

from typing import Optional

from crmforms.validators.models import ErrorMap, FormData, Rule, RuleSet

REQUIRED_MESSAGE = "This field is required"
INVALID_FORMAT_MESSAGE = "Invalid format"


def min_length_message(min_length: int) -> str:
    return f"Minimum length is {min_length} characters"


def max_length_message(max_length: int) -> str:
    return f"Maximum length is {max_length} characters"


def validate_field(value: Optional[str], rule: Rule) -> Optional[str]:
    """Check one value against one rule.

    Checks run in a fixed order: required, minimum length, maximum length,
    pattern, custom. The first failure among the built-in checks wins. The
    custom predicate runs last whenever it is reached and its result is
    returned as-is.

    Args:
        value: Current field value. None is treated as an empty string.
        rule: The field's constraints.

    Returns:
        An error message, or None if the value is valid.
    """
    value = value or ""
    blank = not value.strip()

    if rule.required and blank:
        return REQUIRED_MESSAGE

    # An empty optional field is always valid
    if blank:
        return None

    # Zero lengths are treated as unset
    if rule.min_length and len(value) < rule.min_length:
        return min_length_message(rule.min_length)

    if rule.max_length and len(value) > rule.max_length:
        return max_length_message(rule.max_length)

    if rule.pattern is not None and not rule.pattern.search(value):
        return INVALID_FORMAT_MESSAGE

    if rule.custom is not None:
        return rule.custom(value)

    return None


def validate_form(form_data: FormData, rule_set: RuleSet) -> ErrorMap:
    """Validate every field named in the rule set.

    Fields missing from ``form_data`` are validated as empty strings. Fields in
    ``form_data`` with no rule are ignored.

    Returns:
        Mapping of field name to error message, containing invalid fields only.
    """
    errors: ErrorMap = {}

    for field_name, rule in rule_set.items():
        error = validate_field(form_data.get(field_name) or "", rule)
        if error:
            errors[field_name] = error

    return errors
