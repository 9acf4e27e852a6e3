"""Reusable regular expressions and preset rules for common field types.

Everything here is built once at import time and is read-only afterwards.
"""

import re
from types import MappingProxyType
from typing import Optional

from crmforms.validators.models import Rule

# [0-9] rather than \d, which matches any Unicode digit. \Z rather than $,
# which also matches before a trailing newline.
VALIDATION_PATTERNS = MappingProxyType({
    "email": re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+\Z"),
    "phone": re.compile(r"^[\+]?[1-9][0-9]{0,15}\Z"),
    "password": re.compile(r"^(?=.*[a-z])(?=.*[A-Z])(?=.*[0-9])(?=.*[@$!%*?&])[A-Za-z0-9@$!%*?&]"),
    "url": re.compile(r"^https?://.+"),
    "numeric": re.compile(r"^[0-9]+\Z"),
    "decimal": re.compile(r"^[0-9]+(\.[0-9]{1,2})?\Z"),
    "mobile": re.compile(r"^[0-9]{10}\Z"),
})

PASSWORD_MIN_LENGTH = 8

_LOWERCASE = re.compile(r"[a-z]")
_UPPERCASE = re.compile(r"[A-Z]")
_DIGIT = re.compile(r"[0-9]")


def check_email(value: str) -> Optional[str]:
    if not VALIDATION_PATTERNS["email"].search(value):
        return "Please enter a valid email address"
    return None


def check_password_strength(value: str) -> Optional[str]:
    """Require a minimum length plus lowercase, uppercase and digit characters."""
    if len(value) < PASSWORD_MIN_LENGTH:
        return f"Password must be at least {PASSWORD_MIN_LENGTH} characters long"
    if not _LOWERCASE.search(value):
        return "Password must contain at least one lowercase letter"
    if not _UPPERCASE.search(value):
        return "Password must contain at least one uppercase letter"
    if not _DIGIT.search(value):
        return "Password must contain at least one number"
    return None


def check_phone(value: str) -> Optional[str]:
    if not VALIDATION_PATTERNS["phone"].search(value):
        return "Please enter a valid phone number"
    return None


def check_mobile(value: str) -> Optional[str]:
    """Accept any formatting as long as exactly ten digits remain."""
    digits = re.sub(r"[^0-9]", "", value)
    if not VALIDATION_PATTERNS["mobile"].search(digits):
        return "Please enter a valid 10-digit mobile number"
    return None


# The custom checks repeat what the pattern and length checks already cover.
# Rule evaluation lets custom have the final word, so they are kept in step.
COMMON_RULES = MappingProxyType({
    "email": Rule(
        required=True,
        pattern=VALIDATION_PATTERNS["email"],
        custom=check_email,
    ),
    "password": Rule(
        required=True,
        min_length=PASSWORD_MIN_LENGTH,
        custom=check_password_strength,
    ),
    "phone": Rule(
        required=True,
        pattern=VALIDATION_PATTERNS["phone"],
        custom=check_phone,
    ),
    "required": Rule(required=True),
    "optional": Rule(required=False),
})
