"""Form catalog: the rule sets behind the dashboard's forms.

Keys are the field names the dashboard submits. Each rule set is read-only.
"""

import re
from types import MappingProxyType
from typing import Mapping

from crmforms.validators.errors import UnknownFormError
from crmforms.validators.models import Rule, RuleSet
from crmforms.validators.patterns import COMMON_RULES, VALIDATION_PATTERNS, check_mobile
from crmforms.validators.rules import INVALID_FORMAT_MESSAGE, REQUIRED_MESSAGE, min_length_message

REQUIRED = COMMON_RULES["required"]

# Team and customer forms accept anything shaped like x@y.z
LOOSE_EMAIL = Rule(required=True, pattern=re.compile(r"\S+@\S+\.\S+"))


def _rule_set(**rules: Rule) -> RuleSet:
    return MappingProxyType(dict(rules))


LOGIN_FORM = _rule_set(
    username=REQUIRED,
    password=Rule(required=True, min_length=6),
)

FORGOT_PASSWORD_FORM = _rule_set(
    email=COMMON_RULES["email"],
)

# ── Onboarding wizard ──

BASIC_INFO_FORM = _rule_set(
    first_name=REQUIRED,
    last_name=REQUIRED,
    email=COMMON_RULES["email"],
    # Optional: blank or whitespace-only input counts as not entered
    mobile=Rule(required=False, custom=check_mobile),
    password=Rule(required=True, min_length=8),
)

BUSINESS_DETAILS_FORM = _rule_set(
    business_name=REQUIRED,
    store_name=REQUIRED,
    city=REQUIRED,
    state=REQUIRED,
)

TEAM_INVITE_FORM = _rule_set(
    email=COMMON_RULES["email"],
)

# ── Team management ──

EDIT_MEMBER_FORM = _rule_set(
    email=LOOSE_EMAIL,
    first_name=REQUIRED,
    last_name=REQUIRED,
    role=REQUIRED,
    department=REQUIRED,
    position=REQUIRED,
)

ADD_MEMBER_FORM = _rule_set(
    username=Rule(required=True, min_length=3),
    password=Rule(required=True, min_length=8),
    store=Rule(required=True, pattern=VALIDATION_PATTERNS["numeric"]),
    **EDIT_MEMBER_FORM,
)

# ── Customers ──

ADD_CUSTOMER_FORM = _rule_set(
    name=REQUIRED,
    email=LOOSE_EMAIL,
    phone=REQUIRED,
)

FORM_RULES = MappingProxyType({
    "login": LOGIN_FORM,
    "forgot_password": FORGOT_PASSWORD_FORM,
    "basic_info": BASIC_INFO_FORM,
    "business_details": BUSINESS_DETAILS_FORM,
    "team_invite": TEAM_INVITE_FORM,
    "add_member": ADD_MEMBER_FORM,
    "edit_member": EDIT_MEMBER_FORM,
    "add_customer": ADD_CUSTOMER_FORM,
})


# ── Dashboard wording ──
# Form -> field -> generic engine message -> the message the form shows.
# Messages without an entry are shown unchanged.

EMAIL_INVALID = "Please enter a valid email address"


def _required(label: str) -> dict[str, str]:
    return {REQUIRED_MESSAGE: f"{label} is required"}


def _field_messages(**fields: dict[str, str]) -> Mapping[str, Mapping[str, str]]:
    return MappingProxyType({name: MappingProxyType(messages) for name, messages in fields.items()})


_MEMBER_MESSAGES = dict(
    email={**_required("Email"), INVALID_FORMAT_MESSAGE: "Email is invalid"},
    first_name=_required("First name"),
    last_name=_required("Last name"),
    role=_required("Role"),
    department=_required("Department"),
    position=_required("Position"),
)

FORM_MESSAGES = MappingProxyType({
    "login": _field_messages(
        username=_required("Username"),
        password={
            **_required("Password"),
            min_length_message(6): "Password must be at least 6 characters",
        },
    ),
    "forgot_password": _field_messages(
        email={**_required("Email"), INVALID_FORMAT_MESSAGE: EMAIL_INVALID},
    ),
    "basic_info": _field_messages(
        first_name=_required("First name"),
        last_name=_required("Last name"),
        email={**_required("Email"), INVALID_FORMAT_MESSAGE: EMAIL_INVALID},
        password={
            **_required("Password"),
            min_length_message(8): "Password must be at least 8 characters long",
        },
    ),
    "business_details": _field_messages(
        business_name=_required("Business name"),
        store_name=_required("Store name"),
        city={REQUIRED_MESSAGE: "Please select a city"},
        state={REQUIRED_MESSAGE: "Please select a state"},
    ),
    "team_invite": _field_messages(
        email={**_required("Email"), INVALID_FORMAT_MESSAGE: EMAIL_INVALID},
    ),
    "add_member": _field_messages(
        username={
            **_required("Username"),
            min_length_message(3): "Username must be at least 3 characters",
        },
        password={
            **_required("Password"),
            min_length_message(8): "Password must be at least 8 characters",
        },
        store={**_required("Store"), INVALID_FORMAT_MESSAGE: "Store is required"},
        **_MEMBER_MESSAGES,
    ),
    "edit_member": _field_messages(**_MEMBER_MESSAGES),
    "add_customer": _field_messages(
        name=_required("Customer name"),
        email={**_required("Email"), INVALID_FORMAT_MESSAGE: "Email is invalid"},
        phone=_required("Phone number"),
    ),
})


def get_form_rules(form_name: str) -> RuleSet:
    """Look up a form's rule set by name.

    Raises:
        UnknownFormError: If the form is not in the catalog.
    """
    try:
        return FORM_RULES[form_name]
    except KeyError:
        raise UnknownFormError(form_name, list(FORM_RULES)) from None
