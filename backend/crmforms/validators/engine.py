"""Form Validation Engine: validates catalog forms by name and logs each run.

The rule evaluation itself lives in ``rules.py`` and stays pure. This layer adds
form lookup and observability for server-side callers.

Usage:
    from crmforms.validators import form_validation_engine

    errors = form_validation_engine.validate("login", {"username": "", "password": "x"})
    if errors:
        # Show errors[field] under each input
"""

import time
from typing import Mapping, Optional

import structlog

from crmforms.validators.forms import FORM_MESSAGES, FORM_RULES
from crmforms.validators.errors import UnknownFormError
from crmforms.validators.models import ErrorMap, FormData, RuleSet
from crmforms.validators.rules import validate_field, validate_form

logger = structlog.get_logger()


class FormValidationEngine:
    """Runs the rule set of a named form against submitted data.

    Holds only a read-only reference to the form catalog, so one instance can
    be shared freely.
    """

    def __init__(
        self,
        forms: Optional[Mapping[str, RuleSet]] = None,
        messages: Optional[Mapping[str, Mapping[str, Mapping[str, str]]]] = None,
    ):
        """Initialize with the default form catalog or a custom one.

        Args:
            forms: Optional mapping of form name to rule set. If None, uses
                the dashboard's form catalog.
            messages: Optional per-form, per-field rewording of the generic
                messages. Defaults to the dashboard's wording when the default
                catalog is used, and to no rewording otherwise.
        """
        if messages is None:
            messages = FORM_MESSAGES if forms is None else {}
        self.forms = forms if forms is not None else FORM_RULES
        self.messages = messages

    def form_names(self) -> list[str]:
        return sorted(self.forms)

    def rules_for(self, form_name: str) -> RuleSet:
        try:
            return self.forms[form_name]
        except KeyError:
            raise UnknownFormError(form_name, list(self.forms)) from None

    def validate(self, form_name: str, data: FormData) -> ErrorMap:
        """Validate submitted data against a form's rule set.

        Args:
            form_name: Catalog name, e.g. "login" or "add_member"
            data: Field name to submitted value

        Returns:
            Error map with invalid fields only

        Raises:
            UnknownFormError: If the form is not in the catalog
        """
        rule_set = self.rules_for(form_name)

        start_time = time.perf_counter()
        errors = {
            field_name: self._reword(form_name, field_name, message)
            for field_name, message in validate_form(data, rule_set).items()
        }
        duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "form_validated",
            form=form_name,
            valid=not errors,
            error_count=len(errors),
            invalid_fields=sorted(errors),
            ignored_fields=sorted(set(data) - set(rule_set)),
            duration_ms=round(duration, 3),
        )

        return errors

    def is_valid(self, form_name: str, data: FormData) -> bool:
        return not self.validate(form_name, data)

    def validate_field(self, form_name: str, field_name: str, value: Optional[str]) -> Optional[str]:
        """Validate a single field of a form, e.g. on each keystroke.

        Fields the form has no rule for are never validated.
        """
        rule = self.rules_for(form_name).get(field_name)
        if rule is None:
            return None
        error = validate_field(value, rule)
        if error is None:
            return None
        return self._reword(form_name, field_name, error)

    def _reword(self, form_name: str, field_name: str, message: str) -> str:
        """Swap a generic message for the form's own wording, if it has one."""
        return self.messages.get(form_name, {}).get(field_name, {}).get(message, message)


# Module-level instance
form_validation_engine = FormValidationEngine()
