"""Exceptions raised by the validation package.

Validation failures are never exceptions; they are messages in an error map.
These cover caller mistakes only.
"""


class UnknownFormError(LookupError):
    """Raised when a form name is not in the form catalog."""

    def __init__(self, form_name: str, known: list[str] | None = None):
        self.form_name = form_name
        self.known = sorted(known or [])
        message = f"Unknown form '{form_name}'"
        if self.known:
            message += f". Known forms: {', '.join(self.known)}"
        super().__init__(message)
