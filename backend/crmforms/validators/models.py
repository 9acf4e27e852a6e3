"""Validation models: field rules, rule sets, error maps, and uploaded files.

A Rule is declarative and immutable. Malformed rules are rejected when they are
constructed, not when a form is validated.
"""

import re
from typing import Callable, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Custom predicates map a field value to an error message, or None when valid
CustomCheck = Callable[[str], Optional[str]]


class Rule(BaseModel):
    """Constraints for a single form field.

    Every member is optional. A rule with nothing set accepts any value.
    """

    model_config = ConfigDict(frozen=True)

    required: bool = False
    min_length: Optional[int] = Field(default=None, ge=0)
    max_length: Optional[int] = Field(default=None, ge=0)
    pattern: Optional[re.Pattern] = None
    custom: Optional[CustomCheck] = None

    @model_validator(mode="after")
    def _check_length_bounds(self) -> "Rule":
        if self.min_length and self.max_length and self.min_length > self.max_length:
            raise ValueError(
                f"min_length ({self.min_length}) cannot exceed max_length ({self.max_length})"
            )
        return self


# Field name -> Rule for an entire form
RuleSet = Mapping[str, Rule]

# Field name -> current value as typed by the user
FormData = Mapping[str, Optional[str]]

# Field name -> error message. Valid fields are absent.
ErrorMap = dict[str, str]


class UploadedFile(BaseModel):
    """The parts of an uploaded file the upload checks look at."""

    name: str = ""
    size: int = Field(ge=0, description="Size in bytes")
    content_type: str = Field(default="", description="Declared media type, e.g. image/png")
