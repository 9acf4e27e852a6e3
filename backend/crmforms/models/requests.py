"""API request models."""

from datetime import date
from typing import Optional, Union

from pydantic import BaseModel, Field

from crmforms.validators.models import UploadedFile


class ValidateFormRequest(BaseModel):
    """Submitted values for a whole form."""

    data: dict[str, Optional[str]] = Field(
        default_factory=dict,
        description="Field name to current value",
        examples=[{"username": "asha.k", "password": "secret1"}],
    )


class ValidateFieldRequest(BaseModel):
    """Current value of a single field."""

    value: Optional[str] = ""


class PasswordConfirmationRequest(BaseModel):
    password: str
    confirm_password: str


class AgeCheckRequest(BaseModel):
    birth_date: Union[date, str] = Field(..., description="ISO 8601 birth date", examples=["1994-08-15"])


class UploadCheckRequest(BaseModel):
    """Metadata of a file the browser is about to upload."""

    file: UploadedFile
    max_size_mb: Optional[float] = Field(default=None, gt=0, description="Overrides the configured ceiling")
