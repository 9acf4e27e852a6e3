"""API response models."""

from pydantic import BaseModel
from typing import Optional, Literal


class FormSummary(BaseModel):
    """A form in the catalog and the fields it validates."""

    name: str
    fields: list[str]
    required_fields: list[str]


class FormValidationResponse(BaseModel):
    """Result of validating a whole form."""

    form: str
    valid: bool
    errors: dict[str, str] = {}


class FieldValidationResponse(BaseModel):
    """Result of validating a single field."""

    form: str
    field: str
    error: Optional[str] = None


class CheckResponse(BaseModel):
    """Result of a standalone check."""

    check: str
    valid: bool
    error: Optional[str] = None


class UploadCheckResponse(BaseModel):
    """Result of the upload size and type checks."""

    valid: bool
    errors: dict[str, str] = {}


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str = "1.0.0"
    uptime_seconds: float
    forms_loaded: int
