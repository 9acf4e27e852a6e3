"""Checks API: standalone validators that span more than one field."""

from fastapi import APIRouter

from crmforms.config import get_settings
from crmforms.models.requests import (
    AgeCheckRequest,
    PasswordConfirmationRequest,
    UploadCheckRequest,
)
from crmforms.models.responses import CheckResponse, UploadCheckResponse
from crmforms.validators import (
    validate_age,
    validate_file_size,
    validate_file_type,
    validate_password_confirmation,
)

router = APIRouter(prefix="/checks")


@router.post("/password-confirmation", response_model=CheckResponse)
async def check_password_confirmation(request: PasswordConfirmationRequest):
    error = validate_password_confirmation(request.password, request.confirm_password)
    return CheckResponse(check="password_confirmation", valid=error is None, error=error)


@router.post("/age", response_model=CheckResponse)
async def check_age(request: AgeCheckRequest):
    error = validate_age(request.birth_date)
    return CheckResponse(check="age", valid=error is None, error=error)


@router.post("/upload", response_model=UploadCheckResponse)
async def check_upload(request: UploadCheckRequest):
    """Check an upload's size against the ceiling and its type against the allow list."""
    settings = get_settings()
    max_size_mb = request.max_size_mb or settings.MAX_UPLOAD_SIZE_MB

    errors = {}
    size_error = validate_file_size(request.file, max_size_mb)
    if size_error:
        errors["size"] = size_error
    type_error = validate_file_type(request.file, settings.ALLOWED_UPLOAD_TYPES)
    if type_error:
        errors["content_type"] = type_error

    return UploadCheckResponse(valid=not errors, errors=errors)
