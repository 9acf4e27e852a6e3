"""Forms API: list catalog forms and validate submitted values server-side."""

from fastapi import APIRouter, HTTPException

import structlog

from crmforms.models.requests import ValidateFieldRequest, ValidateFormRequest
from crmforms.models.responses import (
    FieldValidationResponse,
    FormSummary,
    FormValidationResponse,
)
from crmforms.validators import UnknownFormError, form_validation_engine

logger = structlog.get_logger()

router = APIRouter()


@router.get("/forms", response_model=list[FormSummary])
async def list_forms():
    """List every form in the catalog with its validated fields."""
    summaries = []
    for name in form_validation_engine.form_names():
        rules = form_validation_engine.rules_for(name)
        summaries.append(FormSummary(
            name=name,
            fields=list(rules),
            required_fields=[field for field, rule in rules.items() if rule.required],
        ))
    return summaries


@router.post("/forms/{form_name}/validate", response_model=FormValidationResponse)
async def validate_form(form_name: str, request: ValidateFormRequest):
    """Validate a full form submission. Returns errors for invalid fields only."""
    try:
        errors = form_validation_engine.validate(form_name, request.data)
    except UnknownFormError as e:
        logger.warning("unknown_form", form=form_name)
        raise HTTPException(status_code=404, detail=str(e))

    return FormValidationResponse(form=form_name, valid=not errors, errors=errors)


@router.post("/forms/{form_name}/fields/{field_name}/validate", response_model=FieldValidationResponse)
async def validate_field(form_name: str, field_name: str, request: ValidateFieldRequest):
    """Validate one field as the user types."""
    try:
        error = form_validation_engine.validate_field(form_name, field_name, request.value)
    except UnknownFormError as e:
        logger.warning("unknown_form", form=form_name)
        raise HTTPException(status_code=404, detail=str(e))

    return FieldValidationResponse(form=form_name, field=field_name, error=error)
