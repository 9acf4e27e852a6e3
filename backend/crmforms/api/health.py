"""Health check endpoint."""

import time
from fastapi import APIRouter

from crmforms import __version__
from crmforms.models.responses import HealthResponse
from crmforms.validators import form_validation_engine

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health. Degraded if the form catalog is empty."""
    forms_loaded = len(form_validation_engine.form_names())

    return HealthResponse(
        status="healthy" if forms_loaded else "degraded",
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        forms_loaded=forms_loaded,
    )
