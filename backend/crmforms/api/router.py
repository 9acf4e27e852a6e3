"""Main API router: combines all endpoint routers."""

from fastapi import APIRouter

from crmforms.api.checks import router as checks_router
from crmforms.api.forms import router as forms_router
from crmforms.api.health import router as health_router

api_router = APIRouter()

# Health check
api_router.include_router(health_router, tags=["Health"])

# Catalog forms
api_router.include_router(forms_router, tags=["Forms"])

# Cross-field and upload checks
api_router.include_router(checks_router, tags=["Checks"])
