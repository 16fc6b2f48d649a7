"""
Information endpoint for API v1.

Returns the project name, API version and the employee variant served
by this deployment so that clients can tell the two deployments apart.
"""

from typing import Any, Dict

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def get_info(request: Request) -> Dict[str, Any]:
    settings = request.app.state.settings
    return {
        "project_name": settings.project_name,
        "api_version": settings.api_version,
        "variant": settings.variant,
    }
