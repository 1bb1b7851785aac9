"""
Information endpoint for API v1.

Returns the project name and version from settings.  Clients and
load balancers can use it to check that the service is up.
"""

from typing import Dict

from fastapi import APIRouter

from customer_manager_api.app.core.config import settings

router = APIRouter()


@router.get("/", response_model=Dict[str, str])
def get_info() -> Dict[str, str]:
    return {"name": settings.project_name, "version": settings.api_version}
