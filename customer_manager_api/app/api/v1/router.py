"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
prefix.  When new endpoints are added, update this file to include
their routers.
"""

from fastapi import APIRouter

from .endpoints import customers, info

router = APIRouter()

router.include_router(customers.router, prefix="/customer", tags=["customer"])
router.include_router(info.router, prefix="/info", tags=["info"])
