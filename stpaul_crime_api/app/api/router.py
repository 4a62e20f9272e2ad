"""
Top‑level API router.

Aggregates the resource routers.  When a new resource is added,
include its router here.
"""

from fastapi import APIRouter

from .endpoints import codes, incidents, neighborhoods

router = APIRouter()

router.include_router(codes.router, tags=["codes"])
router.include_router(neighborhoods.router, tags=["neighborhoods"])
router.include_router(incidents.router, tags=["incidents"])
