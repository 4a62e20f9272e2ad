"""Neighborhood endpoints."""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from stpaul_crime_api.app.core.db import STORE_ERRORS, Database, get_db
from stpaul_crime_api.app.schemas.neighborhood import NeighborhoodRead
from stpaul_crime_api.app.services.neighborhood_service import NeighborhoodService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/neighborhoods",
    response_model=List[NeighborhoodRead],
    responses={500: {"description": "Error retrieving neighborhoods", "content": {"text/plain": {}}}},
)
async def list_neighborhoods(
    id: Optional[str] = Query(None, description="Comma list of neighborhood numbers"),
    db: Database = Depends(get_db),
):
    """Return neighborhoods ordered by number ascending."""
    logger.info("GET /neighborhoods id=%s", id)
    try:
        return await NeighborhoodService.list_neighborhoods(db, ids=id)
    except STORE_ERRORS:
        logger.exception("Error retrieving neighborhoods")
        return PlainTextResponse("Error retrieving neighborhoods", status_code=500)
