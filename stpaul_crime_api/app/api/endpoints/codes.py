"""
Incident code endpoints.

``GET /codes`` lists the incident codes, optionally restricted to a
comma‑separated ``code`` list.  Store failures are reported as a
plain‑text 500.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import PlainTextResponse

from stpaul_crime_api.app.core.db import STORE_ERRORS, Database, get_db
from stpaul_crime_api.app.schemas.code import CodeRead
from stpaul_crime_api.app.services.code_service import CodeService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/codes",
    response_model=List[CodeRead],
    responses={500: {"description": "Error retrieving codes", "content": {"text/plain": {}}}},
)
async def list_codes(
    code: Optional[str] = Query(None, description="Comma list of codes, e.g. `100,110`"),
    db: Database = Depends(get_db),
):
    """Return incident codes ordered by code ascending."""
    logger.info("GET /codes code=%s", code)
    try:
        return await CodeService.list_codes(db, code=code)
    except STORE_ERRORS:
        logger.exception("Error retrieving codes")
        return PlainTextResponse("Error retrieving codes", status_code=500)
