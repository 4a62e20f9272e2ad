"""
Incident endpoints.

- ``GET /incidents`` returns the incident feed, newest first, with
  optional date, code, grid and neighborhood filters and a row cap.
- ``PUT /new-incident`` inserts one incident.
- ``DELETE /remove-incident`` removes one incident by case number.

Failures are answered with status 500 and a plain‑text message.
Business‑rule violations (duplicate or unknown case number) carry a
specific message; store faults carry a generic one.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import PlainTextResponse

from stpaul_crime_api.app.core.db import STORE_ERRORS, Database, get_db
from stpaul_crime_api.app.schemas.incident import IncidentCreate, IncidentKey, IncidentRead
from stpaul_crime_api.app.services.incident_service import IncidentService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "/incidents",
    response_model=List[IncidentRead],
    responses={500: {"description": "Error retrieving incidents", "content": {"text/plain": {}}}},
)
async def list_incidents(
    request: Request,
    start_date: Optional[str] = Query(None, description="Earliest date, `YYYY-MM-DD`"),
    end_date: Optional[str] = Query(None, description="Latest date, `YYYY-MM-DD`"),
    code: Optional[str] = Query(None, description="Comma list of incident codes"),
    grid: Optional[str] = Query(None, description="Comma list of police grids"),
    neighborhood: Optional[str] = Query(None, description="Comma list of neighborhood numbers"),
    limit: Optional[str] = Query(None, description="Maximum number of rows (default 1000)"),
    db: Database = Depends(get_db),
):
    """Return incidents ordered by timestamp, most recent first.

    - **start_date**, **end_date**: inclusive bounds on the incident date.
    - **code**, **grid**, **neighborhood**: comma lists of identifiers.
    - **limit**: row cap; a value that is not a non‑negative integer
      falls back to the default.
    """
    logger.info(
        "GET /incidents start_date=%s end_date=%s code=%s grid=%s neighborhood=%s limit=%s",
        start_date, end_date, code, grid, neighborhood, limit,
    )
    try:
        return await IncidentService.list_incidents(
            db,
            default_limit=request.app.state.settings.incident_limit,
            start_date=start_date,
            end_date=end_date,
            code=code,
            grid=grid,
            neighborhood=neighborhood,
            limit=limit,
        )
    except STORE_ERRORS:
        logger.exception("Error retrieving incidents")
        return PlainTextResponse("Error retrieving incidents", status_code=500)


@router.put("/new-incident", response_class=PlainTextResponse)
async def create_incident(incident: IncidentCreate, db: Database = Depends(get_db)):
    """Insert a new incident; the case number must not exist yet."""
    logger.info("PUT /new-incident %s", incident.model_dump(mode="json"))
    try:
        await IncidentService.create_incident(db, incident)
    except ValueError as e:
        logger.warning("Rejected incident %s: %s", incident.case_number, e)
        return PlainTextResponse(str(e), status_code=500)
    except STORE_ERRORS:
        logger.exception("Error inserting incident")
        return PlainTextResponse("Error inserting incident", status_code=500)
    return "OK"


@router.delete("/remove-incident", response_class=PlainTextResponse)
async def remove_incident(key: IncidentKey, db: Database = Depends(get_db)):
    """Delete the incident with the given case number."""
    logger.info("DELETE /remove-incident %s", key.model_dump())
    try:
        await IncidentService.delete_incident(db, key.case_number)
    except ValueError as e:
        logger.warning("Rejected removal of %s: %s", key.case_number, e)
        return PlainTextResponse(str(e), status_code=500)
    except STORE_ERRORS:
        logger.exception("Error deleting incident")
        return PlainTextResponse("Error deleting incident", status_code=500)
    return "OK"
