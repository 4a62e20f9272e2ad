"""
Pydantic models for crime incidents.

``IncidentRead`` is the shape of one row in ``GET /incidents``; the
store splits the combined timestamp into ``date`` and ``time``
strings.  ``IncidentCreate`` is the body of ``PUT /new-incident``,
whose ``date`` and ``time`` are recombined into one timestamp before
insertion.  ``IncidentKey`` carries only the case number and is the
body of ``DELETE /remove-incident``.
"""

import datetime as dt
from typing import Optional, Union

from pydantic import BaseModel, Field


class IncidentRead(BaseModel):
    case_number: Union[str, int] = Field(..., examples=["22076132"])
    date: Optional[str] = Field(None, examples=["2022-05-31"])
    time: Optional[str] = Field(None, examples=["14:05:00"])
    code: Optional[int] = Field(None, examples=[700])
    incident: Optional[str] = Field(None, examples=["Auto Theft"])
    police_grid: Optional[int] = Field(None, examples=[87])
    neighborhood_number: Optional[int] = Field(None, examples=[7])
    block: Optional[str] = Field(None, examples=["THOMAS AV  & VICTORIA"])


class IncidentCreate(BaseModel):
    """Schema for inserting a new incident."""

    case_number: Union[str, int] = Field(..., examples=["22076132"])
    date: dt.date = Field(..., examples=["2022-05-31"])
    time: dt.time = Field(..., examples=["14:05:00"])
    code: int = Field(..., examples=[700])
    incident: str = Field(..., examples=["Auto Theft"])
    police_grid: int = Field(..., examples=[87])
    neighborhood_number: int = Field(..., examples=[7])
    block: str = Field(..., examples=["THOMAS AV  & VICTORIA"])

    def date_time(self) -> str:
        """Return the combined ISO timestamp stored in ``date_time``."""
        return dt.datetime.combine(self.date, self.time).isoformat()


class IncidentKey(BaseModel):
    """Schema identifying an incident by case number."""

    case_number: Union[str, int] = Field(..., examples=["22076132"])
