"""Pydantic schema for neighborhoods."""

from pydantic import BaseModel, Field


class NeighborhoodRead(BaseModel):
    """A neighborhood as returned by ``GET /neighborhoods``."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Conway/Battlecreek/Highwood"])
