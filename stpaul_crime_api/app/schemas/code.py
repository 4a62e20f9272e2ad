"""Pydantic schema for incident codes."""

from pydantic import BaseModel, Field


class CodeRead(BaseModel):
    """An incident code as returned by ``GET /codes``."""

    code: int = Field(..., examples=[110])
    type: str = Field(..., examples=["Murder, Non Negligent Manslaughter"])
