"""Shared Pydantic schemas for common API elements."""
from __future__ import annotations

from pydantic import BaseModel, Field


class StatusResponse(BaseModel):
    """Acknowledgement for mutations that return no resource."""

    status: str = Field(..., description="Outcome of the request")


class CountResponse(BaseModel):
    """Number of rows affected by a bulk mutation."""

    updated: int
