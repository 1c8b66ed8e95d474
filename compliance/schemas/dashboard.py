"""
Auth and dashboard summary schemas.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_code: Optional[str] = Field(None, alias="accessCode")


class SummaryResponse(BaseModel):
    """Dashboard counts. ``overdue`` is computed from due dates, not the stored status."""
    total: int
    completed: int
    pending: int
    overdue: int
    upcoming: int
    today: date
    anniversary_due_date: date
