"""
Obligation, alert and document schemas.
"""
from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Jurisdiction(str, Enum):
    FEDERAL = "federal"
    STATE = "state"
    LOCAL = "local"


class ObligationStatus(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class AlertType(str, Enum):
    NEW = "new"
    UPDATE = "update"
    DEADLINE = "deadline"


# ---------------------------------------------------------------------------
# Obligations
# ---------------------------------------------------------------------------

class ObligationCreate(BaseModel):
    """Writable subset of an obligation, as submitted by the add form."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=500)
    type: Jurisdiction
    category: str = Field(..., min_length=1, max_length=100)
    due_date: date
    frequency: Optional[str] = Field(None, description="Annual|Quarterly|Monthly|One-time")
    status: ObligationStatus = ObligationStatus.PENDING
    description: Optional[str] = None

    @field_validator("frequency", "description", mode="before")
    @classmethod
    def _blank_to_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class ObligationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    type: Jurisdiction
    category: str
    due_date: date
    frequency: Optional[str] = None
    status: ObligationStatus
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime
    effective_bucket: Optional[str] = Field(
        None, description="completed|overdue|upcoming|pending|unclassified, computed at read time"
    )


class StatusUpdate(BaseModel):
    id: str = Field(..., min_length=1)
    status: ObligationStatus


# ---------------------------------------------------------------------------
# Alerts
# ---------------------------------------------------------------------------

class AlertCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    type: AlertType
    source: Optional[str] = None


class AlertResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    description: Optional[str] = None
    type: AlertType
    source: Optional[str] = None
    created_at: datetime


# ---------------------------------------------------------------------------
# Documents
# ---------------------------------------------------------------------------

class DocumentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    file_path: str
    file_size: Optional[int] = None
    mime_type: Optional[str] = None
    compliance_item_id: Optional[str] = None
    uploaded_at: datetime
