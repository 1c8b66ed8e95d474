"""
Pydantic schemas shared by the stores, routers and templates.
"""
from compliance.schemas.obligation import (
    AlertCreate,
    AlertResponse,
    AlertType,
    DocumentResponse,
    Jurisdiction,
    ObligationCreate,
    ObligationResponse,
    ObligationStatus,
    StatusUpdate,
)
from compliance.schemas.dashboard import LoginRequest, SummaryResponse

__all__ = [
    "AlertCreate",
    "AlertResponse",
    "AlertType",
    "DocumentResponse",
    "Jurisdiction",
    "LoginRequest",
    "ObligationCreate",
    "ObligationResponse",
    "ObligationStatus",
    "StatusUpdate",
    "SummaryResponse",
]
