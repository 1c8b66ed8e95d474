"""
Obligation form endpoints.

POST /api/obligations         — add an obligation (form-encoded)
POST /api/obligations/status  — set an obligation's stored status

Both redirect back to the obligation list on success. Anonymous callers are
redirected to the login page rather than refused with 401.
"""
from __future__ import annotations

import logging
from typing import Optional

from fastapi import APIRouter, Depends, Form, HTTPException
from fastapi.responses import RedirectResponse
from pydantic import ValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from compliance.auth import require_session
from compliance.database import get_db
from compliance.schemas import ObligationCreate, StatusUpdate
from compliance.store import ObligationNotFound, ObligationStore

logger = logging.getLogger(__name__)
router = APIRouter(dependencies=[Depends(require_session)])

OBLIGATIONS_PAGE = "/obligations"


def _validation_detail(exc: ValidationError) -> str:
    fields = sorted({str(err["loc"][0]) for err in exc.errors() if err.get("loc")})
    return "Invalid or missing fields: " + ", ".join(fields)


# ── POST /api/obligations ────────────────────────────────────────────────
@router.post("/obligations")
def add_obligation(
    name: Optional[str] = Form(None),
    type: Optional[str] = Form(None),
    category: Optional[str] = Form(None),
    due_date: Optional[str] = Form(None),
    frequency: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    description: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    fields = {
        "name": name,
        "type": type,
        "category": category,
        "due_date": due_date,
        "frequency": frequency,
        "description": description,
    }
    # The form may omit status; the schema then defaults it to pending.
    if status:
        fields["status"] = status

    try:
        req = ObligationCreate(**fields)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=_validation_detail(e))

    try:
        ObligationStore(db).add(req)
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error adding compliance item %r", req.name)
        raise HTTPException(status_code=500, detail="Failed to add compliance item")

    return RedirectResponse(url=OBLIGATIONS_PAGE, status_code=303)


# ── POST /api/obligations/status ─────────────────────────────────────────
@router.post("/obligations/status")
def update_obligation_status(
    id: Optional[str] = Form(None),
    status: Optional[str] = Form(None),
    db: Session = Depends(get_db),
):
    try:
        req = StatusUpdate(id=id, status=status)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=_validation_detail(e))

    try:
        ObligationStore(db).update_status(req.id, req.status)
    except ObligationNotFound:
        logger.warning("Status update for unknown obligation %s", req.id)
        raise HTTPException(status_code=404, detail="Obligation not found")
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Error updating compliance item %s", req.id)
        raise HTTPException(status_code=500, detail="Failed to update compliance item status")

    return RedirectResponse(url=OBLIGATIONS_PAGE, status_code=303)
