"""
POST /api/setup — create tables and reload the demo dataset.

Destructive: existing rows are deleted first. Requires a session.
"""
from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from compliance.auth import require_api_session
from compliance.database import get_db
from compliance.dependencies import get_classifier
from compliance.pipeline.due_dates import DueDateClassifier
from compliance.pipeline.seed import initialize_schema, reseed

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/setup", dependencies=[Depends(require_api_session)])
def setup(
    db: Session = Depends(get_db),
    classifier: DueDateClassifier = Depends(get_classifier),
):
    try:
        initialize_schema(db)
        counts = reseed(db, classifier.anniversary_due_date())
    except SQLAlchemyError:
        db.rollback()
        logger.exception("Setup failed")
        raise HTTPException(status_code=500, detail="Failed to initialize database")

    return {
        "success": True,
        "message": "Database initialized and seeded successfully",
        **counts,
    }
