"""
Read-only JSON endpoints backing the dashboard.

GET /api/obligations  — all obligations, with their read-time bucket
GET /api/alerts       — most recent alerts
GET /api/documents    — document library
GET /api/summary      — dashboard counts
"""
from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from compliance.auth import require_api_session
from compliance.database import get_db
from compliance.dependencies import get_classifier
from compliance.pipeline.due_dates import DueDateClassifier
from compliance.schemas import (
    AlertResponse,
    DocumentResponse,
    ObligationResponse,
    SummaryResponse,
)
from compliance.store import AlertStore, DocumentStore, ObligationStore
from compliance.store.alerts import RECENT_ALERT_LIMIT

router = APIRouter(dependencies=[Depends(require_api_session)])


@router.get("/obligations", response_model=List[ObligationResponse])
def list_obligations(
    db: Session = Depends(get_db),
    classifier: DueDateClassifier = Depends(get_classifier),
):
    rows = ObligationStore(db).list_all()
    return [
        ObligationResponse.model_validate(row).model_copy(
            update={"effective_bucket": classifier.bucket_for(row)}
        )
        for row in rows
    ]


@router.get("/alerts", response_model=List[AlertResponse])
def list_alerts(
    limit: int = Query(RECENT_ALERT_LIMIT, ge=1, le=RECENT_ALERT_LIMIT),
    db: Session = Depends(get_db),
):
    return AlertStore(db).list_recent(limit)


@router.get("/documents", response_model=List[DocumentResponse])
def list_documents(db: Session = Depends(get_db)):
    return DocumentStore(db).list_all()


@router.get("/summary", response_model=SummaryResponse)
def summary(
    db: Session = Depends(get_db),
    classifier: DueDateClassifier = Depends(get_classifier),
):
    buckets = classifier.summarize(ObligationStore(db).list_all())
    return SummaryResponse(
        **buckets.counts(),
        today=classifier.today(),
        anniversary_due_date=classifier.anniversary_due_date(),
    )
