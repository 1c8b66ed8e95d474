"""
Page Routes - server-rendered HTML

Routes:
- /login        access-code form
- /             dashboard: summary cards, obligations, recent alerts
- /obligations  obligation list, add form, status toggle
- /documents    read-only document library
"""
from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from compliance.auth import AccessGate, get_access_gate, require_session
from compliance.database import get_db
from compliance.dependencies import get_classifier
from compliance.pipeline.due_dates import DueDateClassifier
from compliance.schemas import Jurisdiction, ObligationStatus
from compliance.store import AlertStore, DocumentStore, ObligationStore

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Pages"])

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

CATEGORIES = [
    "Tax Filing",
    "Corporate Filing",
    "Business License",
    "Payroll Tax",
    "Compliance",
    "Safety",
]
FREQUENCIES = ["One-time", "Annual", "Quarterly", "Monthly"]


@router.get("/login", response_class=HTMLResponse)
def login_page(request: Request, gate: AccessGate = Depends(get_access_gate)):
    if gate.is_authenticated(request):
        return RedirectResponse(url="/", status_code=303)
    return templates.TemplateResponse(request, "login.html", {})


@router.get("/", response_class=HTMLResponse, dependencies=[Depends(require_session)])
def dashboard(
    request: Request,
    db: Session = Depends(get_db),
    classifier: DueDateClassifier = Depends(get_classifier),
):
    obligations = ObligationStore(db).list_all()
    alerts = AlertStore(db).list_recent()
    buckets = classifier.summarize(obligations)
    logger.debug("Dashboard counts: %s", buckets.counts())
    return templates.TemplateResponse(
        request,
        "dashboard.html",
        {
            "obligations": obligations,
            "alerts": alerts,
            "counts": buckets.counts(),
            "anniversary_due_date": classifier.anniversary_due_date(),
        },
    )


@router.get("/obligations", response_class=HTMLResponse, dependencies=[Depends(require_session)])
def obligations_page(
    request: Request,
    db: Session = Depends(get_db),
    classifier: DueDateClassifier = Depends(get_classifier),
):
    obligations = ObligationStore(db).list_all()
    return templates.TemplateResponse(
        request,
        "obligations.html",
        {
            "obligations": obligations,
            "buckets": {ob.id: classifier.bucket_for(ob) for ob in obligations},
            "jurisdictions": [j.value for j in Jurisdiction],
            "categories": CATEGORIES,
            "frequencies": FREQUENCIES,
            "statuses": [ObligationStatus.PENDING.value, ObligationStatus.COMPLETED.value],
        },
    )


@router.get("/documents", response_class=HTMLResponse, dependencies=[Depends(require_session)])
def documents_page(request: Request, db: Session = Depends(get_db)):
    documents = DocumentStore(db).list_all()
    return templates.TemplateResponse(request, "documents.html", {"documents": documents})
