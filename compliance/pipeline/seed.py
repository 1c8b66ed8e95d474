"""
Demo dataset for a Nevada LLC: state and federal obligations plus a few alerts.

``reseed`` is destructive. It clears documents, alerts and obligations before
loading the fixed dataset.
"""
from __future__ import annotations

import logging
from datetime import date

from sqlalchemy.orm import Session

from compliance.schemas import AlertCreate, ObligationCreate
from compliance.store import AlertStore, DocumentStore, ObligationStore

logger = logging.getLogger(__name__)


def seed_obligations(anniversary: date) -> list[ObligationCreate]:
    """The 11 seeded obligations. The two Nevada annual filings track ``anniversary``."""
    items = [
        # Nevada state requirements
        {
            "name": "Nevada Annual List of Managers/Members",
            "type": "state",
            "category": "Corporate Filing",
            "due_date": anniversary,
            "frequency": "Annual",
            "description": "Required annual filing listing all managers and members of the LLC",
        },
        {
            "name": "Nevada State Business License Renewal",
            "type": "state",
            "category": "Business License",
            "due_date": anniversary,
            "frequency": "Annual",
            "description": "Annual renewal of Nevada state business license",
        },
        {
            "name": "Nevada Commerce Tax",
            "type": "state",
            "category": "Tax Filing",
            "due_date": date(2025, 5, 15),
            "frequency": "Annual",
            "description": "Due if annual gross revenue exceeds $4M",
        },
        {
            "name": "Nevada Unemployment Insurance Tax",
            "type": "state",
            "category": "Payroll Tax",
            "due_date": date(2025, 1, 31),
            "frequency": "Quarterly",
            "description": "Quarterly unemployment insurance tax filing (if employees)",
        },
        {
            "name": "Nevada Modified Business Tax",
            "type": "state",
            "category": "Payroll Tax",
            "due_date": date(2025, 1, 31),
            "frequency": "Quarterly",
            "description": "Quarterly MBT filing (if employees)",
        },
        # Federal requirements
        {
            "name": "Federal Income Tax Return (Form 1065)",
            "type": "federal",
            "category": "Tax Filing",
            "due_date": date(2025, 3, 15),
            "frequency": "Annual",
            "description": "Partnership tax return (if LLC elects partnership taxation)",
        },
        {
            "name": "Federal Income Tax Return (Form 1120)",
            "type": "federal",
            "category": "Tax Filing",
            "due_date": date(2025, 4, 15),
            "frequency": "Annual",
            "description": "Corporate tax return (if LLC elects corporate taxation)",
        },
        {
            "name": "Quarterly Federal Tax Return (Form 941)",
            "type": "federal",
            "category": "Payroll Tax",
            "due_date": date(2025, 1, 31),
            "frequency": "Quarterly",
            "description": "Quarterly payroll tax return (if employees)",
        },
        {
            "name": "Federal Unemployment Tax (Form 940)",
            "type": "federal",
            "category": "Payroll Tax",
            "due_date": date(2025, 1, 31),
            "frequency": "Annual",
            "description": "Annual federal unemployment tax return (if employees)",
        },
        {
            "name": "EEO Workplace Poster Update",
            "type": "federal",
            "category": "Compliance",
            "due_date": date(2025, 1, 31),
            "frequency": "Annual",
            "description": "Ensure current Equal Employment Opportunity posters are displayed",
        },
        {
            "name": "OSHA Annual Safety Training",
            "type": "federal",
            "category": "Safety",
            "due_date": date(2025, 6, 30),
            "frequency": "Annual",
            "description": "Annual safety training requirements for all employees",
        },
    ]
    return [ObligationCreate(status="pending", **item) for item in items]


SEED_ALERTS = [
    AlertCreate(
        title="IRS Form 941 Due Soon",
        description="Quarterly payroll tax return due January 31, 2025",
        type="deadline",
        source="IRS.gov",
    ),
    AlertCreate(
        title="Nevada Annual List Reminder",
        description="Annual List of Managers/Members due by end of anniversary month",
        type="deadline",
        source="Nevada SilverFlume",
    ),
    AlertCreate(
        title="OSHA Safety Poster Update",
        description="New workplace safety poster requirements effective 2025",
        type="update",
        source="OSHA.gov",
    ),
]


def initialize_schema(db: Session) -> None:
    """Create all three tables. Obligations go first since documents reference them."""
    ObligationStore(db).initialize_schema()
    DocumentStore(db).initialize_schema()
    AlertStore(db).initialize_schema()


def reseed(db: Session, anniversary: date) -> dict[str, int]:
    """Wipe every table and load the demo dataset."""
    obligations = ObligationStore(db)
    alerts = AlertStore(db)

    DocumentStore(db).clear_all()
    alerts.clear_all()
    obligations.clear_all()

    for item in seed_obligations(anniversary):
        obligations.add(item)
    for alert in SEED_ALERTS:
        alerts.add(alert)

    counts = {"obligations": len(obligations.list_all()), "alerts": len(SEED_ALERTS)}
    logger.info("Seeded %(obligations)d obligations and %(alerts)d alerts", counts)
    return counts
