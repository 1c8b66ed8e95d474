"""
Obligation store.

Status is a plain stored field: nothing here recomputes "overdue" when a due
date passes. Callers that want the date-derived view go through
``compliance.pipeline.due_dates``.
"""
from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from compliance.database import Base, utcnow
from compliance.models.obligation import ObligationModel
from compliance.schemas import ObligationCreate, ObligationStatus

logger = logging.getLogger(__name__)


class ObligationNotFound(LookupError):
    """Raised when an obligation id does not exist."""

    def __init__(self, obligation_id: str):
        super().__init__(f"Obligation not found: {obligation_id}")
        self.obligation_id = obligation_id


class ObligationStore:
    def __init__(self, db: Session):
        self.db = db

    def initialize_schema(self) -> None:
        """Create the ``compliance_items`` table if it is missing. Safe to repeat."""
        Base.metadata.create_all(bind=self.db.get_bind(), tables=[ObligationModel.__table__])

    def list_all(self) -> List[ObligationModel]:
        """Every obligation, soonest due first. No pagination."""
        return (
            self.db.query(ObligationModel)
            .order_by(ObligationModel.due_date.asc(), ObligationModel.name.asc())
            .all()
        )

    def get(self, obligation_id: str) -> ObligationModel:
        row = self.db.query(ObligationModel).filter(ObligationModel.id == obligation_id).first()
        if not row:
            raise ObligationNotFound(obligation_id)
        return row

    def add(self, req: ObligationCreate) -> ObligationModel:
        """Insert an obligation with the caller's status (pending unless overridden)."""
        now = utcnow()
        row = ObligationModel(
            id=str(uuid.uuid4()),
            name=req.name,
            type=req.type.value,
            category=req.category,
            due_date=req.due_date,
            frequency=req.frequency,
            status=req.status.value,
            description=req.description,
            created_at=now,
            updated_at=now,
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        logger.info("Added obligation %s (%s, due %s)", row.id, row.name, row.due_date)
        return row

    def update_status(self, obligation_id: str, status: ObligationStatus) -> ObligationModel:
        """Set the stored status and bump ``updated_at``. Last write wins."""
        row = self.get(obligation_id)
        row.status = ObligationStatus(status).value
        row.updated_at = utcnow()
        self.db.commit()
        self.db.refresh(row)
        logger.info("Obligation %s status -> %s", obligation_id, row.status)
        return row

    def clear_all(self) -> int:
        """Delete every obligation. Only the reseed flow calls this."""
        count = self.db.query(ObligationModel).delete(synchronize_session=False)
        self.db.commit()
        logger.warning("Cleared %d obligations", count)
        return count
