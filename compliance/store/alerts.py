"""
Alert store. Alerts are append-only; there is no update or delete by id.
"""
from __future__ import annotations

import logging
import uuid
from typing import List

from sqlalchemy.orm import Session

from compliance.database import Base, utcnow
from compliance.models.alert import AlertModel
from compliance.schemas import AlertCreate

logger = logging.getLogger(__name__)

RECENT_ALERT_LIMIT = 10


class AlertStore:
    def __init__(self, db: Session):
        self.db = db

    def initialize_schema(self) -> None:
        Base.metadata.create_all(bind=self.db.get_bind(), tables=[AlertModel.__table__])

    def list_recent(self, n: int = RECENT_ALERT_LIMIT) -> List[AlertModel]:
        """Newest ``n`` alerts, newest first."""
        if n <= 0:
            return []
        return (
            self.db.query(AlertModel)
            .order_by(AlertModel.created_at.desc())
            .limit(n)
            .all()
        )

    def add(self, req: AlertCreate) -> AlertModel:
        row = AlertModel(
            id=str(uuid.uuid4()),
            title=req.title,
            description=req.description,
            type=req.type.value,
            source=req.source,
            created_at=utcnow(),
        )
        self.db.add(row)
        self.db.commit()
        self.db.refresh(row)
        logger.info("Added alert %s (%s)", row.id, row.title)
        return row

    def clear_all(self) -> int:
        count = self.db.query(AlertModel).delete(synchronize_session=False)
        self.db.commit()
        logger.warning("Cleared %d alerts", count)
        return count
