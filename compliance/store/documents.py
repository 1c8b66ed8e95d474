"""
Read-only document listing.
"""
from __future__ import annotations

import logging
from typing import List

from sqlalchemy.orm import Session

from compliance.database import Base
from compliance.models.document import DocumentModel

logger = logging.getLogger(__name__)


class DocumentStore:
    def __init__(self, db: Session):
        self.db = db

    def initialize_schema(self) -> None:
        Base.metadata.create_all(bind=self.db.get_bind(), tables=[DocumentModel.__table__])

    def list_all(self) -> List[DocumentModel]:
        return self.db.query(DocumentModel).order_by(DocumentModel.uploaded_at.desc()).all()

    def clear_all(self) -> int:
        count = self.db.query(DocumentModel).delete(synchronize_session=False)
        self.db.commit()
        logger.warning("Cleared %d documents", count)
        return count
