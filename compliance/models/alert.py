"""
Alert feed model.
"""
from sqlalchemy import CheckConstraint, Column, DateTime, String, Text

from compliance.database import Base, utcnow


class AlertModel(Base):
    __tablename__ = "alerts"
    __table_args__ = (
        CheckConstraint("type IN ('new', 'update', 'deadline')", name="ck_alerts_type"),
    )

    id = Column(String, primary_key=True)
    title = Column(String(500), nullable=False)
    description = Column(Text)
    type = Column(String(20), nullable=False)  # new, update, deadline
    source = Column(String(200))  # issuing authority, e.g. IRS.gov
    created_at = Column(DateTime, default=utcnow, nullable=False, index=True)
