"""
Compliance obligation model.
"""
from sqlalchemy import CheckConstraint, Column, Date, DateTime, String, Text

from compliance.database import Base, utcnow


class ObligationModel(Base):
    """A recurring or one-off regulatory obligation"""
    __tablename__ = "compliance_items"
    __table_args__ = (
        CheckConstraint("type IN ('federal', 'state', 'local')", name="ck_compliance_items_type"),
        CheckConstraint("status IN ('pending', 'completed', 'overdue')", name="ck_compliance_items_status"),
    )

    id = Column(String, primary_key=True)
    name = Column(String(500), nullable=False)
    type = Column(String(20), nullable=False)  # federal, state, local
    category = Column(String(100), nullable=False)
    due_date = Column(Date, nullable=False, index=True)
    frequency = Column(String(50))  # Annual, Quarterly, Monthly, One-time

    # Stored status. Never recomputed from due_date; "overdue" is only ever written explicitly.
    status = Column(String(20), nullable=False, default="pending")
    description = Column(Text)

    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow, nullable=False)
