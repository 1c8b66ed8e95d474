"""
Document library model. Rows are listed only; there is no upload path yet.
"""
from sqlalchemy import BigInteger, Column, DateTime, ForeignKey, String

from compliance.database import Base, utcnow


class DocumentModel(Base):
    __tablename__ = "documents"

    id = Column(String, primary_key=True)
    name = Column(String(500), nullable=False)
    file_path = Column(String(1000), nullable=False)
    file_size = Column(BigInteger)
    mime_type = Column(String(100))
    compliance_item_id = Column(String, ForeignKey("compliance_items.id"))
    uploaded_at = Column(DateTime, default=utcnow, nullable=False)
