from sqlalchemy import Column, String, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from medrecords.database import Base, generate_uuid, utcnow


class Document(Base):
    __tablename__ = "documents"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    patient_id = Column(String(36), ForeignKey("patients.id"), index=True, nullable=False)
    document_name = Column(String(500), nullable=False)
    document_type = Column(String(50), nullable=False, default="general")
    file_url = Column(String(1000))
    ocr_text = Column(Text)
    uploaded_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
