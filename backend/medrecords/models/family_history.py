from sqlalchemy import Column, String, Text, DateTime, Integer, ForeignKey
from sqlalchemy.sql import func
from medrecords.database import Base, generate_uuid, utcnow


class FamilyHistory(Base):
    __tablename__ = "family_history"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    patient_id = Column(String(36), ForeignKey("patients.id"), index=True, nullable=False)
    relationship = Column(String(50), nullable=False)
    condition_name = Column(String(200), nullable=False)
    age_of_onset = Column(Integer)
    status = Column(String(20), nullable=False, default="unknown")
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
