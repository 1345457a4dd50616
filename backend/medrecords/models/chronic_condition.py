from sqlalchemy import Column, String, Date, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from medrecords.database import Base, generate_uuid, utcnow


class ChronicCondition(Base):
    __tablename__ = "chronic_conditions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    patient_id = Column(String(36), ForeignKey("patients.id"), index=True, nullable=False)
    condition_name = Column(String(200), nullable=False)
    icd_10_code = Column(String(10))
    diagnosed_date = Column(Date)
    diagnosed_by = Column(String(200))
    severity = Column(String(20), nullable=False, default="mild")
    status = Column(String(20), nullable=False, default="active")
    treatment_plan = Column(Text)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
    updated_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now(), onupdate=utcnow)
