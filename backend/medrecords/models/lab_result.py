from sqlalchemy import Column, String, Date, Text, DateTime, ForeignKey
from sqlalchemy.sql import func
from medrecords.database import Base, generate_uuid, utcnow


class LabResult(Base):
    __tablename__ = "lab_results"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    patient_id = Column(String(36), ForeignKey("patients.id"), index=True, nullable=False)
    test_name = Column(String(200), nullable=False)
    test_category = Column(String(50), nullable=False, default="general")
    test_date = Column(Date, nullable=False)
    ordered_by = Column(String(200), nullable=False)
    result_value = Column(String(100))
    result_unit = Column(String(50))
    reference_range = Column(String(100))
    status = Column(String(20), nullable=False, default="normal")
    lab_name = Column(String(200))
    lab_reference_number = Column(String(100))
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
