from sqlalchemy import Column, String, Date, DateTime, ForeignKey
from sqlalchemy.sql import func
from medrecords.database import Base, generate_uuid, utcnow


class Prescription(Base):
    __tablename__ = "prescriptions"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    patient_id = Column(String(36), ForeignKey("patients.id"), index=True, nullable=False)
    # Not a foreign key: reserved, nothing writes it yet
    medical_record_id = Column(String(36))
    medication_name = Column(String(200), nullable=False)
    dosage = Column(String(100), nullable=False)
    frequency = Column(String(100), nullable=False)
    duration = Column(String(100))
    prescribed_date = Column(Date, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
