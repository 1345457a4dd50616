from sqlalchemy import Column, String, Date, Text, DateTime, Integer, ForeignKey
from sqlalchemy.sql import func
from medrecords.database import Base, generate_uuid, utcnow


class Immunization(Base):
    __tablename__ = "immunizations"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    patient_id = Column(String(36), ForeignKey("patients.id"), index=True, nullable=False)
    vaccine_name = Column(String(200), nullable=False)
    vaccine_type = Column(String(100))
    administration_date = Column(Date, nullable=False)
    administered_by = Column(String(200), nullable=False)
    manufacturer = Column(String(200))
    lot_number = Column(String(100))
    expiration_date = Column(Date)
    dose_number = Column(Integer, nullable=False, default=1)
    administration_site = Column(String(50), nullable=False, default="left arm")
    adverse_reactions = Column(Text)
    next_dose_due = Column(Date)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
