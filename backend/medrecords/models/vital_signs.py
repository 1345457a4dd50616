from sqlalchemy import Column, String, Date, Text, DateTime, Integer, Float, ForeignKey
from sqlalchemy.sql import func
from medrecords.database import Base, generate_uuid, utcnow


class VitalSigns(Base):
    __tablename__ = "vital_signs"

    id = Column(String(36), primary_key=True, default=generate_uuid)
    patient_id = Column(String(36), ForeignKey("patients.id"), index=True, nullable=False)
    recorded_date = Column(Date, nullable=False)
    recorded_by = Column(String(200), nullable=False)
    systolic_bp = Column(Integer)
    diastolic_bp = Column(Integer)
    heart_rate = Column(Integer)
    respiratory_rate = Column(Integer)
    temperature_celsius = Column(Float)
    oxygen_saturation = Column(Integer)
    blood_glucose = Column(Integer)
    height_cm = Column(Integer)
    weight_kg = Column(Float)
    bmi = Column(Float)
    notes = Column(Text)
    created_at = Column(DateTime(timezone=True), default=utcnow, server_default=func.now())
