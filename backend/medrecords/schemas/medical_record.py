from datetime import date
from typing import Optional

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate


class MedicalRecordBase(RecordCreate):
    doctor_name: str
    visit_date: date
    diagnosis: Optional[str] = None
    symptoms: Optional[str] = None
    treatment: Optional[str] = None
    notes: Optional[str] = None


class MedicalRecordCreate(MedicalRecordBase, ChildCreate):
    pass


class MedicalRecordResponse(MedicalRecordBase, ChildResponse):
    pass
