from datetime import date
from typing import Optional

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate


class PrescriptionBase(RecordCreate):
    medication_name: str
    dosage: str
    frequency: str
    duration: Optional[str] = None
    prescribed_date: date
    # Reserved: no workflow links a prescription to a visit yet
    medical_record_id: Optional[str] = None


class PrescriptionCreate(PrescriptionBase, ChildCreate):
    pass


class PrescriptionResponse(PrescriptionBase, ChildResponse):
    pass
