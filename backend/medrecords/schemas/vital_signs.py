from datetime import date
from typing import Optional

from pydantic import Field

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate


class VitalSignsBase(RecordCreate):
    recorded_date: date
    recorded_by: str
    systolic_bp: Optional[int] = Field(default=None, ge=60, le=250)
    diastolic_bp: Optional[int] = Field(default=None, ge=40, le=150)
    heart_rate: Optional[int] = Field(default=None, ge=30, le=200)
    respiratory_rate: Optional[int] = Field(default=None, ge=8, le=40)
    temperature_celsius: Optional[float] = Field(default=None, ge=30, le=45)
    oxygen_saturation: Optional[int] = Field(default=None, ge=70, le=100)
    blood_glucose: Optional[int] = Field(default=None, ge=50, le=500)
    height_cm: Optional[int] = Field(default=None, ge=50, le=250)
    weight_kg: Optional[float] = Field(default=None, ge=1, le=500)
    # Derived once when the reading is recorded
    bmi: Optional[float] = None
    notes: Optional[str] = None


class VitalSignsCreate(VitalSignsBase, ChildCreate):
    pass


class VitalSignsResponse(VitalSignsBase, ChildResponse):
    pass
