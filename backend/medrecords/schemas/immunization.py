from datetime import date
from typing import Optional

from pydantic import Field

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate
from medrecords.schemas.enums import AdministrationSite


class ImmunizationBase(RecordCreate):
    vaccine_name: str
    vaccine_type: Optional[str] = None
    administration_date: date
    administered_by: str
    manufacturer: Optional[str] = None
    lot_number: Optional[str] = None
    expiration_date: Optional[date] = None
    dose_number: int = Field(default=1, ge=1, le=10)
    administration_site: AdministrationSite = AdministrationSite.LEFT_ARM
    adverse_reactions: Optional[str] = None
    next_dose_due: Optional[date] = None
    notes: Optional[str] = None


class ImmunizationCreate(ImmunizationBase, ChildCreate):
    pass


class ImmunizationResponse(ImmunizationBase, ChildResponse):
    pass
