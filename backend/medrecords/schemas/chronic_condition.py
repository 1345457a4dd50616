from datetime import date
from typing import Optional

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate
from medrecords.schemas.enums import ConditionStatus, Severity


class ChronicConditionBase(RecordCreate):
    condition_name: str
    icd_10_code: Optional[str] = None
    diagnosed_date: Optional[date] = None
    diagnosed_by: Optional[str] = None
    severity: Severity = Severity.MILD
    status: ConditionStatus = ConditionStatus.ACTIVE
    treatment_plan: Optional[str] = None
    notes: Optional[str] = None


class ChronicConditionCreate(ChronicConditionBase, ChildCreate):
    pass


class ChronicConditionResponse(ChronicConditionBase, ChildResponse):
    pass
