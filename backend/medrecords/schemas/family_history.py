from typing import Optional

from pydantic import Field

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate
from medrecords.schemas.enums import FamilyHistoryStatus, Relationship


class FamilyHistoryBase(RecordCreate):
    relationship: Relationship
    condition_name: str
    age_of_onset: Optional[int] = Field(default=None, ge=0, le=120)
    status: FamilyHistoryStatus = FamilyHistoryStatus.UNKNOWN
    notes: Optional[str] = None


class FamilyHistoryCreate(FamilyHistoryBase, ChildCreate):
    pass


class FamilyHistoryResponse(FamilyHistoryBase, ChildResponse):
    pass
