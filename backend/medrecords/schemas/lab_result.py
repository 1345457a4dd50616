from datetime import date
from typing import Optional

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate
from medrecords.schemas.enums import LabCategory, LabStatus


class LabResultBase(RecordCreate):
    test_name: str
    test_category: LabCategory = LabCategory.GENERAL
    test_date: date
    ordered_by: str
    result_value: Optional[str] = None
    result_unit: Optional[str] = None
    reference_range: Optional[str] = None
    status: LabStatus = LabStatus.NORMAL
    lab_name: Optional[str] = None
    lab_reference_number: Optional[str] = None
    notes: Optional[str] = None


class LabResultCreate(LabResultBase, ChildCreate):
    pass


class LabResultResponse(LabResultBase, ChildResponse):
    pass
