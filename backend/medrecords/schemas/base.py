from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class RecordCreate(BaseModel):
    """Base for every payload sent to the store.

    Blank form values arrive as empty strings; they are stored as null, never
    as zero or an empty string, and optional fields are always serialized.
    """

    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True, validate_default=True)

    @field_validator("*", mode="before")
    @classmethod
    def blank_to_none(cls, value: Any) -> Any:
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ChildCreate(RecordCreate):
    patient_id: str


class ChildResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True, use_enum_values=True)

    id: str
    patient_id: str
    created_at: Optional[datetime] = None
