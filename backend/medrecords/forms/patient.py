from typing import Optional

from pydantic import BaseModel

from medrecords.forms.base import FormWorkflow
from medrecords.schemas import PatientCreate, PatientResponse, PatientUpdate


class PatientForm(FormWorkflow):
    """Creates a patient, or edits one when constructed with ``patient``."""

    schema = PatientCreate
    excluded_fields = frozenset()

    def __init__(self, repository, patient: Optional[PatientResponse] = None, **kwargs):
        self.patient = patient
        super().__init__(repository, **kwargs)

    @property
    def title(self) -> str:
        return "Edit Patient" if self.patient else "Add New Patient"

    @property
    def is_edit(self) -> bool:
        return self.patient is not None

    def defaults(self) -> dict[str, str]:
        if self.patient is None:
            return {}
        current = self.patient.model_dump(mode="json", include=set(self.field_names()))
        return {name: "" if value is None else str(value) for name, value in current.items()}

    async def create(self, record: BaseModel) -> BaseModel:
        if self.patient is None:
            return await self.repository.create(record)
        changes = PatientUpdate.model_validate(record.model_dump())
        return await self.repository.update(self.patient.id, changes)
