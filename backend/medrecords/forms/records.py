from pydantic import BaseModel

from medrecords.forms.base import ChildRecordForm, today
from medrecords.schemas import (
    ChronicConditionCreate,
    FamilyHistoryCreate,
    ImmunizationCreate,
    LabResultCreate,
    MedicalRecordCreate,
    PrescriptionCreate,
    VitalSignsCreate,
)
from medrecords.schemas.enums import (
    AdministrationSite,
    ConditionStatus,
    FamilyHistoryStatus,
    LabCategory,
    LabStatus,
    Relationship,
    Severity,
)
from medrecords.schemas.options import COMMON_CONDITIONS, COMMON_FREQUENCIES, COMMON_TESTS, COMMON_VACCINES
from medrecords.services.calculations import calculate_bmi


class MedicalRecordForm(ChildRecordForm):
    schema = MedicalRecordCreate
    title = "Add Medical Record"

    def defaults(self) -> dict[str, str]:
        return {"visit_date": today()}


class PrescriptionForm(ChildRecordForm):
    schema = PrescriptionCreate
    title = "Add Prescription"
    excluded_fields = frozenset({"patient_id", "medical_record_id"})
    suggested_frequencies = COMMON_FREQUENCIES

    def defaults(self) -> dict[str, str]:
        return {"prescribed_date": today()}


class VitalSignsForm(ChildRecordForm):
    schema = VitalSignsCreate
    title = "Record Vital Signs"
    excluded_fields = frozenset({"patient_id", "bmi"})

    def defaults(self) -> dict[str, str]:
        return {"recorded_date": today()}

    async def before_create(self, record: BaseModel) -> BaseModel:
        # BMI is fixed at recording time; later edits never recompute it
        bmi = calculate_bmi(record.height_cm, record.weight_kg)
        return record.model_copy(update={"bmi": bmi})


class ChronicConditionForm(ChildRecordForm):
    schema = ChronicConditionCreate
    title = "Add Chronic Condition"
    severities = list(Severity)
    statuses = list(ConditionStatus)

    def defaults(self) -> dict[str, str]:
        return {"severity": Severity.MILD.value, "status": ConditionStatus.ACTIVE.value}


class LabResultForm(ChildRecordForm):
    schema = LabResultCreate
    title = "Add Lab Result"
    categories = list(LabCategory)
    statuses = list(LabStatus)
    suggested_tests = COMMON_TESTS

    def defaults(self) -> dict[str, str]:
        return {
            "test_category": LabCategory.GENERAL.value,
            "test_date": today(),
            "status": LabStatus.NORMAL.value,
        }


class ImmunizationForm(ChildRecordForm):
    schema = ImmunizationCreate
    title = "Add Immunization"
    sites = list(AdministrationSite)
    suggested_vaccines = COMMON_VACCINES

    def defaults(self) -> dict[str, str]:
        return {
            "administration_date": today(),
            "dose_number": "1",
            "administration_site": AdministrationSite.LEFT_ARM.value,
        }


class FamilyHistoryForm(ChildRecordForm):
    schema = FamilyHistoryCreate
    title = "Add Family History"
    relationships = list(Relationship)
    statuses = list(FamilyHistoryStatus)
    suggested_conditions = COMMON_CONDITIONS

    def defaults(self) -> dict[str, str]:
        return {"status": FamilyHistoryStatus.UNKNOWN.value}
