from medrecords.forms.base import FormState, FormWorkflow, ChildRecordForm
from medrecords.forms.records import (
    ChronicConditionForm,
    FamilyHistoryForm,
    ImmunizationForm,
    LabResultForm,
    MedicalRecordForm,
    PrescriptionForm,
    VitalSignsForm,
)
from medrecords.forms.document import DocumentUploadForm
from medrecords.forms.patient import PatientForm

# Child table -> form that creates rows in it
CHILD_FORMS: dict[str, type[ChildRecordForm]] = {
    "vital_signs": VitalSignsForm,
    "chronic_conditions": ChronicConditionForm,
    "medical_records": MedicalRecordForm,
    "prescriptions": PrescriptionForm,
    "lab_results": LabResultForm,
    "immunizations": ImmunizationForm,
    "family_history": FamilyHistoryForm,
    "documents": DocumentUploadForm,
}

__all__ = [
    "FormState", "FormWorkflow", "ChildRecordForm", "PatientForm", "DocumentUploadForm",
    "MedicalRecordForm", "PrescriptionForm", "VitalSignsForm", "ChronicConditionForm",
    "LabResultForm", "ImmunizationForm", "FamilyHistoryForm", "CHILD_FORMS",
]
