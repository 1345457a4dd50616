from medrecords.schemas.patient import PatientCreate, PatientUpdate, PatientResponse
from medrecords.schemas.medical_record import MedicalRecordCreate, MedicalRecordResponse
from medrecords.schemas.prescription import PrescriptionCreate, PrescriptionResponse
from medrecords.schemas.document import DocumentCreate, DocumentResponse
from medrecords.schemas.vital_signs import VitalSignsCreate, VitalSignsResponse
from medrecords.schemas.chronic_condition import ChronicConditionCreate, ChronicConditionResponse
from medrecords.schemas.lab_result import LabResultCreate, LabResultResponse
from medrecords.schemas.immunization import ImmunizationCreate, ImmunizationResponse
from medrecords.schemas.family_history import FamilyHistoryCreate, FamilyHistoryResponse

__all__ = [
    "PatientCreate", "PatientUpdate", "PatientResponse",
    "MedicalRecordCreate", "MedicalRecordResponse",
    "PrescriptionCreate", "PrescriptionResponse",
    "DocumentCreate", "DocumentResponse",
    "VitalSignsCreate", "VitalSignsResponse",
    "ChronicConditionCreate", "ChronicConditionResponse",
    "LabResultCreate", "LabResultResponse",
    "ImmunizationCreate", "ImmunizationResponse",
    "FamilyHistoryCreate", "FamilyHistoryResponse",
]
