from medrecords.models.patient import Patient
from medrecords.models.medical_record import MedicalRecord
from medrecords.models.prescription import Prescription
from medrecords.models.document import Document
from medrecords.models.vital_signs import VitalSigns
from medrecords.models.chronic_condition import ChronicCondition
from medrecords.models.lab_result import LabResult
from medrecords.models.immunization import Immunization
from medrecords.models.family_history import FamilyHistory

__all__ = ["Patient", "MedicalRecord", "Prescription", "Document", "VitalSigns",
           "ChronicCondition", "LabResult", "Immunization", "FamilyHistory"]
