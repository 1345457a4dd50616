from enum import Enum


class DocumentType(str, Enum):
    GENERAL = "general"
    LAB_REPORT = "lab_report"
    PRESCRIPTION = "prescription"
    MEDICAL_REPORT = "medical_report"
    XRAY = "xray"
    INSURANCE = "insurance"
    REFERRAL = "referral"
    DISCHARGE_SUMMARY = "discharge_summary"


class Severity(str, Enum):
    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"
    CRITICAL = "critical"


class ConditionStatus(str, Enum):
    ACTIVE = "active"
    MANAGED = "managed"
    RESOLVED = "resolved"
    INACTIVE = "inactive"


class LabCategory(str, Enum):
    GENERAL = "general"
    BLOOD_CHEMISTRY = "blood_chemistry"
    HEMATOLOGY = "hematology"
    LIPID_PANEL = "lipid_panel"
    LIVER_FUNCTION = "liver_function"
    KIDNEY_FUNCTION = "kidney_function"
    THYROID_FUNCTION = "thyroid_function"
    CARDIAC_MARKERS = "cardiac_markers"
    DIABETES_MARKERS = "diabetes_markers"
    INFLAMMATORY_MARKERS = "inflammatory_markers"
    TUMOR_MARKERS = "tumor_markers"
    HORMONES = "hormones"
    VITAMINS = "vitamins"
    MICROBIOLOGY = "microbiology"
    PATHOLOGY = "pathology"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ").title()


class LabStatus(str, Enum):
    NORMAL = "normal"
    ABNORMAL = "abnormal"
    HIGH = "high"
    LOW = "low"
    CRITICAL = "critical"
    PENDING = "pending"


class AdministrationSite(str, Enum):
    LEFT_ARM = "left arm"
    RIGHT_ARM = "right arm"
    LEFT_THIGH = "left thigh"
    RIGHT_THIGH = "right thigh"
    LEFT_DELTOID = "left deltoid"
    RIGHT_DELTOID = "right deltoid"
    ORAL = "oral"
    NASAL = "nasal"


class Relationship(str, Enum):
    MOTHER = "Mother"
    FATHER = "Father"
    SISTER = "Sister"
    BROTHER = "Brother"
    MATERNAL_GRANDMOTHER = "Maternal Grandmother"
    MATERNAL_GRANDFATHER = "Maternal Grandfather"
    PATERNAL_GRANDMOTHER = "Paternal Grandmother"
    PATERNAL_GRANDFATHER = "Paternal Grandfather"
    MATERNAL_AUNT = "Maternal Aunt"
    MATERNAL_UNCLE = "Maternal Uncle"
    PATERNAL_AUNT = "Paternal Aunt"
    PATERNAL_UNCLE = "Paternal Uncle"
    DAUGHTER = "Daughter"
    SON = "Son"
    COUSIN = "Cousin"


class FamilyHistoryStatus(str, Enum):
    UNKNOWN = "unknown"
    CONFIRMED = "confirmed"
    SUSPECTED = "suspected"
    DECEASED = "deceased"
    RESOLVED = "resolved"
