import logging
from dataclasses import dataclass
from typing import Generic, TypeVar

from pydantic import BaseModel, ValidationError as SchemaError

from medrecords.exceptions import NotFoundError, PersistenceError
from medrecords.schemas import (
    ChronicConditionCreate, ChronicConditionResponse,
    DocumentCreate, DocumentResponse,
    FamilyHistoryCreate, FamilyHistoryResponse,
    ImmunizationCreate, ImmunizationResponse,
    LabResultCreate, LabResultResponse,
    MedicalRecordCreate, MedicalRecordResponse,
    PatientCreate, PatientResponse, PatientUpdate,
    PrescriptionCreate, PrescriptionResponse,
    VitalSignsCreate, VitalSignsResponse,
)
from medrecords.services.store import RecordStore

logger = logging.getLogger(__name__)

CreateT = TypeVar("CreateT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


@dataclass(frozen=True)
class EntitySpec:
    table: str
    create_schema: type[BaseModel]
    response_schema: type[BaseModel]
    order_by: str


PATIENTS = EntitySpec("patients", PatientCreate, PatientResponse, "created_at")

# Child collections, in the order the detail view presents them
CHILD_ENTITIES: dict[str, EntitySpec] = {
    spec.table: spec
    for spec in (
        EntitySpec("vital_signs", VitalSignsCreate, VitalSignsResponse, "recorded_date"),
        EntitySpec("chronic_conditions", ChronicConditionCreate, ChronicConditionResponse, "created_at"),
        EntitySpec("medical_records", MedicalRecordCreate, MedicalRecordResponse, "visit_date"),
        EntitySpec("prescriptions", PrescriptionCreate, PrescriptionResponse, "prescribed_date"),
        EntitySpec("lab_results", LabResultCreate, LabResultResponse, "test_date"),
        EntitySpec("immunizations", ImmunizationCreate, ImmunizationResponse, "administration_date"),
        EntitySpec("family_history", FamilyHistoryCreate, FamilyHistoryResponse, "created_at"),
        EntitySpec("documents", DocumentCreate, DocumentResponse, "uploaded_at"),
    )
}


def _parse(spec: EntitySpec, row: dict) -> BaseModel:
    try:
        return spec.response_schema.model_validate(row)
    except SchemaError as e:
        raise PersistenceError(spec.table, "store returned a malformed row", details={"row": row}) from e


def _parse_rows(spec: EntitySpec, rows: list[dict]) -> list[BaseModel]:
    """Parse listed rows one at a time; a row that fails validation is logged and skipped."""
    parsed = []
    for row in rows:
        try:
            parsed.append(spec.response_schema.model_validate(row))
        except SchemaError as e:
            logger.warning(
                "Skipping malformed %s row %s: %s", spec.table, row.get("id"), e.errors()[0]["msg"]
            )
    return parsed


class RecordRepository(Generic[CreateT, ResponseT]):
    """Create and list-by-patient for one child entity type. No update or delete."""

    def __init__(self, store: RecordStore, spec: EntitySpec):
        self.store = store
        self.spec = spec

    @property
    def table(self) -> str:
        return self.spec.table

    async def create(self, record: CreateT) -> ResponseT:
        if not isinstance(record, self.spec.create_schema):
            raise TypeError(f"{self.table} expects {self.spec.create_schema.__name__}")
        try:
            row = await self.store.insert(self.table, record.model_dump())
        except PersistenceError as e:
            logger.error("Error saving %s for patient %s: %s", self.table, record.patient_id, e)
            raise
        created = _parse(self.spec, row)
        logger.info("Created %s %s for patient %s", self.table, created.id, created.patient_id)
        return created

    async def list_by_patient(self, patient_id: str) -> list[ResponseT]:
        rows = await self.store.select(
            self.table,
            filters={"patient_id": patient_id},
            order_by=self.spec.order_by,
            descending=True,
        )
        return _parse_rows(self.spec, rows)


class PatientRepository:
    def __init__(self, store: RecordStore):
        self.store = store
        self.spec = PATIENTS

    async def create(self, patient: PatientCreate) -> PatientResponse:
        try:
            row = await self.store.insert(self.spec.table, patient.model_dump())
        except PersistenceError as e:
            logger.error("Error saving patient %s %s: %s", patient.first_name, patient.last_name, e)
            raise
        created = _parse(self.spec, row)
        logger.info("Created patient %s", created.id)
        return created

    async def update(self, patient_id: str, changes: PatientUpdate) -> PatientResponse:
        values = changes.model_dump(exclude_unset=True)
        try:
            row = await self.store.update(self.spec.table, patient_id, values)
        except PersistenceError as e:
            logger.error("Error updating patient %s: %s", patient_id, e)
            raise
        logger.info("Updated patient %s (%s)", patient_id, ", ".join(sorted(values)))
        return _parse(self.spec, row)

    async def get(self, patient_id: str) -> PatientResponse:
        rows = await self.store.select(self.spec.table, filters={"id": patient_id})
        if not rows:
            raise NotFoundError(self.spec.table, f"Patient {patient_id} not found")
        return _parse(self.spec, rows[0])

    async def list_all(self) -> list[PatientResponse]:
        rows = await self.store.select(self.spec.table, order_by=self.spec.order_by, descending=True)
        return _parse_rows(self.spec, rows)


class Repositories:
    """One repository per table, all sharing the store they were built with."""

    def __init__(self, store: RecordStore):
        self.store = store
        self.patients = PatientRepository(store)
        self.children: dict[str, RecordRepository] = {
            table: RecordRepository(store, spec) for table, spec in CHILD_ENTITIES.items()
        }

    def for_table(self, table: str) -> RecordRepository:
        try:
            return self.children[table]
        except KeyError:
            raise KeyError(f"No repository for table {table!r}") from None
