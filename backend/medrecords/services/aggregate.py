"""
Patient aggregate: every child collection of one patient, fetched together.

All collections are requested concurrently and joined once every fetch has
settled. By default a failed fetch degrades that collection to empty and is
recorded in ``PatientAggregate.failed``; with ``strict=True`` any failure
fails the whole load.
"""

import asyncio
import logging
import time

from pydantic import BaseModel, Field

from medrecords.exceptions import PersistenceError
from medrecords.schemas import (
    ChronicConditionResponse,
    DocumentResponse,
    FamilyHistoryResponse,
    ImmunizationResponse,
    LabResultResponse,
    MedicalRecordResponse,
    PrescriptionResponse,
    VitalSignsResponse,
)
from medrecords.services.repository import CHILD_ENTITIES, Repositories

logger = logging.getLogger(__name__)


class PatientAggregate(BaseModel):
    patient_id: str
    vital_signs: list[VitalSignsResponse] = []
    chronic_conditions: list[ChronicConditionResponse] = []
    medical_records: list[MedicalRecordResponse] = []
    prescriptions: list[PrescriptionResponse] = []
    lab_results: list[LabResultResponse] = []
    immunizations: list[ImmunizationResponse] = []
    family_history: list[FamilyHistoryResponse] = []
    documents: list[DocumentResponse] = []
    # table -> reason, for collections that could not be fetched
    failed: dict[str, str] = Field(default_factory=dict)

    def collection(self, table: str) -> list:
        if table not in CHILD_ENTITIES:
            raise KeyError(table)
        return getattr(self, table)

    @property
    def counts(self) -> dict[str, int]:
        return {table: len(getattr(self, table)) for table in CHILD_ENTITIES}

    @property
    def is_complete(self) -> bool:
        return not self.failed


class AggregateLoader:
    def __init__(self, repositories: Repositories, strict: bool = False):
        self.repositories = repositories
        self.strict = strict

    async def load(self, patient_id: str) -> PatientAggregate:
        tables = list(CHILD_ENTITIES)
        started = time.perf_counter()
        results = await asyncio.gather(
            *(self.repositories.for_table(table).list_by_patient(patient_id) for table in tables),
            return_exceptions=True,
        )
        logger.debug(
            "Fetched %d collections for patient %s in %.1f ms",
            len(tables), patient_id, (time.perf_counter() - started) * 1000,
        )

        collections: dict[str, list] = {}
        failed: dict[str, str] = {}
        for table, result in zip(tables, results):
            if isinstance(result, PersistenceError):
                logger.warning("Error fetching %s for patient %s: %s", table, patient_id, result)
                failed[table] = result.reason
                collections[table] = []
            elif isinstance(result, BaseException):
                raise result
            else:
                collections[table] = result

        if failed and self.strict:
            first = next(iter(failed))
            raise PersistenceError(
                first,
                f"{len(failed)} of {len(tables)} collections failed to load",
                details={"failed": failed},
            )
        return PatientAggregate(patient_id=patient_id, failed=failed, **collections)
