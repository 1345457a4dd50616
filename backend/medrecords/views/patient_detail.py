"""
Patient detail: an overview plus one tab per child collection.

Every child form saved from here triggers a full reload of the aggregate.
The view owns its in-flight load; closing the view cancels it so a late
response never lands on a closed view.
"""

import asyncio
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from medrecords.exceptions import PersistenceError
from medrecords.forms import CHILD_FORMS, ChildRecordForm, DocumentUploadForm
from medrecords.schemas import PatientResponse
from medrecords.services.aggregate import PatientAggregate
from medrecords.services.calculations import calculate_age, calculate_bmi

logger = logging.getLogger(__name__)

OVERVIEW = "overview"

# Tab id -> child table
TAB_TABLES = {
    "vitals": "vital_signs",
    "conditions": "chronic_conditions",
    "medical": "medical_records",
    "prescriptions": "prescriptions",
    "labs": "lab_results",
    "immunizations": "immunizations",
    "family": "family_history",
    "documents": "documents",
}
TABS = (OVERVIEW, *TAB_TABLES)


@dataclass
class PatientOverview:
    name: str
    gender: str
    age: int
    phone: Optional[str] = None
    email: Optional[str] = None
    address: Optional[str] = None
    emergency_contact_name: Optional[str] = None
    emergency_contact_phone: Optional[str] = None
    blood_type: Optional[str] = None
    allergies: Optional[str] = None
    bmi: Optional[float] = None
    counts: dict[str, int] = field(default_factory=dict)
    unavailable: list[str] = field(default_factory=list)


def latest_bmi(aggregate: PatientAggregate) -> Optional[float]:
    # vital_signs is ordered newest first
    for vital in aggregate.vital_signs:
        if vital.bmi is not None:
            return vital.bmi
        computed = calculate_bmi(vital.height_cm, vital.weight_kg)
        if computed is not None:
            return computed
    return None


class PatientDetailView:
    def __init__(self, app, patient: PatientResponse, on_edit: Optional[Callable] = None):
        self.app = app
        self.patient = patient
        self.on_edit = on_edit
        self.aggregate = PatientAggregate(patient_id=patient.id)
        self.active_tab = OVERVIEW
        self.form: Optional[ChildRecordForm] = None
        self.loading = False
        self.error: Optional[str] = None
        self.closed = False
        self._load_task: Optional[asyncio.Task] = None

    async def load(self) -> Optional[PatientAggregate]:
        if self.closed:
            return None
        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()
        task = asyncio.ensure_future(self.app.loader.load(self.patient.id))
        self._load_task = task
        self.loading = True
        self.error = None
        try:
            aggregate = await task
        except asyncio.CancelledError:
            if self.closed or task is not self._load_task:
                return None
            raise
        except PersistenceError as e:
            logger.error("Error fetching patient data for %s: %s", self.patient.id, e)
            self.error = f"Could not load patient data: {e.reason}"
            return None
        finally:
            if task is self._load_task:
                self.loading = False
        self.aggregate = aggregate
        if aggregate.failed:
            self.error = "Some records could not be loaded: " + ", ".join(sorted(aggregate.failed))
        return aggregate

    def close(self) -> None:
        self.closed = True
        self.form = None
        if self._load_task is not None and not self._load_task.done():
            self._load_task.cancel()

    def set_tab(self, tab: str) -> None:
        if tab not in TABS:
            raise ValueError(f"Unknown tab {tab!r}")
        self.active_tab = tab

    def records(self, tab: str) -> list:
        return self.aggregate.collection(TAB_TABLES[tab])

    def tab_counts(self) -> dict[str, int]:
        return {tab: len(self.records(tab)) for tab in TAB_TABLES}

    def overview(self) -> PatientOverview:
        p = self.patient
        return PatientOverview(
            name=p.full_name,
            gender=p.gender,
            age=calculate_age(p.date_of_birth),
            phone=p.phone,
            email=p.email,
            address=p.address,
            emergency_contact_name=p.emergency_contact_name,
            emergency_contact_phone=p.emergency_contact_phone,
            blood_type=p.blood_type,
            allergies=p.allergies,
            bmi=latest_bmi(self.aggregate),
            counts=self.tab_counts(),
            unavailable=[tab for tab, table in TAB_TABLES.items() if table in self.aggregate.failed],
        )

    def open_form(self, tab: str) -> ChildRecordForm:
        table = TAB_TABLES[tab]
        form_class = CHILD_FORMS[table]
        kwargs = {"on_save": self._on_child_saved, "on_close": self.close_form}
        if form_class is DocumentUploadForm:
            kwargs["ocr"] = self.app.ocr
        self.form = form_class(self.app.repositories.for_table(table), self.patient.id, **kwargs)
        return self.form

    def close_form(self) -> None:
        self.form = None

    def edit_patient(self):
        if self.on_edit is None:
            return None
        return self.on_edit(self.patient)

    async def _on_child_saved(self, record) -> None:
        self.form = None
        await self.load()
