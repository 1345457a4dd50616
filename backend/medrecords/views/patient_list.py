import logging
import re
from typing import Iterable, Optional

from medrecords.exceptions import PersistenceError
from medrecords.forms import PatientForm
from medrecords.schemas import PatientResponse
from medrecords.services.calculations import calculate_age
from medrecords.views.patient_detail import PatientDetailView

logger = logging.getLogger(__name__)

_PHONE_QUERY = re.compile(r"^[\d\s()+.-]+$")


def _digits(value: str) -> str:
    return re.sub(r"\D", "", value)


def matches_search(patient: PatientResponse, term: str) -> bool:
    """Case-insensitive substring match on first name, last name, email or phone.

    A term made only of phone characters also matches on digits alone, so
    "555 0101" finds "(555) 010-1".
    """
    needle = term.strip().lower()
    if not needle:
        return True
    for value in (patient.first_name, patient.last_name, patient.email):
        if value and needle in value.lower():
            return True
    if patient.phone:
        if needle in patient.phone.lower():
            return True
        if _PHONE_QUERY.match(needle):
            digits = _digits(needle)
            if digits and digits in _digits(patient.phone):
                return True
    return False


def filter_patients(patients: Iterable[PatientResponse], term: str) -> list[PatientResponse]:
    return [p for p in patients if matches_search(p, term)]


class PatientListView:
    """All patients, newest first, filtered client-side on every keystroke."""

    def __init__(self, app):
        self.app = app
        self.patients: list[PatientResponse] = []
        self.search_term = ""
        self.loading = False
        self.error: Optional[str] = None
        self.form: Optional[PatientForm] = None
        self.detail: Optional[PatientDetailView] = None

    @property
    def filtered(self) -> list[PatientResponse]:
        return filter_patients(self.patients, self.search_term)

    def set_search(self, term: str) -> list[PatientResponse]:
        self.search_term = term or ""
        return self.filtered

    def age_of(self, patient: PatientResponse) -> int:
        return calculate_age(patient.date_of_birth)

    async def load(self) -> list[PatientResponse]:
        self.loading = True
        self.error = None
        try:
            self.patients = await self.app.repositories.patients.list_all()
        except PersistenceError as e:
            logger.error("Error fetching patients: %s", e)
            self.error = f"Could not load patients: {e.reason}"
        finally:
            self.loading = False
        return self.patients

    def open_new_patient(self) -> PatientForm:
        self.form = PatientForm(
            self.app.repositories.patients,
            on_save=self._on_patient_saved,
            on_close=self._close_form,
        )
        return self.form

    def open_edit(self, patient: PatientResponse) -> PatientForm:
        self.form = PatientForm(
            self.app.repositories.patients,
            patient=patient,
            on_save=self._on_patient_saved,
            on_close=self._close_form,
        )
        return self.form

    def open_detail(self, patient: PatientResponse) -> PatientDetailView:
        self.detail = PatientDetailView(self.app, patient, on_edit=self.open_edit)
        return self.detail

    def close_detail(self) -> None:
        if self.detail is not None:
            self.detail.close()
            self.detail = None

    def _close_form(self) -> None:
        self.form = None

    async def _on_patient_saved(self, patient: PatientResponse) -> None:
        self.form = None
        if self.detail is not None and self.detail.patient.id == patient.id:
            self.detail.patient = patient
        await self.load()
