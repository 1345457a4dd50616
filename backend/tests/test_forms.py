"""Tests for form workflows: validation before submit, coercion, success and failure paths."""
from datetime import date

import pytest

from conftest import FakeStore, run
from medrecords.exceptions import ValidationError
from medrecords.forms import (
    CHILD_FORMS,
    FamilyHistoryForm,
    FormState,
    ImmunizationForm,
    MedicalRecordForm,
    PatientForm,
    VitalSignsForm,
)
from medrecords.services.repository import Repositories


def _form(form_class, store, patient_id="p1", **kwargs):
    repo = Repositories(store).for_table(_table_for(form_class))
    return form_class(repo, patient_id, **kwargs)


def _table_for(form_class):
    return next(table for table, cls in CHILD_FORMS.items() if cls is form_class)


class TestFieldIdentifiers:
    def test_closed_enum_of_fields(self):
        fields = MedicalRecordForm.fields()
        assert {f.value for f in fields} == {
            "doctor_name", "visit_date", "diagnosis", "symptoms", "treatment", "notes",
        }
        assert fields.DOCTOR_NAME == "doctor_name"

    def test_derived_and_foreign_keys_are_not_editable(self):
        names = {f.value for f in VitalSignsForm.fields()}
        assert "bmi" not in names
        assert "patient_id" not in names

    def test_update_accepts_member_or_name(self, store):
        form = _form(MedicalRecordForm, store)
        form.update(MedicalRecordForm.fields().DOCTOR_NAME, "Dr. Grey")
        form.update("diagnosis", "Flu")
        assert form.values["doctor_name"] == "Dr. Grey"
        assert form.values["diagnosis"] == "Flu"

    def test_update_rejects_unknown_field(self, store):
        form = _form(MedicalRecordForm, store)
        with pytest.raises(ValidationError):
            form.update("patient_id", "someone-else")

    def test_defaults(self, store):
        form = _form(ImmunizationForm, store)
        assert form.values["administration_date"] == date.today().isoformat()
        assert form.values["dose_number"] == "1"
        assert form.values["administration_site"] == "left arm"
        assert form.values["vaccine_name"] == ""


class TestValidation:
    def test_required_fields(self):
        form = _form(MedicalRecordForm, FakeStore())
        assert set(form.required_fields) == {"doctor_name", "visit_date"}
        assert "patient_id" not in _form(VitalSignsForm, FakeStore()).required_fields

    def test_missing_required_field_never_reaches_store(self, store):
        form = _form(MedicalRecordForm, store)
        assert run(form.submit()) is None
        assert form.errors == {"doctor_name": "This field is required"}
        assert form.state is FormState.EDITING
        assert form.is_open
        assert store.count("insert") == 0

    def test_out_of_range_value(self, store):
        form = _form(FamilyHistoryForm, store)
        form.update("relationship", "Mother")
        form.update("condition_name", "Asthma")
        form.update("age_of_onset", "130")
        assert run(form.submit()) is None
        assert "age_of_onset" in form.errors
        assert store.count("insert") == 0


class TestCoercion:
    def test_empty_age_of_onset_stored_as_null(self, store):
        form = _form(FamilyHistoryForm, store)
        form.update("relationship", "Mother")
        form.update("condition_name", "Asthma")
        form.update("age_of_onset", "")
        saved = run(form.submit())
        assert saved.age_of_onset is None
        assert store.tables["family_history"][0]["age_of_onset"] is None

    def test_dose_number_stored_as_int(self, store):
        form = _form(ImmunizationForm, store)
        form.update("vaccine_name", "Hepatitis B")
        form.update("administered_by", "Dr. Ray")
        form.update("dose_number", "3")
        run(form.submit())
        assert store.tables["immunizations"][0]["dose_number"] == 3


class TestVitalSigns:
    def _filled(self, store, **values):
        form = _form(VitalSignsForm, store)
        form.update("recorded_by", "Nurse Kim")
        for name, value in values.items():
            form.update(name, value)
        return form

    def test_bmi_derived_at_submit(self, store):
        saved = run(self._filled(store, height_cm="180", weight_kg="81").submit())
        assert saved.bmi == 25.0
        assert store.tables["vital_signs"][0]["bmi"] == 25.0

    def test_no_bmi_without_height(self, store):
        saved = run(self._filled(store, weight_kg="81").submit())
        assert saved.bmi is None

    def test_blank_numbers_are_null(self, store):
        run(self._filled(store, heart_rate="", systolic_bp="120").submit())
        row = store.tables["vital_signs"][0]
        assert row["heart_rate"] is None
        assert row["systolic_bp"] == 120


class TestSubmit:
    def test_success_closes_and_notifies(self, store):
        saved_records = []
        form = _form(MedicalRecordForm, store, on_save=saved_records.append)
        form.update("doctor_name", "Dr. Grey")
        saved = run(form.submit())
        assert form.state is FormState.SUCCESS
        assert not form.is_open
        assert saved_records == [saved]
        assert saved.patient_id == "p1"

    def test_async_save_callback_is_awaited(self, store):
        calls = []

        async def on_save(record):
            calls.append(record.id)

        form = _form(MedicalRecordForm, store, on_save=on_save)
        form.update("doctor_name", "Dr. Grey")
        saved = run(form.submit())
        assert calls == [saved.id]

    def test_rejected_create_keeps_values_and_stays_open(self):
        store = FakeStore(fail_inserts={"medical_records"})
        saved_records = []
        form = _form(MedicalRecordForm, store, on_save=saved_records.append)
        form.update("doctor_name", "Dr. Grey")
        form.update("diagnosis", "Migraine")
        before = dict(form.values)

        assert run(form.submit()) is None
        assert form.values == before
        assert form.is_open
        assert form.state is FormState.FAILED
        assert form.error and "insert rejected" in form.error
        assert saved_records == []

    def test_editing_after_failure_returns_to_editing(self):
        store = FakeStore(fail_inserts={"medical_records"})
        form = _form(MedicalRecordForm, store)
        form.update("doctor_name", "Dr. Grey")
        run(form.submit())
        form.update("notes", "retry")
        assert form.state is FormState.EDITING

    def test_no_automatic_retry(self):
        store = FakeStore(fail_inserts={"medical_records"})
        form = _form(MedicalRecordForm, store)
        form.update("doctor_name", "Dr. Grey")
        run(form.submit())
        assert store.count("insert", "medical_records") == 1

    def test_close_notifies(self, store):
        closed = []
        form = _form(MedicalRecordForm, store, on_close=lambda: closed.append(True))
        run(form.close())
        assert closed == [True]
        assert not form.is_open

    def test_unexpected_error_does_not_lock_form(self):
        class FlakyStore(FakeStore):
            def __init__(self):
                super().__init__()
                self.broken = True

            async def insert(self, table, row):
                if self.broken:
                    self.broken = False
                    raise RuntimeError("connection pool exhausted")
                return await super().insert(table, row)

        store = FlakyStore()
        form = _form(MedicalRecordForm, store)
        form.update("doctor_name", "Dr. Grey")
        with pytest.raises(RuntimeError):
            run(form.submit())
        assert form.state is FormState.FAILED
        assert not form.is_submitting
        assert form.is_open
        assert form.values["doctor_name"] == "Dr. Grey"

        saved = run(form.submit())
        assert saved is not None
        assert form.state is FormState.SUCCESS


class TestPatientForm:
    def test_create(self, store):
        form = PatientForm(Repositories(store).patients)
        assert form.title == "Add New Patient"
        for name, value in {
            "first_name": "Ann", "last_name": "Lee", "date_of_birth": "1990-06-15",
            "gender": "female", "allergies": "",
        }.items():
            form.update(name, value)
        saved = run(form.submit())
        assert saved.id
        assert saved.allergies is None

    def test_edit_prefills_and_updates(self, store, patient):
        form = PatientForm(Repositories(store).patients, patient=patient)
        assert form.is_edit
        assert form.values["first_name"] == "Ann"
        assert form.values["date_of_birth"] == "1990-06-15"
        assert form.values["address"] == ""
        form.update("address", "1 Main St")
        saved = run(form.submit())
        assert saved.id == patient.id
        assert saved.address == "1 Main St"
        assert store.count("update", "patients") == 1
