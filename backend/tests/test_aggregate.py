"""
Tests for the patient aggregate loader.

Policy under test: best-effort by default (a failed collection degrades to
empty and is reported in ``failed``), all-or-nothing with ``strict=True``.
"""
import time

import pytest

from conftest import FakeStore, run
from medrecords.exceptions import PersistenceError
from medrecords.schemas import MedicalRecordCreate
from medrecords.services.aggregate import AggregateLoader, PatientAggregate
from medrecords.services.repository import CHILD_ENTITIES, Repositories


def test_patient_without_records_has_eight_empty_collections(store):
    aggregate = run(AggregateLoader(Repositories(store)).load("p1"))
    assert isinstance(aggregate, PatientAggregate)
    for table in CHILD_ENTITIES:
        assert aggregate.collection(table) == []
    assert aggregate.counts == {table: 0 for table in CHILD_ENTITIES}
    assert aggregate.is_complete


def test_fetches_run_concurrently():
    """Total time tracks the slowest fetch, not the sum of all of them."""
    store = FakeStore(delays={"medical_records": 0.2, "prescriptions": 0.3, "documents": 0.25})
    loader = AggregateLoader(Repositories(store))
    started = time.perf_counter()
    run(loader.load("p1"))
    elapsed = time.perf_counter() - started
    assert elapsed >= 0.3
    assert elapsed < 0.6


def test_collections_are_filled(store):
    repos = Repositories(store)
    run(repos.for_table("medical_records").create(
        MedicalRecordCreate(patient_id="p1", doctor_name="Dr. Grey", visit_date="2024-01-01")
    ))
    aggregate = run(AggregateLoader(repos).load("p1"))
    assert len(aggregate.medical_records) == 1
    assert aggregate.counts["medical_records"] == 1


def test_failed_collection_degrades_to_empty():
    store = FakeStore(fail_selects={"lab_results"})
    repos = Repositories(store)
    run(repos.for_table("medical_records").create(
        MedicalRecordCreate(patient_id="p1", doctor_name="Dr. Grey", visit_date="2024-01-01")
    ))
    aggregate = run(AggregateLoader(repos).load("p1"))
    assert aggregate.lab_results == []
    assert len(aggregate.medical_records) == 1
    assert set(aggregate.failed) == {"lab_results"}
    assert not aggregate.is_complete


def test_strict_policy_fails_whole_load():
    store = FakeStore(fail_selects={"lab_results", "documents"})
    loader = AggregateLoader(Repositories(store), strict=True)
    with pytest.raises(PersistenceError) as exc_info:
        run(loader.load("p1"))
    assert set(exc_info.value.details["failed"]) == {"lab_results", "documents"}
    # Every fetch still ran to completion before failing
    assert store.count("select") == 8


def test_reload_reruns_every_fetch(store):
    loader = AggregateLoader(Repositories(store))
    run(loader.load("p1"))
    run(loader.load("p1"))
    assert store.count("select") == 16
    for table in CHILD_ENTITIES:
        assert store.count("select", table) == 2
