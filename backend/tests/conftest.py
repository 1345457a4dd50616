import asyncio
import uuid
from collections import defaultdict
from datetime import datetime, timedelta, timezone

import pytest

from medrecords.config import Settings
from medrecords.exceptions import NotFoundError, PersistenceError
from medrecords.main import build_app
from medrecords.schemas import PatientCreate
from medrecords.services.ocr_service import OcrService
from medrecords.services.store import RecordStore

TIMESTAMP_COLUMN = {"documents": "uploaded_at"}


class FakeStore(RecordStore):
    """In-memory store. Per-table delays and failures simulate a slow or broken backend."""

    def __init__(self, delays=None, fail_inserts=(), fail_selects=()):
        self.tables = defaultdict(list)
        self.delays = delays or {}
        self.fail_inserts = set(fail_inserts)
        self.fail_selects = set(fail_selects)
        self.calls = []
        self._clock = datetime(2024, 1, 1, tzinfo=timezone.utc)

    def _now(self):
        # Strictly increasing so created_at ordering is deterministic
        self._clock += timedelta(seconds=1)
        return self._clock

    async def insert(self, table, row):
        self.calls.append(("insert", table))
        if table in self.fail_inserts:
            raise PersistenceError(table, "insert rejected")
        stored = dict(row)
        stored["id"] = str(uuid.uuid4())
        stored[TIMESTAMP_COLUMN.get(table, "created_at")] = self._now()
        if table in ("patients", "chronic_conditions"):
            stored["updated_at"] = stored["created_at"]
        self.tables[table].append(stored)
        return dict(stored)

    async def select(self, table, *, filters=None, order_by=None, descending=True):
        self.calls.append(("select", table))
        delay = self.delays.get(table)
        if delay:
            await asyncio.sleep(delay)
        if table in self.fail_selects:
            raise PersistenceError(table, "select rejected")
        rows = [
            dict(r) for r in self.tables[table]
            if all(r.get(k) == v for k, v in (filters or {}).items())
        ]
        if order_by:
            present = [r for r in rows if r.get(order_by) is not None]
            missing = [r for r in rows if r.get(order_by) is None]
            present.sort(key=lambda r: r[order_by], reverse=descending)
            rows = present + missing
        return rows

    async def update(self, table, row_id, values):
        self.calls.append(("update", table))
        for row in self.tables[table]:
            if row["id"] == row_id:
                row.update(values)
                row["updated_at"] = self._now()
                return dict(row)
        raise NotFoundError(table, f"no row with id {row_id}")

    def count(self, kind, table=None):
        return sum(1 for k, t in self.calls if k == kind and (table is None or t == table))


class FakeOcr(OcrService):
    def __init__(self, text="Hemoglobin 13.5 g/dL", error=None):
        super().__init__()
        self.text = text
        self.error = error
        self.calls = 0

    async def recognize(self, source, language=None, progress=None):
        self.calls += 1
        report = progress or (lambda _: None)
        report(0)
        if self.error is not None:
            raise self.error
        report(50)
        report(100)
        return self.text


def run(coro):
    return asyncio.run(coro)


@pytest.fixture
def store():
    return FakeStore()


@pytest.fixture
def ocr():
    return FakeOcr()


@pytest.fixture
def settings():
    return Settings(supabase_url="https://example.supabase.co", supabase_key="test-key")


@pytest.fixture
def app(settings, store, ocr):
    return build_app(settings, store=store, ocr=ocr)


@pytest.fixture
def patient(app):
    return run(app.repositories.patients.create(PatientCreate(
        first_name="Ann",
        last_name="Lee",
        date_of_birth="1990-06-15",
        gender="female",
        phone="(555) 010-1234",
        email="ann.lee@example.com",
    )))
