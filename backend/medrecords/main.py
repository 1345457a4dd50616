"""
Composition root.

Settings are read once; the store built from them is handed explicitly to
every repository, the aggregate loader and the views. Nothing reaches for a
global client.
"""

import logging
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, Optional

from medrecords.config import Settings, get_settings
from medrecords.logging_config import configure_logging
from medrecords.services.aggregate import AggregateLoader
from medrecords.services.ocr_service import OcrService
from medrecords.services.repository import Repositories
from medrecords.services.rest_store import RestStore
from medrecords.services.sql_store import SqlStore
from medrecords.services.store import RecordStore
from medrecords.views import PatientListView

logger = logging.getLogger(__name__)


@dataclass
class RecordsApp:
    settings: Settings
    store: RecordStore
    repositories: Repositories
    loader: AggregateLoader
    ocr: OcrService

    def patient_list(self) -> PatientListView:
        return PatientListView(self)


def create_store(settings: Settings) -> RecordStore:
    if settings.uses_sql_store:
        logger.info("Using SQL store")
        return SqlStore(settings.database_url)
    logger.info("Using hosted store at %s", settings.supabase_url)
    return RestStore(settings.supabase_url, settings.supabase_key, timeout=settings.request_timeout)


def build_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    ocr: Optional[OcrService] = None,
    strict_aggregate: bool = False,
) -> RecordsApp:
    settings = settings or get_settings()
    store = store or create_store(settings)
    repositories = Repositories(store)
    return RecordsApp(
        settings=settings,
        store=store,
        repositories=repositories,
        loader=AggregateLoader(repositories, strict=strict_aggregate),
        ocr=ocr or OcrService(settings.ocr_language, settings.tesseract_cmd),
    )


@asynccontextmanager
async def lifespan(settings: Optional[Settings] = None, **kwargs) -> AsyncIterator[RecordsApp]:
    settings = settings or get_settings()
    configure_logging(settings.log_level)
    app = build_app(settings, **kwargs)
    # Startup: SQL store creates its tables
    await app.store.startup()
    try:
        yield app
    finally:
        await app.store.aclose()
