import logging
from typing import Any, Optional

from sqlalchemy import desc, inspect as sa_inspect, select
from sqlalchemy.exc import SQLAlchemyError

from medrecords.database import Base, create_engine, create_session_factory, create_tables
from medrecords.exceptions import NotFoundError, PersistenceError
from medrecords.services.store import RecordStore

logger = logging.getLogger(__name__)


def _model_for(table: str):
    # Importing the package registers every mapper on Base
    import medrecords.models  # noqa: F401

    for mapper in Base.registry.mappers:
        if mapper.class_.__tablename__ == table:
            return mapper.class_
    raise PersistenceError(table, "unknown table")


def _to_dict(obj) -> dict[str, Any]:
    return {attr.key: getattr(obj, attr.key) for attr in sa_inspect(obj).mapper.column_attrs}


class SqlStore(RecordStore):
    """Self-hosted store backed by an async SQLAlchemy engine."""

    def __init__(self, database_url: str, echo: bool = False):
        self.engine = create_engine(database_url, echo=echo)
        self.async_session = create_session_factory(self.engine)

    async def startup(self) -> None:
        await create_tables(self.engine)

    async def aclose(self) -> None:
        await self.engine.dispose()

    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        model = _model_for(table)
        try:
            async with self.async_session() as session:
                obj = model(**row)
                session.add(obj)
                await session.commit()
                await session.refresh(obj)
                return _to_dict(obj)
        except (SQLAlchemyError, TypeError) as e:
            logger.warning("Insert into %s failed: %s", table, e)
            raise PersistenceError(table, f"insert failed: {e}") from e

    async def select(
        self,
        table: str,
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
    ) -> list[dict[str, Any]]:
        model = _model_for(table)
        query = select(model).filter_by(**(filters or {}))
        if order_by:
            column = getattr(model, order_by)
            query = query.order_by(desc(column) if descending else column)
        try:
            async with self.async_session() as session:
                result = await session.execute(query)
                return [_to_dict(obj) for obj in result.scalars().all()]
        except SQLAlchemyError as e:
            logger.warning("Select from %s failed: %s", table, e)
            raise PersistenceError(table, f"select failed: {e}") from e

    async def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        model = _model_for(table)
        try:
            async with self.async_session() as session:
                obj = await session.get(model, row_id)
                if obj is None:
                    raise NotFoundError(table, f"no row with id {row_id}")
                for key, value in values.items():
                    setattr(obj, key, value)
                await session.commit()
                await session.refresh(obj)
                return _to_dict(obj)
        except SQLAlchemyError as e:
            logger.warning("Update of %s %s failed: %s", table, row_id, e)
            raise PersistenceError(table, f"update failed: {e}") from e
