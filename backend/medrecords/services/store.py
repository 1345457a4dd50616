from abc import ABC, abstractmethod
from typing import Any, Optional


class RecordStore(ABC):
    """Table-oriented store: the only thing repositories talk to.

    Rows are plain dicts. Identifiers and timestamps are assigned by the store
    and come back in the row returned from ``insert``.
    """

    async def startup(self) -> None:
        pass

    async def aclose(self) -> None:
        pass

    @abstractmethod
    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        ...

    @abstractmethod
    async def select(
        self,
        table: str,
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
    ) -> list[dict[str, Any]]:
        ...

    @abstractmethod
    async def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        ...
