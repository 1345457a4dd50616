"""
Hosted store client.

Speaks the PostgREST dialect exposed by hosted Postgres services: one
``/rest/v1/<table>`` resource per table, ``col=eq.value`` filters and
``order=col.desc``. Every failure surfaces as PersistenceError.
"""

import logging
from typing import Any, Optional

import httpx
from pydantic import TypeAdapter

from medrecords.exceptions import NotFoundError, PersistenceError
from medrecords.services.store import RecordStore

logger = logging.getLogger(__name__)

_json_row = TypeAdapter(dict[str, Any])


class RestStore(RecordStore):
    def __init__(
        self,
        base_url: str,
        api_key: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        if not base_url:
            raise ValueError("A store URL is required")
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=f"{self.base_url}/rest/v1",
            headers={
                "apikey": api_key,
                "Authorization": f"Bearer {api_key}",
                "Content-Type": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    async def aclose(self) -> None:
        await self._client.aclose()

    async def insert(self, table: str, row: dict[str, Any]) -> dict[str, Any]:
        data = await self._request(
            "POST",
            table,
            json=_json_row.dump_python(row, mode="json"),
            headers={"Prefer": "return=representation"},
        )
        if not data:
            raise PersistenceError(table, "insert returned no row")
        return data[0]

    async def select(
        self,
        table: str,
        *,
        filters: Optional[dict[str, Any]] = None,
        order_by: Optional[str] = None,
        descending: bool = True,
    ) -> list[dict[str, Any]]:
        params = {"select": "*"}
        for column, value in (filters or {}).items():
            params[column] = f"eq.{value}"
        if order_by:
            params["order"] = f"{order_by}.{'desc' if descending else 'asc'}"
        return await self._request("GET", table, params=params) or []

    async def update(self, table: str, row_id: str, values: dict[str, Any]) -> dict[str, Any]:
        data = await self._request(
            "PATCH",
            table,
            params={"id": f"eq.{row_id}"},
            json=_json_row.dump_python(values, mode="json"),
            headers={"Prefer": "return=representation"},
        )
        if not data:
            raise NotFoundError(table, f"no row with id {row_id}")
        return data[0]

    async def _request(self, method: str, table: str, **kwargs) -> Any:
        try:
            response = await self._client.request(method, f"/{table}", **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            body = e.response.text[:500]
            logger.warning("%s %s failed with %s: %s", method, table, e.response.status_code, body)
            raise PersistenceError(
                table,
                f"store responded {e.response.status_code}",
                details={"status_code": e.response.status_code, "body": body},
            ) from e
        except httpx.HTTPError as e:
            logger.warning("%s %s failed: %s", method, table, e)
            raise PersistenceError(table, f"transport error: {e}") from e

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError as e:
            raise PersistenceError(table, "store returned invalid JSON") from e
