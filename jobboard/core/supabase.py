"""
Minimal Supabase table client.

Talks to the PostgREST endpoint Supabase exposes at {SUPABASE_URL}/rest/v1
using the service role key. Only the calls the admin tools need are
implemented: filtered/ordered select, insert returning the created row,
update and delete by equality filter.
"""

import logging
from typing import Any, Dict, List, Optional

import httpx

from jobboard.core.config import Settings
from jobboard.core.exceptions import StoreError

logger = logging.getLogger(__name__)


class SupabaseClient:
    """
    Synchronous PostgREST client bound to one Supabase project.

    Filters are passed as {column: value} and always compile to equality
    (column=eq.value).
    """

    def __init__(
        self,
        url: str,
        service_role_key: str,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.rest_url = f"{url.rstrip('/')}/rest/v1"
        self._client = httpx.Client(
            base_url=self.rest_url,
            headers={
                "apikey": service_role_key,
                "Authorization": f"Bearer {service_role_key}",
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            timeout=timeout,
            transport=transport,
        )

    @classmethod
    def from_settings(cls, settings: Settings, transport: Optional[httpx.BaseTransport] = None) -> "SupabaseClient":
        return cls(
            settings.SUPABASE_URL,
            settings.SUPABASE_SERVICE_ROLE_KEY,
            timeout=settings.SUPABASE_TIMEOUT,
            transport=transport,
        )

    def select(
        self,
        table: str,
        filters: Optional[Dict[str, Any]] = None,
        order: Optional[str] = None,
        columns: str = "*",
    ) -> List[Dict[str, Any]]:
        """
        Select rows from a table.

        Args:
            table: Table name
            filters: Equality filters {column: value}
            order: PostgREST order expression, e.g. "created_at.desc"
            columns: Column list to return

        Returns:
            List of rows as dictionaries
        """
        params = self._filter_params(filters)
        params["select"] = columns
        if order:
            params["order"] = order
        response = self._request("GET", table, params=params)
        return response.json()

    def select_one(self, table: str, filters: Dict[str, Any], columns: str = "*") -> Optional[Dict[str, Any]]:
        """Return the single row matching the filters, or None when nothing matches."""
        rows = self.select(table, filters=filters, columns=columns)
        if len(rows) > 1:
            raise StoreError(f"Expected at most one row in {table}, got {len(rows)}")
        return rows[0] if rows else None

    def insert(self, table: str, values: Dict[str, Any]) -> Dict[str, Any]:
        """Insert one row and return it as stored (with generated columns)."""
        response = self._request(
            "POST",
            table,
            json=values,
            prefer="return=representation",
        )
        rows = response.json()
        if not rows:
            raise StoreError(f"Insert into {table} returned no row")
        return rows[0]

    def update(self, table: str, values: Dict[str, Any], filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Update rows matching the filters. Returns the updated rows."""
        self._require_filters("update", filters)
        response = self._request(
            "PATCH",
            table,
            params=self._filter_params(filters),
            json=values,
            prefer="return=representation",
        )
        return response.json()

    def delete(self, table: str, filters: Dict[str, Any]) -> List[Dict[str, Any]]:
        """Delete rows matching the filters. Returns the deleted rows."""
        self._require_filters("delete", filters)
        response = self._request(
            "DELETE",
            table,
            params=self._filter_params(filters),
            prefer="return=representation",
        )
        return response.json()

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "SupabaseClient":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    @staticmethod
    def _filter_params(filters: Optional[Dict[str, Any]]) -> Dict[str, str]:
        params = {}
        for column, value in (filters or {}).items():
            if isinstance(value, bool):
                value = str(value).lower()
            params[column] = f"eq.{value}"
        return params

    @staticmethod
    def _require_filters(operation: str, filters: Dict[str, Any]) -> None:
        # PostgREST applies unfiltered PATCH/DELETE to the whole table
        if not filters:
            raise ValueError(f"Refusing to {operation} without a filter")

    def _request(
        self,
        method: str,
        table: str,
        params: Optional[Dict[str, str]] = None,
        json: Any = None,
        prefer: Optional[str] = None,
    ) -> httpx.Response:
        headers = {"Prefer": prefer} if prefer else None
        logger.debug(f"{method} /{table} params={params}")

        try:
            response = self._client.request(method, f"/{table}", params=params, json=json, headers=headers)
        except httpx.HTTPError as e:
            logger.error(f"Request to Supabase failed: {e}")
            raise StoreError(f"Could not reach Supabase: {e}") from e

        if response.is_error:
            code = None
            message = response.text or response.reason_phrase
            try:
                body = response.json()
            except ValueError:
                body = None
            if isinstance(body, dict):
                code = body.get("code")
                message = body.get("message") or message
            logger.warning(f"Supabase returned {response.status_code} for {method} /{table}: {message}")
            raise StoreError(message, code=code, status_code=response.status_code)

        return response
