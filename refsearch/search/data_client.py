"""Reference data client: bounded, filtered lookups against the Supabase REST API.

This is the per-category "quick search" path. It is distinct from the full,
unfiltered fetch each browsing tab performs; every request carries a row limit.
"""

import logging
import time
from typing import Any

import httpx

from refsearch.contracts.reference_search_v1 import AdapterQueryError

logger = logging.getLogger(__name__)

# Characters PostgREST treats as syntax inside logic-tree values.
_POSTGREST_RESERVED = set(',.:()"\\ ')


def escape_like(text: str) -> str:
    """Escape LIKE metacharacters so the pattern matches the text literally.

    PostgREST uses `*` as its wildcard alias; a literal `*` is widened to a
    single-character wildcard and callers re-check rows client-side.
    """
    escaped = text.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
    return escaped.replace("*", "_")


def quote_value(value: str) -> str:
    """Double-quote a logic-tree value when it contains PostgREST reserved characters."""
    if not any(ch in _POSTGREST_RESERVED for ch in value):
        return value
    inner = value.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{inner}"'


def build_search_params(
    columns: list[str],
    match_columns: list[str],
    query: str,
    limit: int,
    active_column: str | None = "is_active",
    eq_filters: dict[str, str] | None = None,
    order_column: str | None = None,
) -> list[tuple[str, str]]:
    """Query-string pairs for one bounded ilike OR search."""
    pattern = quote_value(f"*{escape_like(query)}*")
    predicate = ",".join(f"{col}.ilike.{pattern}" for col in match_columns)
    params: list[tuple[str, str]] = [("select", ",".join(columns))]
    if active_column:
        params.append((active_column, "eq.true"))
    for col, value in (eq_filters or {}).items():
        params.append((col, f"eq.{value}"))
    params.append(("or", f"({predicate})"))
    if order_column:
        params.append(("order", f"{order_column}.asc"))
    params.append(("limit", str(limit)))
    return params


class ReferenceDataClient:
    """Thin async client over `<supabase_url>/rest/v1/<table>`."""

    def __init__(
        self,
        base_url: str,
        api_key: str = "",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self._base_url = base_url.rstrip("/")
        if self._base_url and not self._base_url.endswith("/rest/v1"):
            self._base_url = self._base_url + "/rest/v1"
        headers = {"Accept": "application/json"}
        if api_key:
            headers["apikey"] = api_key
            headers["Authorization"] = f"Bearer {api_key}"
        self._client = httpx.AsyncClient(
            base_url=self._base_url,
            headers=headers,
            timeout=timeout,
            transport=transport,
        )

    @property
    def base_url(self) -> str:
        return self._base_url

    async def search_table(
        self,
        table: str,
        columns: list[str],
        match_columns: list[str],
        query: str,
        limit: int = 10,
        active_column: str | None = "is_active",
        eq_filters: dict[str, str] | None = None,
        order_column: str | None = None,
    ) -> list[dict[str, Any]]:
        """Run one bounded search and return raw rows. Raises AdapterQueryError."""
        params = build_search_params(
            columns=columns,
            match_columns=match_columns,
            query=query,
            limit=limit,
            active_column=active_column,
            eq_filters=eq_filters,
            order_column=order_column,
        )
        t0 = time.monotonic()
        try:
            response = await self._client.get(f"/{table}", params=params)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning(
                "Reference search on '%s' rejected: HTTP %s", table, e.response.status_code
            )
            raise AdapterQueryError(table, f"HTTP {e.response.status_code}") from e
        except httpx.HTTPError as e:
            logger.warning("Reference search on '%s' failed: %s", table, e)
            raise AdapterQueryError(table, str(e) or type(e).__name__) from e
        except ValueError as e:
            raise AdapterQueryError(table, "invalid JSON response") from e
        elapsed_ms = round((time.monotonic() - t0) * 1000, 1)

        if not isinstance(data, list):
            raise AdapterQueryError(table, "expected a JSON array of rows")
        logger.debug(
            "Reference search on '%s' returned %s rows in %.1fms", table, len(data), elapsed_ms
        )
        return [row for row in data if isinstance(row, dict)]

    async def close(self) -> None:
        await self._client.aclose()
