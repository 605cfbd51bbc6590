"""Remote provider: one bounded ilike query per search against the category's table."""

from refsearch.contracts.reference_search_v1 import (
    AdapterQueryError,
    CategoryDescriptor,
    RemoteSource,
    SearchResult,
    record_matches,
)
from refsearch.search.data_client import ReferenceDataClient
from refsearch.search.interface import SearchProvider


class RemoteSearchProvider(SearchProvider):
    def __init__(
        self,
        descriptor: CategoryDescriptor,
        client: ReferenceDataClient,
        limit: int = 10,
        timeout_seconds: float = 5.0,
    ):
        if not isinstance(descriptor.source, RemoteSource):
            raise TypeError(f"Category '{descriptor.key}' is not a remote source")
        super().__init__(descriptor, limit=limit, timeout_seconds=timeout_seconds)
        self._client = client
        self._source = descriptor.source

    async def fetch(self, query: str) -> list[SearchResult]:
        try:
            rows = await self._search_table(query)
        except AdapterQueryError as e:
            # Report under the category key; several categories share one table.
            raise AdapterQueryError(self.category, e.message) from e
        # The server pattern may be wider than a literal match (see escape_like).
        return [
            SearchResult.from_record(self.descriptor, row)
            for row in rows
            if record_matches(self.descriptor, row, query)
        ]

    async def _search_table(self, query: str) -> list[dict]:
        return await self._client.search_table(
            table=self._source.table,
            columns=self.descriptor.field_map.columns(),
            match_columns=self.descriptor.match_columns(),
            query=query,
            limit=self.limit,
            active_column=self._source.active_column,
            eq_filters=self._source.eq_filters,
            order_column=self._source.order_column,
        )
