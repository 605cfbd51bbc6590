"""Static provider: substring search over an in-memory reference list."""

from refsearch.contracts.reference_search_v1 import (
    CategoryDescriptor,
    SearchResult,
    StaticSource,
    record_matches,
)
from refsearch.search.interface import SearchProvider


class StaticSearchProvider(SearchProvider):
    def __init__(self, descriptor: CategoryDescriptor, limit: int = 10, timeout_seconds: float = 5.0):
        if not isinstance(descriptor.source, StaticSource):
            raise TypeError(f"Category '{descriptor.key}' is not a static source")
        super().__init__(descriptor, limit=limit, timeout_seconds=timeout_seconds)
        self._records = descriptor.source.records

    async def fetch(self, query: str) -> list[SearchResult]:
        out: list[SearchResult] = []
        for record in self._records:
            if not record_matches(self.descriptor, record, query):
                continue
            out.append(SearchResult.from_record(self.descriptor, record))
            if len(out) >= self.limit:
                break
        return out
