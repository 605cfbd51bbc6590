"""Result aggregator: per-category groups, ranked by match count then registry order.

Arrival order under concurrency is non-deterministic, so it never influences
ordering; the registry index is the only tie-breaker.
"""

from refsearch.contracts.reference_search_v1 import SearchResult
from refsearch.search.registry import CategoryRegistry


class ResultAggregator:
    def __init__(self, registry: CategoryRegistry) -> None:
        self._registry = registry
        self._groups: dict[str, list[SearchResult]] = {}

    def put(self, category: str, results: list[SearchResult]) -> None:
        """Replace a category's contribution. Empty contributions leave no entry."""
        if results:
            self._groups[category] = list(results)
        else:
            self._groups.pop(category, None)

    def reset(self) -> None:
        self._groups = {}

    @property
    def total_results(self) -> int:
        return sum(len(v) for v in self._groups.values())

    def grouped_results(self) -> dict[str, list[SearchResult]]:
        """Copy of the groups, keyed in registry order."""
        keys = sorted(self._groups, key=self._registry.position)
        return {k: list(self._groups[k]) for k in keys}

    def ranked(self) -> list[tuple[str, list[SearchResult]]]:
        """Groups sorted by descending match count; ties keep registry order."""
        keys = sorted(
            self._groups,
            key=lambda k: (-len(self._groups[k]), self._registry.position(k)),
        )
        return [(k, list(self._groups[k])) for k in keys]
