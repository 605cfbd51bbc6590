"""Federated search orchestrator: fan-out, stale-result suppression, incremental merge.

Pipeline per debounced query:
  1. Normalize; below the minimum length nothing runs (idle, no session)
  2. Bump the generation and cancel the previous generation's tasks
  3. Dispatch one task per registered category, concurrently
  4. As each category settles, merge it (if its generation is still current)
  5. When no category is pending, the session is settled

All state is mutated on the event loop thread from task completions, so there is
a single writer and no locking.
"""

import asyncio
import time
from collections.abc import Callable, Mapping

from refsearch.contracts.reference_search_v1 import RegistryError, SearchResult
from refsearch.core.logger import logger
from refsearch.search.aggregator import ResultAggregator
from refsearch.search.interface import ProviderOutcome, SearchProvider
from refsearch.search.models import CategoryStatus, SearchPhase, SearchSnapshot
from refsearch.search.registry import CategoryRegistry

SnapshotListener = Callable[[SearchSnapshot], None]

MIN_QUERY_LENGTH = 2


def normalize_query(query: str | None) -> str:
    return (query or "").strip()


class SearchOrchestrator:
    """Runs one search session at a time over every registered category."""

    def __init__(
        self,
        registry: CategoryRegistry,
        providers: Mapping[str, SearchProvider],
        min_query_length: int = MIN_QUERY_LENGTH,
    ):
        missing = [key for key in registry.keys() if key not in providers]
        if missing:
            raise RegistryError(f"No search provider for categories: {missing}")
        unknown = [key for key in providers if key not in registry]
        if unknown:
            raise RegistryError(f"Providers registered for unknown categories: {unknown}")
        self._registry = registry
        self._providers = dict(providers)
        self._min_query_length = max(1, min_query_length)
        self._aggregator = ResultAggregator(registry)
        self._listeners: list[SnapshotListener] = []

        self._generation = 0
        self._query = ""
        self._phase = SearchPhase.IDLE
        self._has_searched = False
        self._statuses: dict[str, CategoryStatus] = {}
        self._tasks: dict[str, asyncio.Task] = {}
        self._started_at = 0.0

    # -- read-only state ---------------------------------------------------

    @property
    def registry(self) -> CategoryRegistry:
        return self._registry

    @property
    def min_query_length(self) -> int:
        return self._min_query_length

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def query(self) -> str:
        return self._query

    @property
    def phase(self) -> SearchPhase:
        return self._phase

    @property
    def is_searching(self) -> bool:
        return any(s == CategoryStatus.PENDING for s in self._statuses.values())

    @property
    def has_searched(self) -> bool:
        return self._has_searched

    @property
    def total_results(self) -> int:
        return self._aggregator.total_results

    @property
    def grouped_results(self) -> dict[str, list[SearchResult]]:
        return self._aggregator.grouped_results()

    @property
    def ranked_groups(self) -> list[tuple[str, list[SearchResult]]]:
        return self._aggregator.ranked()

    @property
    def statuses(self) -> dict[str, CategoryStatus]:
        return dict(self._statuses)

    @property
    def failed_categories(self) -> list[str]:
        return [k for k in self._registry.keys() if self._statuses.get(k) == CategoryStatus.FAILED]

    def snapshot(self) -> SearchSnapshot:
        return SearchSnapshot(
            query=self._query,
            generation=self._generation,
            phase=self._phase,
            is_searching=self.is_searching,
            has_searched=self._has_searched,
            total_results=self.total_results,
            grouped_results=self.grouped_results,
            ranked_groups=self.ranked_groups,
            statuses=self.statuses,
            failed_categories=self.failed_categories,
        )

    def subscribe(self, listener: SnapshotListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    # -- transitions -------------------------------------------------------

    def search(self, query: str) -> None:
        """Start a new session for `query`, superseding any in-flight one.

        Must be called from within a running event loop when the query is long
        enough to dispatch.
        """
        normalized = normalize_query(query)
        self._supersede()
        self._query = normalized

        if len(normalized) < self._min_query_length:
            self._phase = SearchPhase.IDLE
            self._has_searched = False
            self._notify()
            return

        generation = self._generation
        keys = self._registry.keys()
        self._phase = SearchPhase.SEARCHING
        self._statuses = {key: CategoryStatus.PENDING for key in keys}
        self._started_at = time.monotonic()
        logger.search_dispatched(generation, normalized, keys)

        for key in keys:
            self._tasks[key] = asyncio.create_task(
                self._run_category(generation, key, normalized),
                name=f"refsearch-{key}-{generation}",
            )
        if not keys:
            self._settle()
        self._notify()

    def clear(self) -> None:
        """Back to idle immediately; in-flight results are discarded on arrival."""
        self._supersede()
        self._query = ""
        self._phase = SearchPhase.IDLE
        self._has_searched = False
        logger.search_cleared(self._generation)
        self._notify()

    async def wait_settled(self) -> SearchSnapshot:
        """Wait until no category task is outstanding, following supersessions."""
        while True:
            tasks = [t for t in self._tasks.values() if not t.done()]
            if not tasks:
                break
            await asyncio.gather(*tasks, return_exceptions=True)
        return self.snapshot()

    # -- internals ---------------------------------------------------------

    def _supersede(self) -> None:
        self._generation += 1
        for task in self._tasks.values():
            if not task.done():
                task.cancel()
        self._tasks = {}
        self._statuses = {}
        self._aggregator.reset()

    async def _run_category(self, generation: int, key: str, query: str) -> None:
        outcome = await self._providers[key].run(query)
        self._on_category_settled(generation, key, outcome)

    def _on_category_settled(self, generation: int, key: str, outcome: ProviderOutcome) -> None:
        if generation != self._generation:
            logger.stale_discarded(generation, self._generation, key)
            return

        self._tasks.pop(key, None)
        self._aggregator.put(key, outcome.results)
        self._statuses[key] = CategoryStatus.DONE if outcome.ok else CategoryStatus.FAILED
        if outcome.ok:
            logger.category_settled(generation, key, len(outcome.results), outcome.duration_seconds)

        if not self.is_searching:
            self._settle()
        self._notify()

    def _settle(self) -> None:
        self._phase = SearchPhase.SETTLED
        self._has_searched = True
        logger.search_settled(
            self._generation,
            self.total_results,
            self.failed_categories,
            time.monotonic() - self._started_at,
        )

    def _notify(self) -> None:
        if not self._listeners:
            return
        snap = self.snapshot()
        for listener in list(self._listeners):
            try:
                listener(snap)
            except Exception as e:
                logger.error("Search listener failed", exception=e)
