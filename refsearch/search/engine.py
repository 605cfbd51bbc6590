"""Global reference search: the surface the console's search bar binds to.

Wires keystrokes through the debounce controller into the orchestrator. Only a
change of the debounced query starts a search; `clear_search` resets both halves
synchronously.
"""

from collections.abc import Callable

from refsearch.contracts.reference_search_v1 import SearchResult
from refsearch.search.highlight import Segment, highlight_segments
from refsearch.search.models import SearchSnapshot
from refsearch.search.navigation import NavigationResolver, Navigator
from refsearch.search.orchestrator import SearchOrchestrator
from refsearch.search.query_state import QueryStateController


class GlobalReferenceSearch:
    def __init__(
        self,
        orchestrator: SearchOrchestrator,
        query_state: QueryStateController,
        navigator: Navigator | None = None,
    ):
        self._orchestrator = orchestrator
        self._query_state = query_state
        self._resolver = NavigationResolver(orchestrator.registry)
        self._navigator = navigator
        self._query_state.subscribe(self._orchestrator.search)

    @property
    def query(self) -> str:
        return self._query_state.query

    @property
    def debounced_query(self) -> str:
        return self._query_state.debounced_query

    @property
    def is_searching(self) -> bool:
        return self._orchestrator.is_searching

    @property
    def has_searched(self) -> bool:
        return self._orchestrator.has_searched

    @property
    def total_results(self) -> int:
        return self._orchestrator.total_results

    @property
    def grouped_results(self) -> dict[str, list[SearchResult]]:
        return self._orchestrator.grouped_results

    @property
    def ranked_groups(self) -> list[tuple[str, list[SearchResult]]]:
        return self._orchestrator.ranked_groups

    @property
    def failed_categories(self) -> list[str]:
        return self._orchestrator.failed_categories

    @property
    def min_query_length(self) -> int:
        return self._orchestrator.min_query_length

    def label(self, category: str) -> str:
        return self._orchestrator.registry.label(category)

    def set_query(self, text: str) -> None:
        self._query_state.set_query(text)

    def submit(self) -> None:
        """Search the current input now instead of waiting for the quiet interval."""
        self._query_state.flush()

    def clear_search(self) -> None:
        self._query_state.clear()
        self._orchestrator.clear()

    def snapshot(self) -> SearchSnapshot:
        return self._orchestrator.snapshot()

    def subscribe(self, listener: Callable[[SearchSnapshot], None]) -> Callable[[], None]:
        return self._orchestrator.subscribe(listener)

    async def wait_settled(self) -> SearchSnapshot:
        return await self._orchestrator.wait_settled()

    def highlight(self, text: str) -> list[Segment]:
        return highlight_segments(
            text, self.debounced_query, min_length=self.min_query_length
        )

    def open_result(self, result: SearchResult) -> str:
        target = self._resolver.resolve(result.category)
        if self._navigator is not None:
            self._navigator(target, result)
        return target
