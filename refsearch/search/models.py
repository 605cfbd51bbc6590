"""Search session state exposed to the UI layer."""

from dataclasses import dataclass, field
from enum import StrEnum

from refsearch.contracts.reference_search_v1 import SearchResult


class SearchPhase(StrEnum):
    IDLE = "idle"
    SEARCHING = "searching"
    SETTLED = "settled"


class CategoryStatus(StrEnum):
    PENDING = "pending"
    DONE = "done"
    FAILED = "failed"


@dataclass(frozen=True)
class SearchSnapshot:
    """Point-in-time view of a search session; safe to hand to renderers."""

    query: str = ""
    generation: int = 0
    phase: SearchPhase = SearchPhase.IDLE
    is_searching: bool = False
    has_searched: bool = False
    total_results: int = 0
    grouped_results: dict[str, list[SearchResult]] = field(default_factory=dict)
    ranked_groups: list[tuple[str, list[SearchResult]]] = field(default_factory=list)
    statuses: dict[str, CategoryStatus] = field(default_factory=dict)
    failed_categories: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Settled with nothing to show (also the all-categories-failed outcome)."""
        return self.has_searched and not self.is_searching and self.total_results == 0
