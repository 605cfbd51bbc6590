"""Navigation resolver: category key -> destination id."""

from collections.abc import Callable

from refsearch.contracts.reference_search_v1 import SearchResult
from refsearch.search.registry import CategoryRegistry

Navigator = Callable[[str, SearchResult], None]


class NavigationResolver:
    def __init__(self, registry: CategoryRegistry) -> None:
        self._registry = registry

    def resolve(self, category: str) -> str:
        return self._registry.require(category).navigation_target

    def categories_for(self, target: str) -> list[str]:
        """All categories routed to one destination, in registry order."""
        return [d.key for d in self._registry if d.navigation_target == target]

    def targets(self) -> list[str]:
        return list(dict.fromkeys(d.navigation_target for d in self._registry))
