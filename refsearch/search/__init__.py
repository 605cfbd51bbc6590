"""Global reference search: registry-driven federated search over HR reference data."""

from refsearch.contracts.reference_search_v1 import SearchResult
from refsearch.search.engine import GlobalReferenceSearch
from refsearch.search.interface import SearchProvider
from refsearch.search.models import SearchSnapshot
from refsearch.search.orchestrator import SearchOrchestrator
from refsearch.search.registry import CategoryRegistry

__all__ = [
    "CategoryRegistry",
    "GlobalReferenceSearch",
    "SearchOrchestrator",
    "SearchProvider",
    "SearchResult",
    "SearchSnapshot",
]
