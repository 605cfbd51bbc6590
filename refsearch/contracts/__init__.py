from refsearch.contracts.reference_search_v1 import (
    AdapterFailure,
    AdapterQueryError,
    AdapterTimeout,
    CategoryDescriptor,
    FieldMap,
    ReferenceSearchError,
    RegistryError,
    RemoteSource,
    SearchResult,
    SourceKind,
    StaticSource,
)

__all__ = [
    "AdapterFailure",
    "AdapterQueryError",
    "AdapterTimeout",
    "CategoryDescriptor",
    "FieldMap",
    "ReferenceSearchError",
    "RegistryError",
    "RemoteSource",
    "SearchResult",
    "SourceKind",
    "StaticSource",
]
