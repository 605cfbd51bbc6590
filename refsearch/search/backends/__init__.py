from refsearch.search.backends.static import StaticSearchProvider
from refsearch.search.backends.remote import RemoteSearchProvider
from refsearch.search.backends.factory import build_providers

__all__ = [
    "StaticSearchProvider",
    "RemoteSearchProvider",
    "build_providers",
]
