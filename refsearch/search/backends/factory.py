"""Builds one provider per registered category; misconfiguration fails here, at startup."""

import logging

from refsearch.contracts.reference_search_v1 import RegistryError, SourceKind
from refsearch.search.backends.remote import RemoteSearchProvider
from refsearch.search.backends.static import StaticSearchProvider
from refsearch.search.data_client import ReferenceDataClient
from refsearch.search.interface import SearchProvider
from refsearch.search.registry import CategoryRegistry

logger = logging.getLogger(__name__)


def build_providers(
    registry: CategoryRegistry,
    client: ReferenceDataClient | None = None,
    limit: int = 10,
    timeout_seconds: float = 5.0,
) -> dict[str, SearchProvider]:
    providers: dict[str, SearchProvider] = {}
    for descriptor in registry:
        if descriptor.source_kind == SourceKind.STATIC:
            providers[descriptor.key] = StaticSearchProvider(
                descriptor, limit=limit, timeout_seconds=timeout_seconds
            )
        elif descriptor.source_kind == SourceKind.REMOTE:
            if client is None:
                raise RegistryError(
                    f"Category '{descriptor.key}' needs a data client but none was configured"
                )
            providers[descriptor.key] = RemoteSearchProvider(
                descriptor, client, limit=limit, timeout_seconds=timeout_seconds
            )
        else:
            raise RegistryError(
                f"Category '{descriptor.key}' has unsupported source kind '{descriptor.source_kind}'"
            )
    logger.info("Built %s search providers", len(providers))
    return providers
