"""Category registry: immutable, ordered set of category descriptors.

Built once at startup and injected into the orchestrator. Registry order is the
tie-breaker for ranking, so it is preserved exactly as given.
"""

import logging
from collections.abc import Iterable, Iterator

from refsearch.contracts.reference_search_v1 import (
    CategoryDescriptor,
    RegistryError,
    SourceKind,
)

logger = logging.getLogger(__name__)


class CategoryRegistry:
    """Read-only lookup over category descriptors, in registration order."""

    def __init__(self, descriptors: Iterable[CategoryDescriptor]) -> None:
        ordered = tuple(descriptors)
        seen: set[str] = set()
        for descriptor in ordered:
            if not isinstance(descriptor, CategoryDescriptor):
                raise RegistryError(
                    f"Expected CategoryDescriptor, got {type(descriptor).__name__}"
                )
            if descriptor.key in seen:
                raise RegistryError(f"Duplicate category key: '{descriptor.key}'")
            seen.add(descriptor.key)
        self._descriptors = ordered
        self._by_key = {d.key: d for d in ordered}
        self._order = {d.key: i for i, d in enumerate(ordered)}
        logger.info(
            "Registered %s categories (%s static, %s remote)",
            len(ordered),
            len(self.keys_of_kind(SourceKind.STATIC)),
            len(self.keys_of_kind(SourceKind.REMOTE)),
        )

    def __iter__(self) -> Iterator[CategoryDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __contains__(self, key: object) -> bool:
        return key in self._by_key

    def get(self, key: str) -> CategoryDescriptor | None:
        return self._by_key.get(key)

    def require(self, key: str) -> CategoryDescriptor:
        descriptor = self._by_key.get(key)
        if descriptor is None:
            raise RegistryError(f"Unknown category: '{key}'")
        return descriptor

    def keys(self) -> list[str]:
        return [d.key for d in self._descriptors]

    def keys_of_kind(self, kind: SourceKind) -> list[str]:
        return [d.key for d in self._descriptors if d.source_kind == kind]

    def position(self, key: str) -> int:
        """Registry index of a category; unknown keys sort last."""
        return self._order.get(key, len(self._descriptors))

    def label(self, key: str) -> str:
        descriptor = self._by_key.get(key)
        return descriptor.label if descriptor else key

    def needs_remote(self) -> bool:
        return bool(self.keys_of_kind(SourceKind.REMOTE))
