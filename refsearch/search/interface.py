"""Standard interface for category search providers used by the orchestrator.

Static and remote providers implement `fetch`; `run` is the adapter boundary
that bounds the wait and turns every failure into an empty result set.
"""

import asyncio
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import datetime

from refsearch.contracts.reference_search_v1 import (
    AdapterFailure,
    AdapterQueryError,
    AdapterTimeout,
    CategoryDescriptor,
    SearchResult,
)
from refsearch.core.logger import logger


@dataclass
class CategoryHealth:
    """Per-provider failure record for diagnostics. Never shown as an error."""

    consecutive_failures: int = 0
    total_failures: int = 0
    last_error: str | None = None
    last_failed_at: datetime | None = None

    @property
    def is_healthy(self) -> bool:
        return self.consecutive_failures == 0


@dataclass
class ProviderOutcome:
    results: list[SearchResult] = field(default_factory=list)
    failure: AdapterFailure | None = None
    duration_seconds: float = 0.0

    @property
    def ok(self) -> bool:
        return self.failure is None


class SearchProvider(ABC):
    """Base class for all category search providers."""

    def __init__(
        self,
        descriptor: CategoryDescriptor,
        limit: int = 10,
        timeout_seconds: float = 5.0,
    ):
        self.descriptor = descriptor
        self.limit = max(1, limit)
        self.timeout_seconds = timeout_seconds
        self.health = CategoryHealth()

    @property
    def category(self) -> str:
        return self.descriptor.key

    @abstractmethod
    async def fetch(self, query: str) -> list[SearchResult]:
        """Return matches for a normalized query. May raise."""

    async def search(self, query: str) -> list[SearchResult]:
        """Uniform contract: matches for the query, empty on any failure."""
        return (await self.run(query)).results

    async def run(self, query: str) -> ProviderOutcome:
        t0 = time.monotonic()
        try:
            results = await asyncio.wait_for(self.fetch(query), timeout=self.timeout_seconds)
        except TimeoutError:
            failure: AdapterFailure = AdapterTimeout(
                self.category, f"no response within {self.timeout_seconds:g}s"
            )
            return self._failed(failure, time.monotonic() - t0)
        except AdapterFailure as e:
            return self._failed(e, time.monotonic() - t0)
        except Exception as e:
            reason = str(e) or type(e).__name__
            return self._failed(
                AdapterQueryError(self.category, reason), time.monotonic() - t0
            )

        self.health.consecutive_failures = 0
        return ProviderOutcome(
            results=self._bounded(results),
            duration_seconds=time.monotonic() - t0,
        )

    def _failed(self, failure: AdapterFailure, elapsed: float) -> ProviderOutcome:
        self.health.consecutive_failures += 1
        self.health.total_failures += 1
        self.health.last_error = failure.message
        self.health.last_failed_at = datetime.now()
        logger.category_failed(self.category, failure.kind, failure.message, elapsed)
        return ProviderOutcome(failure=failure, duration_seconds=elapsed)

    def _bounded(self, results: list[SearchResult]) -> list[SearchResult]:
        """Drop duplicate ids (first wins) and cap at the per-category limit."""
        seen: set[str] = set()
        out: list[SearchResult] = []
        for r in results:
            if r.id in seen:
                continue
            seen.add(r.id)
            out.append(r)
            if len(out) >= self.limit:
                break
        return out
