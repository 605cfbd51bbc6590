"""Engine wiring at startup: registry, data client, providers, debounce scheduler."""

from refsearch.core.config import Config, config
from refsearch.core.logger import logger
from refsearch.search.backends import build_providers
from refsearch.search.catalog import default_registry
from refsearch.search.data_client import ReferenceDataClient
from refsearch.search.engine import GlobalReferenceSearch
from refsearch.search.navigation import Navigator
from refsearch.search.orchestrator import SearchOrchestrator
from refsearch.search.query_state import QueryStateController
from refsearch.search.registry import CategoryRegistry
from refsearch.search.scheduler import LoopScheduler, Scheduler


def create_data_client(settings: Config | None = None) -> ReferenceDataClient | None:
    """Data client for remote categories, or None when SUPABASE_URL is unset."""
    settings = settings or config
    if not settings.supabase_url:
        return None
    return ReferenceDataClient(
        settings.supabase_url,
        api_key=settings.supabase_anon_key,
        timeout=settings.http_timeout_seconds,
    )


def create_engine(
    registry: CategoryRegistry | None = None,
    client: ReferenceDataClient | None = None,
    scheduler: Scheduler | None = None,
    navigator: Navigator | None = None,
    settings: Config | None = None,
) -> GlobalReferenceSearch:
    """Build a ready-to-use engine. Raises RegistryError on misconfiguration."""
    settings = settings or config
    if registry is None:
        registry = default_registry()
    for problem in settings.validate(needs_remote=registry.needs_remote() and client is None):
        logger.warning(problem)

    providers = build_providers(
        registry,
        client=client,
        limit=settings.result_limit,
        timeout_seconds=settings.adapter_timeout_seconds,
    )
    orchestrator = SearchOrchestrator(
        registry, providers, min_query_length=settings.min_query_length
    )
    query_state = QueryStateController(
        scheduler or LoopScheduler(), delay_seconds=settings.debounce_seconds
    )
    logger.info(
        f"Reference search ready: {len(registry)} categories, "
        f"debounce {settings.debounce_ms}ms, limit {settings.result_limit}/category"
    )
    return GlobalReferenceSearch(orchestrator, query_state, navigator=navigator)
