import pytest

from fakes import providers_for, rows, static_category
from refsearch.core.bootstrap import create_engine
from refsearch.core.config import config
from refsearch.search.engine import GlobalReferenceSearch
from refsearch.search.orchestrator import SearchOrchestrator
from refsearch.search.query_state import QueryStateController
from refsearch.search.registry import CategoryRegistry

COUNTRIES = static_category(
    "countries", rows(("US", "United States"), ("FR", "France")), editable=False
)
CURRENCIES = static_category("currencies", rows(("USD", "US Dollar"), ("EUR", "Euro")))
LEAVE = static_category("lookup_leave_type", rows(("AL", "Annual Leave")), target="lookups")
CONTRACTS = static_category(
    "lookup_contract_type", rows(("FT", "Full Time")), target="lookups"
)


def _engine(scheduler, navigator=None) -> GlobalReferenceSearch:
    descriptors = (COUNTRIES, CURRENCIES, LEAVE, CONTRACTS)
    registry = CategoryRegistry(descriptors)
    orchestrator = SearchOrchestrator(registry, providers_for(*descriptors))
    return GlobalReferenceSearch(
        orchestrator, QueryStateController(scheduler, delay_seconds=0.3), navigator=navigator
    )


@pytest.mark.asyncio
async def test_typing_searches_once_after_quiet_interval(scheduler):
    engine = _engine(scheduler)
    for prefix in ("u", "us"):
        engine.set_query(prefix)

    assert engine.query == "us"
    assert engine.debounced_query == ""
    assert engine.has_searched is False
    assert engine.is_searching is False

    scheduler.advance(0.3)
    assert engine.is_searching is True
    await engine.wait_settled()

    assert engine.has_searched is True
    assert engine.total_results == 2
    assert list(engine.grouped_results) == ["countries", "currencies"]


@pytest.mark.asyncio
async def test_clearing_resets_everything_synchronously(scheduler):
    engine = _engine(scheduler)
    engine.set_query("us")
    scheduler.advance(0.3)
    engine.set_query("usd")

    engine.clear_search()
    assert engine.query == ""
    assert engine.debounced_query == ""
    assert engine.is_searching is False
    assert engine.has_searched is False
    assert engine.total_results == 0
    assert engine.grouped_results == {}

    scheduler.advance(1.0)
    snap = await engine.wait_settled()
    assert snap.total_results == 0
    assert snap.has_searched is False


@pytest.mark.asyncio
async def test_backspacing_below_threshold_returns_to_idle(scheduler):
    engine = _engine(scheduler)
    engine.set_query("eu")
    scheduler.advance(0.3)
    await engine.wait_settled()
    assert engine.total_results == 1

    engine.set_query("e")
    scheduler.advance(0.3)
    assert engine.has_searched is False
    assert engine.total_results == 0


@pytest.mark.asyncio
async def test_submit_searches_without_waiting(scheduler):
    engine = _engine(scheduler)
    engine.set_query("france")
    engine.submit()
    snap = await engine.wait_settled()
    assert [r.id for r in snap.grouped_results["countries"]] == ["FR"]
    assert scheduler.pending == 0


@pytest.mark.asyncio
async def test_open_result_resolves_shared_destination(scheduler):
    opened = []
    engine = _engine(scheduler, navigator=lambda target, result: opened.append((target, result.id)))
    engine.set_query("time")
    engine.submit()
    snap = await engine.wait_settled()

    result = snap.grouped_results["lookup_contract_type"][0]
    assert engine.open_result(result) == "lookups"
    assert opened == [("lookups", "FT")]
    assert engine.label("lookup_contract_type") == "Lookup Contract Type"


@pytest.mark.asyncio
async def test_highlight_uses_settled_query(scheduler):
    engine = _engine(scheduler)
    assert [s.is_match for s in engine.highlight("United States")] == [False]

    engine.set_query("STAT")
    scheduler.advance(0.3)
    await engine.wait_settled()
    segments = engine.highlight("United States")
    assert [(s.text, s.is_match) for s in segments] == [
        ("United ", False),
        ("Stat", True),
        ("es", False),
    ]


@pytest.mark.asyncio
async def test_create_engine_static_only_registry_needs_no_client(scheduler):
    engine = create_engine(registry=CategoryRegistry([COUNTRIES]), scheduler=scheduler)
    assert engine.min_query_length == config.min_query_length
    engine.set_query("france")
    scheduler.advance(config.debounce_seconds)
    snap = await engine.wait_settled()
    assert snap.total_results == 1


@pytest.mark.asyncio
async def test_trailing_space_keeps_current_results(scheduler):
    engine = _engine(scheduler)
    engine.set_query("us")
    scheduler.advance(0.3)
    first = await engine.wait_settled()

    engine.set_query("us ")
    scheduler.advance(0.3)
    assert engine.is_searching is False
    assert engine.snapshot().generation == first.generation
    assert engine.total_results == 2
