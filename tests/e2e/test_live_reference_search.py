"""Live checks against the configured reference-data API (SUPABASE_URL)."""

import pytest
import pytest_asyncio

from refsearch.core.bootstrap import create_data_client, create_engine
from refsearch.core.config import config
from refsearch.search.catalog import default_registry

pytestmark = pytest.mark.integration


@pytest_asyncio.fixture
async def client():
    if not config.supabase_url:
        pytest.skip("SUPABASE_URL is not set")
    client = create_data_client()
    yield client
    await client.close()


@pytest.mark.asyncio
async def test_currency_table_answers_bounded_search(client):
    rows = await client.search_table(
        table="currencies",
        columns=["id", "code", "name", "symbol"],
        match_columns=["code", "name"],
        query="us",
        limit=5,
    )
    assert len(rows) <= 5
    assert all("us" in f"{r.get('code')} {r.get('name')}".lower() for r in rows)


@pytest.mark.asyncio
async def test_default_catalog_settles_without_failures(client):
    engine = create_engine(registry=default_registry(), client=client)
    engine.set_query("an")
    engine.submit()
    snapshot = await engine.wait_settled()

    assert snapshot.has_searched is True
    assert snapshot.is_searching is False
    assert snapshot.failed_categories == []
    assert snapshot.total_results == sum(len(v) for v in snapshot.grouped_results.values())
