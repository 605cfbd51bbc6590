from __future__ import annotations

import pytest

from fakes import rows, static_category
from refsearch.contracts.reference_search_v1 import RegistryError
from refsearch.core import bootstrap
from refsearch.interfaces.oneshot import run_oneshot
from refsearch.search.registry import CategoryRegistry

COUNTRIES = static_category("countries", rows(("US", "United States"), ("FR", "France")))


@pytest.mark.asyncio
async def test_run_oneshot_prints_grouped_results(monkeypatch, capsys):
    monkeypatch.setattr("refsearch.interfaces.oneshot.create_data_client", lambda: None)
    monkeypatch.setattr(
        "refsearch.interfaces.oneshot.create_engine",
        lambda client=None: bootstrap.create_engine(
            registry=CategoryRegistry([COUNTRIES]), client=client
        ),
    )
    monkeypatch.setenv("NO_COLOR", "1")

    code = await run_oneshot("  france ")

    out = capsys.readouterr().out
    assert code == 0
    assert "1 result for 'france'" in out
    assert "Countries (1)" in out


@pytest.mark.asyncio
async def test_run_oneshot_rejects_empty_query(capsys):
    code = await run_oneshot("   ")
    out = capsys.readouterr().out
    assert code == 2
    assert "must not be empty" in out


@pytest.mark.asyncio
async def test_run_oneshot_rejects_short_query(capsys):
    code = await run_oneshot("u")
    out = capsys.readouterr().out
    assert code == 2
    assert "at least" in out


@pytest.mark.asyncio
async def test_run_oneshot_reports_configuration_errors(monkeypatch, capsys):
    def broken(client=None):
        raise RegistryError("Category 'currencies' needs a data client but none was configured")

    monkeypatch.setattr("refsearch.interfaces.oneshot.create_data_client", lambda: None)
    monkeypatch.setattr("refsearch.interfaces.oneshot.create_engine", broken)

    code = await run_oneshot("usd")
    out = capsys.readouterr().out
    assert code == 2
    assert "needs a data client" in out
