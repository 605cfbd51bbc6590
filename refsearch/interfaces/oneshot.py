"""One-shot interface: run a single search, print grouped results, exit."""

from __future__ import annotations

import asyncio

from refsearch.contracts.reference_search_v1 import RegistryError
from refsearch.core.bootstrap import create_data_client, create_engine
from refsearch.core.config import config
from refsearch.interfaces.render import format_results


async def run_oneshot(query: str) -> int:
    text = (query or "").strip()
    if not text:
        print("Error: query must not be empty")
        return 2
    if len(text) < config.min_query_length:
        print(f"Error: query must be at least {config.min_query_length} characters")
        return 2

    client = create_data_client()
    try:
        try:
            engine = create_engine(client=client)
        except RegistryError as e:
            print(f"Error: {e}")
            return 2
        engine.set_query(text)
        engine.submit()
        snapshot = await engine.wait_settled()
        print(format_results(engine, snapshot))
        return 0
    finally:
        if client is not None:
            await client.close()


def main(query: str) -> int:
    return asyncio.run(run_oneshot(query=query))
