"""CLI interface: interactive search prompt, /help /clear /open /quit."""

import asyncio
import readline  # noqa: F401  (line editing and history for input())

from refsearch.contracts.reference_search_v1 import RegistryError
from refsearch.core.bootstrap import create_data_client, create_engine
from refsearch.core.logger import logger
from refsearch.interfaces.render import (
    Colors,
    colorize,
    format_results,
    numbered_results,
    use_color,
)
from refsearch.search.engine import GlobalReferenceSearch
from refsearch.search.models import SearchSnapshot


def print_help():
    help_text = """
    ╭─────────────────────────────────────────╮
    │  Commands                               │
    ├─────────────────────────────────────────┤
    │  <text>    - Search all categories      │
    │  /open N   - Open result number N       │
    │  /clear    - Clear the search           │
    │  /help     - Show this help             │
    │  /quit     - Exit                       │
    │  Ctrl+C    - Exit                       │
    ╰─────────────────────────────────────────╯
    """
    print(colorize(help_text, Colors.CYAN, enabled=use_color()))


def _navigate(target: str, result) -> None:
    label = f"{result.code} {result.name}" if result.code else result.name
    print(colorize(f"→ {target}: {label}", Colors.GREEN, enabled=use_color()))


async def _handle_line(
    engine: GlobalReferenceSearch, line: str, last: SearchSnapshot | None
) -> tuple[bool, SearchSnapshot | None]:
    """Process one input line. Returns (keep_running, latest snapshot)."""
    text = line.strip()
    if text in ("/quit", "/exit"):
        return False, last
    if text == "/help":
        print_help()
        return True, last
    if text == "/clear" or not text:
        engine.clear_search()
        return True, None
    if text.startswith("/open"):
        arg = text[len("/open") :].strip()
        results = numbered_results(last) if last else []
        if not arg.isdigit() or not 1 <= int(arg) <= len(results):
            print(colorize("Usage: /open N (N from the last result list)", Colors.RED, enabled=use_color()))
            return True, last
        engine.open_result(results[int(arg) - 1])
        return True, last
    if text.startswith("/"):
        print(colorize(f"Unknown command: {text}", Colors.RED, enabled=use_color()))
        return True, last

    engine.set_query(text)
    engine.submit()
    snapshot = await engine.wait_settled()
    print(format_results(engine, snapshot))
    return True, snapshot


async def run_cli() -> int:
    client = create_data_client()
    try:
        try:
            engine = create_engine(client=client, navigator=_navigate)
        except RegistryError as e:
            print(colorize(f"  Error: {e}", Colors.RED, enabled=use_color()))
            return 2
        print_help()
        prompt = colorize("search › ", Colors.BOLD, enabled=use_color())
        last: SearchSnapshot | None = None
        running = True
        while running:
            try:
                line = await asyncio.to_thread(input, prompt)
            except (EOFError, KeyboardInterrupt):
                print()
                break
            try:
                running, last = await _handle_line(engine, line, last)
            except Exception as e:
                logger.error("Search command failed", exception=e)
        return 0
    finally:
        if client is not None:
            await client.close()
