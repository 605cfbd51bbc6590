"""Terminal rendering of grouped search results with highlighted matches."""

import os
import sys

from refsearch.contracts.reference_search_v1 import SearchResult
from refsearch.search.engine import GlobalReferenceSearch
from refsearch.search.highlight import Segment
from refsearch.search.models import SearchSnapshot


class Colors:
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    CYAN = "\033[36m"


def use_color() -> bool:
    if os.environ.get("NO_COLOR"):
        return False
    try:
        return sys.stdout.isatty()
    except Exception:
        return False


def colorize(text: str, *colors: str, enabled: bool = True) -> str:
    if not enabled or not colors:
        return text
    return f"{''.join(colors)}{text}{Colors.RESET}"


def render_segments(segments: list[Segment], color: bool = True) -> str:
    out = []
    for seg in segments:
        if not seg.is_match:
            out.append(seg.text)
        elif color:
            out.append(colorize(seg.text, Colors.BOLD, Colors.YELLOW))
        else:
            out.append(f"[{seg.text}]")
    return "".join(out)


def numbered_results(snapshot: SearchSnapshot) -> list[SearchResult]:
    """Results flattened in display order; index + 1 is the number shown."""
    return [r for _, results in snapshot.ranked_groups for r in results]


def format_results(
    engine: GlobalReferenceSearch, snapshot: SearchSnapshot, color: bool | None = None
) -> str:
    color = use_color() if color is None else color
    if not snapshot.has_searched:
        return colorize(
            f"Type at least {engine.min_query_length} characters to search.",
            Colors.DIM,
            enabled=color,
        )
    if snapshot.total_results == 0:
        return colorize(f"No matches for '{snapshot.query}'.", Colors.DIM, enabled=color)

    noun = "result" if snapshot.total_results == 1 else "results"
    lines = [
        colorize(
            f"{snapshot.total_results} {noun} for '{snapshot.query}'",
            Colors.BOLD,
            enabled=color,
        )
    ]
    n = 0
    for category, results in snapshot.ranked_groups:
        lines.append("")
        lines.append(
            colorize(f"{engine.label(category)} ({len(results)})", Colors.CYAN, enabled=color)
        )
        for r in results:
            n += 1
            parts = []
            if r.code:
                parts.append(render_segments(engine.highlight(r.code), color))
            parts.append(render_segments(engine.highlight(r.name), color))
            if r.extra:
                parts.append(
                    colorize("· ", Colors.DIM, enabled=color)
                    + render_segments(engine.highlight(r.extra), color)
                )
            lock = "" if r.is_editable else colorize("  (read-only)", Colors.DIM, enabled=color)
            lines.append(f"  {n:>2}. " + "  ".join(parts) + lock)
    return "\n".join(lines)
