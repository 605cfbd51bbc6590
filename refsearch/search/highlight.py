"""Highlight helper: split display text into matched / unmatched segments."""

import re
from typing import NamedTuple


class Segment(NamedTuple):
    text: str
    is_match: bool


def highlight_segments(text: str, query: str, min_length: int = 2) -> list[Segment]:
    """Mark case-insensitive literal occurrences of `query` in `text`.

    The query is escaped before it becomes a pattern, so `a.b` only matches the
    literal text `a.b`. Queries shorter than `min_length` highlight nothing.
    """
    if not text:
        return []
    needle = (query or "").strip()
    if len(needle) < min_length:
        return [Segment(text, False)]
    pattern = re.compile(re.escape(needle), re.IGNORECASE)
    segments: list[Segment] = []
    pos = 0
    for match in pattern.finditer(text):
        if match.start() > pos:
            segments.append(Segment(text[pos : match.start()], False))
        segments.append(Segment(match.group(0), True))
        pos = match.end()
    if pos < len(text):
        segments.append(Segment(text[pos:], False))
    return segments
