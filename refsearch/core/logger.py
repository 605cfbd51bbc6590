"""Structured logging: console lines plus a JSON-lines search event log.

Every search transition is appended to `<logs_dir>/search.log` as one JSON object
per line; a short human line goes to the `refsearch` console logger.
"""

import json
import logging
import os
import sys
import threading
from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any

from refsearch.core.config import config

_LOGGING_KWARGS = frozenset({"exc_info", "stack_info", "stacklevel", "extra"})

# 256-color foreground codes per role
_PALETTE = {
    "dim": "\033[38;5;239m",
    "category": "\033[38;5;81m",
    "ok": "\033[38;5;78m",
    "fail": "\033[38;5;203m",
    "duration": "\033[38;5;221m",
    "query": "\033[38;5;245m",
}


def _paint(role: str, text: str) -> str:
    if os.environ.get("NO_COLOR") or not sys.stdout.isatty():
        return text
    return f"{_PALETTE.get(role, '')}{text}\033[0m"


def _ms(seconds: float) -> str:
    if seconds >= 1:
        return f"{seconds:.1f}s"
    if seconds <= 0:
        return "0ms"
    ms = seconds * 1000
    return f"{ms:.0f}ms" if ms >= 1 else "<1ms"


def _logging_kwargs(kwargs: dict[str, Any]) -> dict[str, Any]:
    return {k: v for k, v in kwargs.items() if k in _LOGGING_KWARGS}


def _one_line(text: str | None, limit: int = 80) -> str:
    s = " ".join((text or "").split())
    return s if len(s) <= limit else s[:limit] + "..."


@dataclass
class LogEvent:
    event_type: str
    data: dict[str, Any]
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat())

    def to_json(self) -> str:
        return json.dumps(asdict(self), default=str)


class RefSearchLogger:
    def __init__(self, logs_dir=None):
        logs_dir = logs_dir or config.logs_dir
        logs_dir.mkdir(parents=True, exist_ok=True)
        self.log_file = logs_dir / "search.log"
        self._lock = threading.Lock()
        self._fh = open(self.log_file, "a", encoding="utf-8")

        self.console = logging.getLogger("refsearch")
        self.console.setLevel(logging.DEBUG)
        if not self.console.handlers:
            handler = logging.StreamHandler()
            handler.setLevel(logging.INFO)
            handler.setFormatter(logging.Formatter("%(asctime)s │ %(message)s", datefmt="%H:%M:%S"))
            self.console.addHandler(handler)

    def _emit(self, event_type: str, **data: Any) -> None:
        line = LogEvent(event_type=event_type, data=data).to_json()
        with self._lock:
            self._fh.write(line + "\n")
            self._fh.flush()

    # -- search lifecycle ----------------------------------------------------

    def search_dispatched(self, generation: int, query: str, categories: list[str]):
        self._emit("SEARCH_DISPATCHED", generation=generation, query=query[:200], categories=categories)
        self.console.debug(
            f"Search #{generation} {_paint('query', repr(query[:60]))} → {len(categories)} categories"
        )

    def category_settled(self, generation: int, category: str, result_count: int, duration_seconds: float):
        self._emit(
            "CATEGORY_SETTLED",
            generation=generation,
            category=category,
            result_count=result_count,
            duration_seconds=round(duration_seconds, 4),
        )
        self.console.debug(
            f"  │ {_paint('category', category)}  {result_count} results  "
            f"{_paint('duration', _ms(duration_seconds))}"
        )

    def category_failed(self, category: str, kind: str, reason: str | None, duration_seconds: float):
        self._emit(
            "CATEGORY_FAILED",
            category=category,
            kind=kind,
            reason=(reason or "")[:500],
            duration_seconds=round(duration_seconds, 4),
        )
        self.console.warning(
            f"⚠️ {_paint('category', category)} {_paint('fail', f'[{kind}]')} {_one_line(reason)}"
        )

    def stale_discarded(self, generation: int, current_generation: int, category: str):
        self._emit(
            "STALE_DISCARDED",
            generation=generation,
            current_generation=current_generation,
            category=category,
        )
        self.console.debug(
            _paint("dim", f"  │ dropped {category} from search #{generation} (now #{current_generation})")
        )

    def search_settled(self, generation: int, total_results: int, failed: list[str], duration_seconds: float):
        self._emit(
            "SEARCH_SETTLED",
            generation=generation,
            total_results=total_results,
            failed_categories=failed,
            duration_seconds=round(duration_seconds, 4),
        )
        status = _paint("fail", f"[{len(failed)} failed]") if failed else _paint("ok", "[ok]")
        self.console.info(
            f"✓ Search #{generation}  {total_results} results  "
            f"{_paint('duration', _ms(duration_seconds))}  {status}"
        )

    def search_cleared(self, generation: int):
        self._emit("SEARCH_CLEARED", generation=generation)
        self.console.debug(f"Search cleared (generation #{generation})")

    # -- generic -------------------------------------------------------------

    def error(self, message: str, *args, exception: Exception | None = None, **kwargs):
        self._emit("ERROR", message=message, exception=str(exception) if exception else None)
        log_kwargs = _logging_kwargs(kwargs)
        if exception is not None:
            log_kwargs.setdefault("exc_info", exception)
        self.console.error(f"❌ {message}", *args, **log_kwargs)

    def warning(self, message: str, *args, **kwargs):
        self._emit("WARNING", message=message[:500])
        self.console.warning(f"⚠️ {message}", *args, **_logging_kwargs(kwargs))

    def info(self, message: str, *args, **kwargs):
        self.console.info(message, *args, **_logging_kwargs(kwargs))

    def debug(self, message: str, *args, **kwargs):
        self.console.debug(message, *args, **_logging_kwargs(kwargs))


logger = RefSearchLogger()
