"""Query state: raw input echo plus a debounced query published after a quiet interval."""

from collections.abc import Callable

from refsearch.search.scheduler import ScheduledCall, Scheduler

DebouncedListener = Callable[[str], None]


class QueryStateController:
    """Owns the single debounce timer.

    `set_query` updates the raw value immediately and restarts the timer; only when
    the timer fires with a value different from the current debounced query are
    listeners notified. Raw edits alone never reach listeners.
    """

    def __init__(self, scheduler: Scheduler, delay_seconds: float = 0.3):
        self._scheduler = scheduler
        self._delay = max(0.0, delay_seconds)
        self._query = ""
        self._debounced_query = ""
        self._timer: ScheduledCall | None = None
        self._edit_seq = 0
        self._listeners: list[DebouncedListener] = []

    @property
    def query(self) -> str:
        return self._query

    @property
    def debounced_query(self) -> str:
        return self._debounced_query

    @property
    def is_pending(self) -> bool:
        return self._timer is not None

    def subscribe(self, listener: DebouncedListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def _unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _unsubscribe

    def set_query(self, text: str) -> None:
        self._query = text or ""
        self._cancel_timer()
        self._edit_seq += 1
        value, seq = self._query, self._edit_seq
        self._timer = self._scheduler.call_later(
            self._delay, lambda: self._on_timer(value, seq)
        )

    def flush(self) -> None:
        """Publish the raw query now, skipping the remaining quiet interval."""
        self._cancel_timer()
        self._publish(self._query)

    def clear(self) -> None:
        self._cancel_timer()
        self._edit_seq += 1
        self._query = ""
        self._debounced_query = ""

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _on_timer(self, value: str, seq: int) -> None:
        # A timer that outlived a newer edit or a clear must not publish.
        if seq != self._edit_seq:
            return
        self._timer = None
        self._publish(value)

    def _publish(self, value: str) -> None:
        # Surrounding whitespace never changes the search, so it is not a change.
        if value.strip() == self._debounced_query.strip():
            return
        self._debounced_query = value
        for listener in list(self._listeners):
            listener(value)
