"""
Event trace emitted while a hull is being built.

Each algorithm step appends one tagged record. The order is the contract with
whatever replays the trace: some events are paired with a later cleanup event
(an `add-dashed-edge` stays on screen until the next `remove-dashed-edges`,
the median and supporting lines until the next `remove-temporary-lines`), so
consumers must process them strictly in emission order.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Tuple

logger = logging.getLogger(__name__)


class EventKind(Enum):
    MARK_CURRENT = "mark-current-point"             # (point,)
    MARK_HULL = "mark-confirmed-hull-point"         # (point,)
    ADD_SOLID_EDGE = "add-solid-edge"               # (p1, p2)
    REMOVE_SOLID_EDGE = "remove-solid-edge"         # (p1, p2)
    ADD_DASHED_EDGE = "add-dashed-edge"             # (p1, p2)
    REMOVE_DASHED_EDGES = "remove-dashed-edges"     # ()
    HIDE_POINTS = "hide-points"                     # (points,)
    REVEAL_ALL = "reveal-all-hidden"                # ()
    DRAW_MEDIAN_LINE = "draw-median-line"           # (x,)
    DRAW_SUPPORTING_LINE = "draw-supporting-line"   # (point, slope)
    HIGHLIGHT_BUCKET = "highlight-bucket"           # (p1, p2, bucket)
    MARK_BRIDGE = "mark-bridge-endpoints"           # (left, right)
    FINALIZE_TERMINAL_RUN = "finalize-terminal-run" # (chain,)
    CLEAR_TEMPORARY = "remove-temporary-lines"      # ()


class Bucket(Enum):
    """Which side of the median slope a candidate pair fell on."""
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


@dataclass(frozen=True)
class Event:
    kind: EventKind
    payload: Tuple = ()

    def __repr__(self):
        args = ", ".join(repr(a) for a in self.payload)
        return f"{self.kind.value}({args})"


class NullTrace:
    """Drops every event; used when the caller only wants the hull."""

    def emit(self, kind: EventKind, *payload) -> None:
        pass


class EventTrace(NullTrace):
    """
    Append-only, ordered record of events for one hull computation.

    Listeners registered with `subscribe` are called synchronously with each
    event as it is emitted, so a consumer can follow the computation live.
    """

    def __init__(self):
        self.events: List[Event] = []
        self._listeners: List[Callable[[Event], None]] = []

    def subscribe(self, callback: Callable[[Event], None]) -> None:
        self._listeners.append(callback)

    def emit(self, kind: EventKind, *payload) -> None:
        event = Event(kind, tuple(payload))
        self.events.append(event)
        logger.debug("event %s", event)
        for callback in self._listeners:
            callback(event)

    def kinds(self) -> List[EventKind]:
        return [e.kind for e in self.events]

    def __iter__(self):
        return iter(self.events)

    def __len__(self):
        return len(self.events)

    def __getitem__(self, index):
        return self.events[index]
