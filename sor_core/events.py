"""Static catalog of the 18 ranked events.

Index order is stable and is used as the position of every per-event array in
the package (profile bests, SOR cells, board headers).
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EventDescriptor:
    index: int
    code: str
    label: str
    # Other machine codes that encode the same logical event.
    aliases: tuple[str, ...] = ()

    @property
    def codes(self) -> tuple[str, ...]:
        return (self.code, *self.aliases)


MOVE_COUNT_EVENT = "333fm"
MULTI_BLIND_EVENT = "333mbf"
MULTI_BLIND_OLD_EVENT = "333mbo"
MULTI_BLIND_CODES = frozenset({MULTI_BLIND_EVENT, MULTI_BLIND_OLD_EVENT})

EVENTS: tuple[EventDescriptor, ...] = (
    EventDescriptor(0, "skewb", "Skewb"),
    EventDescriptor(1, "222", "2x2x2 Cube"),
    EventDescriptor(2, "333", "3x3x3 Cube"),
    EventDescriptor(3, "333bf", "3x3x3 Blindfolded"),
    EventDescriptor(4, "333oh", "3x3x3 One-Handed"),
    EventDescriptor(5, MULTI_BLIND_EVENT, "3x3x3 Multi-Blind", aliases=(MULTI_BLIND_OLD_EVENT,)),
    EventDescriptor(6, MOVE_COUNT_EVENT, "3x3x3 Fewest Moves"),
    EventDescriptor(7, "333ft", "3x3x3 With Feet"),
    EventDescriptor(8, "444", "4x4x4 Cube"),
    EventDescriptor(9, "444bf", "4x4x4 Blindfolded"),
    EventDescriptor(10, "555", "5x5x5 Cube"),
    EventDescriptor(11, "555bf", "5x5x5 Blindfolded"),
    EventDescriptor(12, "666", "6x6x6 Cube"),
    EventDescriptor(13, "777", "7x7x7 Cube"),
    EventDescriptor(14, "sq1", "Square-1"),
    EventDescriptor(15, "pyram", "Pyraminx"),
    EventDescriptor(16, "minx", "Megaminx"),
    EventDescriptor(17, "clock", "Clock"),
)

EVENT_COUNT = len(EVENTS)

_INDEX_BY_CODE: dict[str, int] = {
    code: event.index for event in EVENTS for code in event.codes
}


def event_index(code: str) -> int | None:
    """Return the catalog index for an event code, or None when unknown."""
    return _INDEX_BY_CODE.get(code)


def get_event(code: str) -> EventDescriptor | None:
    idx = event_index(code)
    if idx is None:
        return None
    return EVENTS[idx]


def is_multi_blind(code: str) -> bool:
    return code in MULTI_BLIND_CODES


def event_codes() -> tuple[str, ...]:
    """Canonical codes in index order (used as board headers)."""
    return tuple(event.code for event in EVENTS)
