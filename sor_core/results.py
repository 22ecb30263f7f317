"""Result value model: parsing, canonical ordering, validity and display.

A result is one of six frozen variants. Every consumer matches on the variant
exhaustively, so adding a kind means revisiting each function below.

Ordering projects a value to ``(category, moves, negative_points, time)`` and
compares tuples ascending (smaller is better):
- Time -> 1, MultiAttempt -> 2, MoveCount -> 3, DNF/DNS/no result -> 4.
- The category only makes the order total; rankings never mix event kinds.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TypeAlias, assert_never

from .events import MOVE_COUNT_EVENT, MULTI_BLIND_OLD_EVENT, is_multi_blind


@dataclass(frozen=True)
class Time:
    centiseconds: int


@dataclass(frozen=True)
class MoveCount:
    moves: int


@dataclass(frozen=True)
class MultiAttempt:
    time: int  # seconds
    solved: int
    attempted: int


@dataclass(frozen=True)
class Dnf:
    pass


@dataclass(frozen=True)
class Dns:
    pass


@dataclass(frozen=True)
class NoResult:
    pass


ResultValue: TypeAlias = Time | MoveCount | MultiAttempt | Dnf | Dns | NoResult
SortKey: TypeAlias = tuple[int, int, int, int]

_WORST_KEY: SortKey = (4, 0, 0, 0)
_INT_RE = re.compile(r"[+-]?[0-9]+")

# Multi-blind reports this time when the attempt time was not recorded.
UNKNOWN_MULTI_TIME = 99999


def _parse_int(text: str) -> int | None:
    # Strict: an optional sign and digits, no surrounding whitespace.
    if not _INT_RE.fullmatch(text):
        return None
    return int(text)


def _parse_multi(event_code: str, raw: str) -> ResultValue:
    # Both layouts skip one leading character, then DD where 99 - DD is the
    # points difference (solved - missed).
    dd = _parse_int(raw[1:3])
    if event_code == MULTI_BLIND_OLD_EVENT:
        # 1SSAATTTTT
        solved = None if dd is None else 99 - dd
        attempted = _parse_int(raw[3:5])
        time = _parse_int(raw[5:10])
    else:
        # 0DDTTTTTMM
        time = _parse_int(raw[3:8])
        missed = _parse_int(raw[8:10])
        if dd is None or missed is None:
            solved = attempted = None
        else:
            solved = 99 - dd + missed
            attempted = solved + missed

    if solved is None or attempted is None or time is None:
        return NoResult()
    return MultiAttempt(time=time, solved=solved, attempted=attempted)


def parse_result(event_code: str, raw: str) -> ResultValue:
    """Decode an encoded result string for ``event_code``.

    Total: malformed input degrades to ``NoResult`` instead of raising.
    """
    if not isinstance(raw, str):
        return NoResult()
    if is_multi_blind(event_code):
        return _parse_multi(event_code, raw)

    num = _parse_int(raw)
    if num is None or num == 0:
        return NoResult()
    if num == -1:
        return Dnf()
    if num == -2:
        return Dns()
    if event_code == MOVE_COUNT_EVENT:
        return MoveCount(moves=num)
    return Time(centiseconds=num)


def parse_average(event_code: str, raw: str) -> ResultValue:
    """Like parse_result, but multi-blind has no average."""
    if is_multi_blind(event_code):
        return NoResult()
    return parse_result(event_code, raw)


def is_valid(value: ResultValue) -> bool:
    match value:
        case Dnf() | Dns() | NoResult():
            return False
        case MultiAttempt(solved=solved, attempted=attempted):
            return attempted >= solved
        case Time() | MoveCount():
            return True
        case _:
            assert_never(value)


def sort_key(value: ResultValue) -> SortKey:
    match value:
        case Time(centiseconds=t):
            return (1, 0, 0, t)
        case MultiAttempt(time=t, solved=solved, attempted=attempted):
            if attempted < solved:
                return _WORST_KEY
            return (2, 0, attempted - 2 * solved, t)
        case MoveCount(moves=m):
            return (3, m, 0, 0)
        case Dnf() | Dns() | NoResult():
            return _WORST_KEY
        case _:
            assert_never(value)


def best_of(current: ResultValue, new: ResultValue) -> ResultValue:
    """Return the better of two results; ``current`` wins ties."""
    if sort_key(new) < sort_key(current):
        return new
    return current


def _format_centiseconds(cs: int) -> str:
    if cs < 0:
        return str(cs)
    minutes, rest = divmod(cs, 6000)
    seconds, hundredths = divmod(rest, 100)
    if minutes:
        return f"{minutes}:{seconds:02d}.{hundredths:02d}"
    return f"{seconds}.{hundredths:02d}"


def format_result(value: ResultValue) -> str:
    match value:
        case Time(centiseconds=t):
            return _format_centiseconds(t)
        case MoveCount(moves=m):
            return str(m)
        case MultiAttempt(time=t, solved=solved, attempted=attempted):
            if t == UNKNOWN_MULTI_TIME:
                return f"{solved}/{attempted}"
            minutes, seconds = divmod(t, 60)
            return f"{solved}/{attempted} {minutes}:{seconds:02d}"
        case Dnf():
            return "DNF"
        case Dns():
            return "DNS"
        case NoResult():
            return ""
        case _:
            assert_never(value)
