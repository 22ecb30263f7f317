"""Tie-aware ranking over (owner, score) pairs.

- Rows are stable-sorted ascending by score key (smaller is better).
- A row whose key equals the previous row's key copies its rank; any other
  row at zero-based position i gets rank i + 1. ``[600, 600, 700]`` ranks
  ``[1, 1, 3]``.
- Rows sharing the last rank with an invalid score are default-marked: they
  are last because they have no valid result, not because they tied on one.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Generic, Sequence, TypeVar

from .results import ResultValue, sort_key
from .results import is_valid as result_is_valid

OwnerT = TypeVar("OwnerT")
ScoreT = TypeVar("ScoreT")


@dataclass(frozen=True)
class RankedRow(Generic[OwnerT, ScoreT]):
    owner: OwnerT
    score: ScoreT
    rank: int
    is_default: bool = False


def _identity(score: Any) -> Any:
    return score


def _always_valid(score: Any) -> bool:
    return True


def rank_rows(
    rows: Sequence[tuple[OwnerT, ScoreT]],
    *,
    key: Callable[[ScoreT], Any] = _identity,
    is_valid: Callable[[ScoreT], bool] = _always_valid,
) -> tuple[RankedRow[OwnerT, ScoreT], ...]:
    """
    Rank rows by score and return new rows in ranked order.

    Args:
      rows: (owner, score) pairs; input order breaks ties deterministically.
      key: projects a score to a comparable value.
      is_valid: scores failing this are default-marked when they share the last rank.
    """
    keyed = sorted(((key(score), owner, score) for owner, score in rows), key=lambda it: it[0])
    if not keyed:
        return ()

    ranks: list[int] = []
    for i, (score_key, _, _) in enumerate(keyed):
        if i > 0 and score_key == keyed[i - 1][0]:
            ranks.append(ranks[i - 1])
        else:
            ranks.append(i + 1)

    last_rank = ranks[-1]
    return tuple(
        RankedRow(
            owner=owner,
            score=score,
            rank=rank,
            is_default=rank == last_rank and not is_valid(score),
        )
        for (_, owner, score), rank in zip(keyed, ranks)
    )


def rank_results(
    rows: Sequence[tuple[OwnerT, ResultValue]],
) -> tuple[RankedRow[OwnerT, ResultValue], ...]:
    """Rank result values with the canonical result ordering and validity."""
    return rank_rows(rows, key=sort_key, is_valid=result_is_valid)
