"""Sum of ranks (SOR) leaderboards.

Each competitor's personal bests are ranked per event and metric; the per-event
ranks are summed, and the totals are ranked again with the same tie rule.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Literal, Sequence, TypeAlias

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .events import EVENT_COUNT, EVENTS, MULTI_BLIND_EVENT, EventDescriptor, event_codes, get_event
from .profile import CompetitorProfile
from .ranking import RankedRow, rank_results, rank_rows
from .results import ResultValue
from .types import METRICS, Metric

logger = logging.getLogger(__name__)


SorCellKind: TypeAlias = Literal["blank", "normal", "default"]


class SorConfig(BaseModel):
    """Report-level settings for the SOR boards"""

    single_title: str = Field("SOR (Single)", min_length=1, max_length=100)
    average_title: str = Field("SOR (Average)", min_length=1, max_length=100)
    # Events whose average is never ranked; their average cells stay blank.
    unranked_average_events: tuple[str, ...] = (MULTI_BLIND_EVENT,)

    model_config = ConfigDict(frozen=True)

    @field_validator("unranked_average_events")
    @classmethod
    def validate_event_codes(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Each code must be in the catalog; aliases collapse to canonical codes"""
        canonical: list[str] = []
        for code in v:
            event = get_event(code.strip())
            if event is None:
                raise ValueError(f"unknown event code: {code}")
            if event.code not in canonical:
                canonical.append(event.code)
        return tuple(canonical)

    def title_for(self, metric: Metric) -> str:
        return self.single_title if metric == "single" else self.average_title


@dataclass(frozen=True)
class SorCell:
    kind: SorCellKind
    rank: int = 0

    @property
    def value(self) -> int:
        return 0 if self.kind == "blank" else self.rank


BLANK_CELL = SorCell(kind="blank")


@dataclass(frozen=True)
class EventRankingRow:
    competitor_id: str
    competitor_name: str
    rank: int
    score: ResultValue
    is_default: bool


@dataclass(frozen=True)
class EventRanking:
    event: EventDescriptor
    metric: Metric
    rows: tuple[EventRankingRow, ...]


@dataclass(frozen=True)
class SorRow:
    competitor_id: str
    competitor_name: str
    rank: int
    total: int
    cells: tuple[SorCell, ...]


@dataclass(frozen=True)
class SorBoard:
    title: str
    metric: Metric
    headers: tuple[str, ...]
    rows: tuple[SorRow, ...]


@dataclass(frozen=True)
class SumOfRanksResult:
    single: SorBoard
    average: SorBoard
    event_rankings: tuple[EventRanking, ...]

    def board(self, metric: Metric) -> SorBoard:
        return self.single if metric == "single" else self.average

    def event_ranking(self, code: str, metric: Metric) -> EventRanking | None:
        event = get_event(code)
        if event is None:
            return None
        for ranking in self.event_rankings:
            if ranking.event.index == event.index and ranking.metric == metric:
                return ranking
        return None


def _rank_event(
    profiles: Sequence[CompetitorProfile],
    event: EventDescriptor,
    metric: Metric,
) -> tuple[RankedRow[int, ResultValue], ...]:
    # Owners are positions in ``profiles``.
    return rank_results(
        [(pos, profile.best(event.index, metric)) for pos, profile in enumerate(profiles)]
    )


def _to_event_ranking(
    profiles: Sequence[CompetitorProfile],
    event: EventDescriptor,
    metric: Metric,
    ranked: Sequence[RankedRow[int, ResultValue]],
) -> EventRanking:
    return EventRanking(
        event=event,
        metric=metric,
        rows=tuple(
            EventRankingRow(
                competitor_id=profiles[row.owner].id,
                competitor_name=profiles[row.owner].name,
                rank=row.rank,
                score=row.score,
                is_default=row.is_default,
            )
            for row in ranked
        ),
    )


def _build_board(
    profiles: Sequence[CompetitorProfile],
    metric: Metric,
    config: SorConfig,
) -> tuple[SorBoard, list[EventRanking]]:
    cells: list[list[SorCell]] = [[BLANK_CELL] * EVENT_COUNT for _ in profiles]
    rankings: list[EventRanking] = []

    for event in EVENTS:
        if metric == "average" and event.code in config.unranked_average_events:
            continue
        ranked = _rank_event(profiles, event, metric)
        rankings.append(_to_event_ranking(profiles, event, metric, ranked))
        for row in ranked:
            kind: SorCellKind = "default" if row.is_default else "normal"
            cells[row.owner][event.index] = SorCell(kind=kind, rank=row.rank)

    totals = [(pos, sum(cell.value for cell in row)) for pos, row in enumerate(cells)]
    board_rows = tuple(
        SorRow(
            competitor_id=profiles[row.owner].id,
            competitor_name=profiles[row.owner].name,
            rank=row.rank,
            total=row.score,
            cells=tuple(cells[row.owner]),
        )
        for row in rank_rows(totals)
    )
    board = SorBoard(
        title=config.title_for(metric),
        metric=metric,
        headers=event_codes(),
        rows=board_rows,
    )
    return board, rankings


def compute_sum_of_ranks(
    profiles: Sequence[CompetitorProfile],
    config: SorConfig | None = None,
) -> SumOfRanksResult:
    """
    Compute the single and average SOR boards for a report population.

    Args:
      profiles: one profile per competitor; input order breaks score ties.
      config: titles and unranked-average events (defaults: SorConfig()).
    """
    config = config or SorConfig()
    logger.info(f"Computing sum of ranks for {len(profiles)} competitors")

    with_ignored = sum(1 for profile in profiles if profile.ignored_event_codes)
    if with_ignored:
        logger.warning(f"{with_ignored} competitors have results in unknown events (ignored)")

    boards: dict[Metric, SorBoard] = {}
    event_rankings: list[EventRanking] = []
    for metric in METRICS:
        board, rankings = _build_board(profiles, metric, config)
        boards[metric] = board
        event_rankings.extend(rankings)
        logger.debug(f"Ranked {len(rankings)} events for {metric}")

    return SumOfRanksResult(
        single=boards["single"],
        average=boards["average"],
        event_rankings=tuple(event_rankings),
    )
