"""Per-competitor personal bests, one slot per catalog event."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Sequence

from .events import EVENT_COUNT, event_index
from .results import NoResult, ResultValue, best_of
from .types import Metric
from .validation import RawResult

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CompetitorProfile:
    id: str
    name: str
    results: tuple[RawResult, ...]
    singles: tuple[ResultValue, ...]
    averages: tuple[ResultValue, ...]
    # Event codes of records dropped because the catalog does not know them.
    ignored_event_codes: tuple[str, ...] = ()

    @classmethod
    def from_results(cls, results: Sequence[RawResult]) -> CompetitorProfile:
        """
        Build a profile from every record of one competitor.

        Id and name come from the first record. Each event slot keeps the best
        single and best average seen; slots start as NoResult, which is worse
        than any observed value.

        Raises:
            ValueError: no records, or records from more than one competitor.
        """
        if not results:
            raise ValueError("cannot build a competitor profile from no results")
        first = results[0]
        singles: list[ResultValue] = [NoResult()] * EVENT_COUNT
        averages: list[ResultValue] = [NoResult()] * EVENT_COUNT
        ignored: list[str] = []

        for result in results:
            if result.person_id != first.person_id:
                raise ValueError(
                    f"result for {result.person_id} mixed into profile of {first.person_id}"
                )
            idx = event_index(result.event_id)
            if idx is None:
                if result.event_id not in ignored:
                    ignored.append(result.event_id)
                continue
            singles[idx] = best_of(singles[idx], result.single_value())
            averages[idx] = best_of(averages[idx], result.average_value())

        if ignored:
            logger.debug(f"Ignoring unknown events {ignored} for {first.person_id}")

        return cls(
            id=first.person_id,
            name=first.person_name,
            results=tuple(results),
            singles=tuple(singles),
            averages=tuple(averages),
            ignored_event_codes=tuple(ignored),
        )

    def best(self, event: int | str, metric: Metric) -> ResultValue:
        idx = event_index(event) if isinstance(event, str) else event
        if idx is None or not 0 <= idx < EVENT_COUNT:
            return NoResult()
        if metric == "single":
            return self.singles[idx]
        return self.averages[idx]

    def best_single(self, event: int | str) -> ResultValue:
        return self.best(event, "single")

    def best_average(self, event: int | str) -> ResultValue:
        return self.best(event, "average")


def group_by_competitor(records: Iterable[RawResult]) -> dict[str, list[RawResult]]:
    """Group records by competitor id, keeping first-seen competitor order."""
    grouped: dict[str, list[RawResult]] = {}
    for record in records:
        grouped.setdefault(record.person_id, []).append(record)
    return grouped


def build_profiles(records: Iterable[RawResult]) -> list[CompetitorProfile]:
    return [
        CompetitorProfile.from_results(group)
        for group in group_by_competitor(records).values()
    ]
