"""Type definitions for raw export rows and ranking metrics."""
from __future__ import annotations

from typing import Literal, TypeAlias, TypedDict


# Which personal best a ranking is computed over.
Metric: TypeAlias = Literal["single", "average"]
METRICS: tuple[Metric, ...] = ("single", "average")


class ResultRow(TypedDict, total=False):
    """
    One row of the results export, keyed by the export's column headers.

    Only the columns read by RawResult are listed as required in practice;
    the remaining ones are carried along by ingestion and ignored here.
    """
    competitionId: str
    eventId: str
    roundTypeId: str
    pos: str
    best: str  # encoded single
    average: str  # encoded average
    personName: str
    personId: str
    formatId: str
    value1: str
    value2: str
    value3: str
    value4: str
    value5: str
    regionalSingleRecord: str
    regionalAverageRecord: str
    personCountryId: str
