from .events import (
    EVENTS,
    EventDescriptor,
    event_codes,
    event_index,
    get_event,
)
from .results import (
    Dnf,
    Dns,
    MoveCount,
    MultiAttempt,
    NoResult,
    ResultValue,
    Time,
    best_of,
    format_result,
    is_valid,
    parse_average,
    parse_result,
    sort_key,
)
from .types import Metric, ResultRow
from .validation import InputSanitizer, RawResult, validate_records
from .profile import CompetitorProfile, build_profiles, group_by_competitor
from .ranking import RankedRow, rank_results, rank_rows
from .sum_of_ranks import (
    EventRanking,
    EventRankingRow,
    SorBoard,
    SorCell,
    SorConfig,
    SorRow,
    SumOfRanksResult,
    compute_sum_of_ranks,
)

__all__ = [
    "EVENTS",
    "EventDescriptor",
    "event_codes",
    "event_index",
    "get_event",
    "Dnf",
    "Dns",
    "MoveCount",
    "MultiAttempt",
    "NoResult",
    "ResultValue",
    "Time",
    "best_of",
    "format_result",
    "is_valid",
    "parse_average",
    "parse_result",
    "sort_key",
    "Metric",
    "ResultRow",
    "InputSanitizer",
    "RawResult",
    "validate_records",
    "CompetitorProfile",
    "build_profiles",
    "group_by_competitor",
    "RankedRow",
    "rank_results",
    "rank_rows",
    "EventRanking",
    "EventRankingRow",
    "SorBoard",
    "SorCell",
    "SorConfig",
    "SorRow",
    "SumOfRanksResult",
    "compute_sum_of_ranks",
]
