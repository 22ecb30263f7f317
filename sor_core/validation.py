"""
Input validation for raw result records using Pydantic v2
Validates the fields the ranking core reads from an export row
"""

import logging
import re
from typing import Any, Iterable, List

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .results import ResultValue, parse_average, parse_result
from .types import ResultRow

logger = logging.getLogger(__name__)


class InputSanitizer:
    """Utility class for input sanitization"""

    MAX_NAME_LENGTH = 255

    @staticmethod
    def sanitize_competitor_name(name: Any) -> str:
        """Sanitize competitor name for display - keep letters in any script"""
        if name is None:
            return ""
        if not isinstance(name, str):
            name = str(name)

        # Names come from an export, not from users: only control characters go.
        name = re.sub(r"[\x00-\x1f\x7f]", "", name)

        return name.strip()[: InputSanitizer.MAX_NAME_LENGTH]

    @staticmethod
    def sanitize_encoded_value(value: Any) -> str:
        """
        Encoded results pass through as text (ints are accepted too)

        No trimming: a value with stray characters must decode as no result,
        not as a neighbouring number.
        """
        if value is None or isinstance(value, bool):
            return ""
        if isinstance(value, int):
            return str(value)
        if not isinstance(value, str):
            return ""
        return value


# ==================== RAW RESULT ====================


class RawResult(BaseModel):
    """One competitor's result in one event at one competition.

    Field aliases are the export column names; unknown columns are ignored.
    """

    # Only person_id is required to be non-empty: records are grouped by it.
    # Anything else odd degrades to an ignored event or no result later.
    competition_id: str = Field(..., alias="competitionId", description="Competition id")
    event_id: str = Field(..., alias="eventId", description="Event code, e.g. '333'")
    best: str = Field("", description="Encoded single result")
    average: str = Field("", description="Encoded average result")
    person_id: str = Field(..., alias="personId", min_length=1, description="Competitor id")
    person_name: str = Field("", alias="personName")

    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    @field_validator("competition_id", "event_id", "person_id", mode="before")
    @classmethod
    def strip_identifiers(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("best", "average", mode="before")
    @classmethod
    def normalize_encoded(cls, v: Any) -> str:
        return InputSanitizer.sanitize_encoded_value(v)

    @field_validator("person_name", mode="before")
    @classmethod
    def normalize_name(cls, v: Any) -> str:
        return InputSanitizer.sanitize_competitor_name(v)

    def single_value(self) -> ResultValue:
        return parse_result(self.event_id, self.best)

    def average_value(self) -> ResultValue:
        return parse_average(self.event_id, self.average)


def validate_records(rows: Iterable[ResultRow | RawResult]) -> List[RawResult]:
    """
    Validate export rows into RawResult models

    Returns:
        List[RawResult]: validated records, in input order

    Raises:
        ValueError: If any row fails validation
    """
    records: List[RawResult] = []
    for i, row in enumerate(rows):
        if isinstance(row, RawResult):
            records.append(row)
            continue
        try:
            records.append(RawResult.model_validate(dict(row)))
        except Exception as e:
            logger.warning(f"Result row {i} failed validation: {e}")
            raise ValueError(f"Invalid result row {i}: {str(e)}")
    return records


# ==================== EXPORT ====================

__all__ = [
    "RawResult",
    "InputSanitizer",
    "validate_records",
]
