"""
Null Canonicalizer Implementation.

Rewrites sentinel strings ("" and any-case "null" by default) to absent in
the nullable fields, then coerces the magnitude text columns to numbers:
    - total_laid_off -> int
    - percentage_laid_off, funds_raised_millions -> float

Text that is neither a sentinel nor a number becomes absent as well. The
backfill and pruning stages rely on absence, so this stage must run first.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, List, Optional, Union

from layoff_cleaner.domain.entities import PipelineState
from layoff_cleaner.domain.value_objects import StageOutcome
from layoff_cleaner.pipeline.working_collection import WorkingCollection

logger = logging.getLogger(__name__)

DEFAULT_NULL_SENTINELS = ("", "null")

DEFAULT_NULLABLE_FIELDS = (
    "company",
    "industry",
    "total_laid_off",
    "percentage_laid_off",
    "date",
    "country",
    "funds_raised_millions",
)

INTEGER_FIELDS = ("total_laid_off",)
FLOAT_FIELDS = ("percentage_laid_off", "funds_raised_millions")

# Source column name -> LayoffRecord attribute
_ATTRIBUTE_FOR_COLUMN = {"date": "date_text"}


def coerce_int(value: str) -> Optional[int]:
    text = value.strip()
    try:
        return int(text)
    except ValueError:
        pass
    number = coerce_float(text)
    if number is None or not number.is_integer():
        return None
    return int(number)


def coerce_float(value: str) -> Optional[float]:
    try:
        number = float(value.strip())
    except ValueError:
        return None
    if not math.isfinite(number):
        return None
    return number


class NullCanonicalizer:
    """Replace sentinel strings with the absent marker."""

    state = PipelineState.NULLS_CANONICALIZED

    def __init__(
        self,
        sentinels: Iterable[str] = DEFAULT_NULL_SENTINELS,
        fields: Iterable[str] = DEFAULT_NULLABLE_FIELDS,
    ) -> None:
        """
        Initialize with the sentinel literals and the fields to inspect.

        Args:
            sentinels: Literals treated as absent, compared case-insensitively
            fields: Source column names to canonicalize
        """
        self.sentinels = frozenset(s.casefold() for s in sentinels)
        self.fields = tuple(fields)

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "null_canonicalizer"

    def is_sentinel(self, value: Any) -> bool:
        return isinstance(value, str) and value.casefold() in self.sentinels

    def apply(self, collection: WorkingCollection) -> StageOutcome:
        modified: List[int] = []

        for record in collection:
            changed = False

            for column in self.fields:
                attribute = _ATTRIBUTE_FOR_COLUMN.get(column, column)
                if self.is_sentinel(getattr(record, attribute)):
                    setattr(record, attribute, None)
                    changed = True

            for column in INTEGER_FIELDS + FLOAT_FIELDS:
                value = getattr(record, column)
                if not isinstance(value, str):
                    continue
                coerced = self._coerce(column, value)
                if coerced is None and not self.is_sentinel(value):
                    logger.warning(
                        f"Non-numeric {column}={value!r} on handle {record.handle}, "
                        "treating as absent"
                    )
                setattr(record, column, coerced)
                changed = True

            if changed:
                modified.append(record.handle)

        logger.debug(f"Canonicalized null values on {len(modified)} records")
        return StageOutcome(modified_handles=modified)

    def _coerce(self, column: str, value: str) -> Union[int, float, None]:
        if self.is_sentinel(value):
            return None
        if column in INTEGER_FIELDS:
            return coerce_int(value)
        return coerce_float(value)
