"""
Text Normalizer Implementation.

Three independent field rules:
    - company: surrounding whitespace trimmed
    - industry: any value starting with "crypto" (any case) becomes "Crypto"
    - country: whitespace trimmed, trailing periods removed, trimmed again
"""

from __future__ import annotations

import logging
from typing import List, Optional

from layoff_cleaner.domain.entities import PipelineState
from layoff_cleaner.domain.value_objects import StageOutcome
from layoff_cleaner.pipeline.working_collection import WorkingCollection

logger = logging.getLogger(__name__)

CRYPTO_INDUSTRY = "Crypto"


def normalize_company(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return value.strip()


def normalize_industry(value: Optional[str]) -> Optional[str]:
    # Collapses variants such as "Crypto / Web3" and "CryptoCurrency".
    if value is None:
        return None
    if value.lower().startswith(CRYPTO_INDUSTRY.lower()):
        return CRYPTO_INDUSTRY
    return value


def normalize_country(value: Optional[str]) -> Optional[str]:
    """Trim whitespace and trailing periods, e.g. "Germany. " -> "Germany"."""
    if value is None:
        return None
    value = value.strip()
    while value.endswith("."):
        value = value[:-1].strip()
    return value


class TextNormalizer:
    """Canonicalize the company, industry and country text fields."""

    state = PipelineState.TEXT_NORMALIZED

    @property
    def name(self) -> str:
        """Unique name of this stage."""
        return "text_normalizer"

    def apply(self, collection: WorkingCollection) -> StageOutcome:
        modified: List[int] = []

        for record in collection:
            company = normalize_company(record.company)
            industry = normalize_industry(record.industry)
            country = normalize_country(record.country)

            if (company, industry, country) == (
                record.company,
                record.industry,
                record.country,
            ):
                continue

            record.company = company
            record.industry = industry
            record.country = country
            modified.append(record.handle)

        logger.debug(f"Normalized text fields on {len(modified)} records")
        return StageOutcome(modified_handles=modified)
