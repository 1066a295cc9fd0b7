"""
Unit Tests for NullCanonicalizer.

Test Aspects Covered:
    ✅ Business Logic: Sentinels to absent, magnitudes to numbers
    ✅ Edge Cases: Case variants, whitespace-only, non-numeric text
    ✅ Idempotence: Second run changes nothing
"""

from __future__ import annotations

import logging

import pytest

from layoff_cleaner.stages.null_canonicalization import (
    NullCanonicalizer,
    coerce_float,
    coerce_int,
)
from tests.fixtures.builders import collection_of, raw_row


class TestCoercion:
    """Test cases for numeric coercion helpers."""

    @pytest.mark.parametrize(
        "text, expected",
        [("1000", 1000), (" 42 ", 42), ("1000.0", 1000), ("12.5", None), ("abc", None)],
    )
    def test_coerce_int(self, text: str, expected) -> None:
        assert coerce_int(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [("0.25", 0.25), ("1", 1.0), ("nan", None), ("inf", None), ("", None)],
    )
    def test_coerce_float(self, text: str, expected) -> None:
        assert coerce_float(text) == expected


class TestNullCanonicalizer:
    """Test cases for the stage over a collection."""

    @pytest.mark.parametrize("sentinel", ["", "null", "NULL", "Null", "nUlL"])
    def test_sentinels_become_absent(self, sentinel: str) -> None:
        # Arrange
        collection = collection_of(
            raw_row(
                company=sentinel,
                industry=sentinel,
                total_laid_off=sentinel,
                percentage_laid_off=sentinel,
                country=sentinel,
                funds_raised_millions=sentinel,
                date=sentinel,
            )
        )

        # Act
        NullCanonicalizer().apply(collection)

        # Assert
        record = collection.get(1)
        assert record.company is None
        assert record.industry is None
        assert record.total_laid_off is None
        assert record.percentage_laid_off is None
        assert record.country is None
        assert record.funds_raised_millions is None
        assert record.date_text is None

    def test_whitespace_only_is_not_a_sentinel(self) -> None:
        # Arrange
        collection = collection_of(raw_row(industry=" "))

        # Act
        NullCanonicalizer().apply(collection)

        # Assert
        assert collection.get(1).industry == " "

    def test_values_containing_null_are_kept(self) -> None:
        # Arrange
        collection = collection_of(raw_row(company="Nullable Inc"))

        # Act
        NullCanonicalizer().apply(collection)

        # Assert
        assert collection.get(1).company == "Nullable Inc"

    def test_magnitudes_are_coerced_to_numbers(self) -> None:
        # Arrange
        collection = collection_of(
            raw_row(total_laid_off="1000", percentage_laid_off="0.25", funds_raised_millions="26000")
        )

        # Act
        NullCanonicalizer().apply(collection)

        # Assert
        record = collection.get(1)
        assert record.total_laid_off == 1000
        assert isinstance(record.total_laid_off, int)
        assert record.percentage_laid_off == 0.25
        assert record.funds_raised_millions == 26000.0

    def test_non_numeric_magnitude_becomes_absent_with_warning(self, caplog) -> None:
        # Arrange
        collection = collection_of(raw_row(total_laid_off="about 200"))

        # Act
        with caplog.at_level(logging.WARNING):
            NullCanonicalizer().apply(collection)

        # Assert
        assert collection.get(1).total_laid_off is None
        assert "about 200" in caplog.text

    def test_location_and_stage_are_not_nullable(self) -> None:
        # Arrange
        collection = collection_of(raw_row(location="", stage="NULL"))

        # Act
        NullCanonicalizer().apply(collection)

        # Assert
        assert collection.get(1).location == ""
        assert collection.get(1).stage == "NULL"

    def test_custom_sentinels_are_case_insensitive(self) -> None:
        # Arrange
        collection = collection_of(raw_row(industry="N/A", company="null"))
        stage = NullCanonicalizer(sentinels=["n/a"])

        # Act
        stage.apply(collection)

        # Assert
        assert collection.get(1).industry is None
        assert collection.get(1).company == "null"

    def test_is_idempotent(self) -> None:
        """
        SCENARIO: Stage run twice on dirty data
        EXPECTED: Second run is a no-op
        """
        # Arrange
        collection = collection_of(
            raw_row(industry="", total_laid_off="NULL", percentage_laid_off="0.1"),
            raw_row(company="null", total_laid_off="5"),
        )
        stage = NullCanonicalizer()
        stage.apply(collection)
        snapshot = [r.model_dump() for r in collection]

        # Act
        outcome = stage.apply(collection)

        # Assert
        assert outcome.modified_count == 0
        assert [r.model_dump() for r in collection] == snapshot
