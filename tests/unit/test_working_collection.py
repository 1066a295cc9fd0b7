"""
Unit Tests for WorkingCollection and LayoffRecord.

Test Aspects Covered:
    ✅ Business Logic: Copy-on-load, handle allocation, ordered removal
    ✅ Edge Cases: Unknown handles, handle reuse, missing columns
    ✅ Error Handling: Partial or repeated date column transition
"""

from __future__ import annotations

from datetime import date

import pytest

from layoff_cleaner.domain.entities import DateColumnType, LayoffRecord
from layoff_cleaner.domain.errors import SchemaTransitionFailure
from layoff_cleaner.pipeline.working_collection import WorkingCollection
from tests.fixtures.builders import collection_of, raw_row


class TestLoading:
    """Test cases for appending raw rows."""

    def test_assigns_increasing_handles_in_load_order(self) -> None:
        """
        SCENARIO: Three rows appended
        EXPECTED: Handles 1, 2, 3 in load order
        """
        # Arrange / Act
        collection = collection_of(
            raw_row(company="A"), raw_row(company="B"), raw_row(company="C")
        )

        # Assert
        assert collection.handles == [1, 2, 3]
        assert [r.company for r in collection] == ["A", "B", "C"]

    def test_does_not_alias_source_row(self) -> None:
        """
        SCENARIO: Record is rewritten after load
        EXPECTED: The raw source row is unchanged
        """
        # Arrange
        source = raw_row(company=" Meta ")
        collection = collection_of(source)

        # Act
        collection.records[0].company = "Meta"

        # Assert
        assert source["company"] == " Meta "

    def test_missing_columns_load_as_absent(self) -> None:
        """
        SCENARIO: Raw row without industry and date
        EXPECTED: Both fields absent, unknown keys ignored
        """
        # Arrange / Act
        record = LayoffRecord.from_raw({"company": "Acme", "extra": "x"}, handle=1)

        # Assert
        assert record.industry is None
        assert record.date_text is None
        assert record.company == "Acme"

    def test_numeric_raw_values_load_as_text(self) -> None:
        """
        SCENARIO: Source hands over Python numbers for the magnitudes
        EXPECTED: Loaded as text, fractional counts included
        """
        # Arrange / Act
        record = LayoffRecord.from_raw(
            {"total_laid_off": 12.5, "percentage_laid_off": 0.5, "funds_raised_millions": 40},
            handle=1,
        )

        # Assert
        assert record.total_laid_off == "12.5"
        assert record.percentage_laid_off == "0.5"
        assert record.funds_raised_millions == "40"

    def test_structured_raw_date_is_kept_as_iso_text(self) -> None:
        """
        SCENARIO: Source hands over a date object
        EXPECTED: Loaded as ISO text so the date parser can read it
        """
        # Arrange / Act
        record = LayoffRecord.from_raw(raw_row(date=date(2022, 11, 9)), handle=1)

        # Assert
        assert record.date_text == "2022-11-09"


class TestRemoval:
    """Test cases for removal by handle."""

    def test_removal_preserves_order_of_survivors(self) -> None:
        # Arrange
        collection = collection_of(*[raw_row(company=c) for c in "ABCD"])

        # Act
        removed = collection.remove([3, 1])

        # Assert
        assert removed == [3, 1]
        assert [r.company for r in collection] == ["B", "D"]

    def test_unknown_and_repeated_handles_are_ignored(self) -> None:
        # Arrange
        collection = collection_of(raw_row(), raw_row())

        # Act
        removed = collection.remove([2, 2, 99])

        # Assert
        assert removed == [2]
        assert len(collection) == 1

    def test_handles_are_never_reused(self) -> None:
        """
        SCENARIO: Last record removed, then a new row appended
        EXPECTED: The new row gets a fresh handle
        """
        # Arrange
        collection = collection_of(raw_row(), raw_row())
        collection.remove([2])

        # Act
        handle = collection.append(raw_row())

        # Assert
        assert handle == 3
        assert collection.get(2) is None


class TestDateColumnTransition:
    """Test cases for the collection-wide text to date change."""

    def test_transition_converts_every_record(self) -> None:
        # Arrange
        collection = collection_of(raw_row(date="1/2/2023"), raw_row(date="junk"))

        # Act
        collection.transition_date_column({1: date(2023, 1, 2), 2: None})

        # Assert
        assert collection.date_column is DateColumnType.DATE
        assert [r.event_date for r in collection] == [date(2023, 1, 2), None]
        assert all(r.date_text is None for r in collection)

    def test_partial_conversion_is_rejected_without_mutation(self) -> None:
        """
        SCENARIO: Converted dates cover only one of two records
        EXPECTED: SchemaTransitionFailure, nothing converted
        """
        # Arrange
        collection = collection_of(raw_row(date="1/2/2023"), raw_row(date="2/2/2023"))

        # Act / Assert
        with pytest.raises(SchemaTransitionFailure) as exc_info:
            collection.transition_date_column({1: date(2023, 1, 2)})

        assert exc_info.value.handle == 2
        assert collection.date_column is DateColumnType.TEXT
        assert [r.date_text for r in collection] == ["1/2/2023", "2/2/2023"]
        assert all(r.event_date is None for r in collection)

    def test_conversion_for_unknown_handle_is_rejected(self) -> None:
        # Arrange
        collection = collection_of(raw_row())

        # Act / Assert
        with pytest.raises(SchemaTransitionFailure):
            collection.transition_date_column({1: None, 7: None})
        assert collection.date_column is DateColumnType.TEXT

    def test_second_transition_is_rejected(self) -> None:
        # Arrange
        collection = collection_of(raw_row())
        collection.transition_date_column({1: None})

        # Act / Assert
        with pytest.raises(SchemaTransitionFailure, match="already converted"):
            collection.transition_date_column({1: None})

    def test_rows_appended_after_transition_hold_no_text(self) -> None:
        # Arrange
        collection = WorkingCollection()
        collection.transition_date_column({})

        # Act
        handle = collection.append(raw_row(date="1/2/2023"))

        # Assert
        assert collection.get(handle).date_text is None
