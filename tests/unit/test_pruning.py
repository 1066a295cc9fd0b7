"""
Unit Tests for UnrecoverableRowPruner.

Test Aspects Covered:
    ✅ Business Logic: Rows without any magnitude are removed
    ✅ Edge Cases: Only one magnitude present, zero values
    ✅ Soundness: Every removed row had both magnitudes absent
"""

from __future__ import annotations

from layoff_cleaner.stages.pruning import PRUNE_REASON, UnrecoverableRowPruner
from tests.fixtures.builders import collection_of, raw_row


class TestUnrecoverableRowPruner:
    """Test cases for UnrecoverableRowPruner."""

    def test_removes_rows_with_both_magnitudes_absent(self) -> None:
        # Arrange
        collection = collection_of(
            raw_row(total_laid_off=None, percentage_laid_off=None),
            raw_row(total_laid_off=None, percentage_laid_off=0.2),
            raw_row(total_laid_off=40, percentage_laid_off=None),
            raw_row(total_laid_off=0, percentage_laid_off=0.0),
        )
        before = {r.handle: r for r in collection}

        # Act
        outcome = UnrecoverableRowPruner().apply(collection)

        # Assert
        assert collection.handles == [2, 3, 4]
        assert outcome.removed_handles == [1]
        assert outcome.removal_reasons == {1: PRUNE_REASON}
        for handle in outcome.removed_handles:
            assert before[handle].total_laid_off is None
            assert before[handle].percentage_laid_off is None

    def test_sentinel_strings_are_not_absent(self) -> None:
        """
        SCENARIO: Pruner runs on uncanonicalized sentinels
        EXPECTED: Row kept (canonicalization must run first)
        """
        # Arrange
        collection = collection_of(raw_row(total_laid_off="", percentage_laid_off="NULL"))

        # Act
        UnrecoverableRowPruner().apply(collection)

        # Assert
        assert len(collection) == 1

    def test_is_idempotent(self) -> None:
        # Arrange
        collection = collection_of(
            raw_row(total_laid_off=None, percentage_laid_off=None),
            raw_row(total_laid_off=3),
        )
        stage = UnrecoverableRowPruner()
        stage.apply(collection)

        # Act
        outcome = stage.apply(collection)

        # Assert
        assert outcome.removed_count == 0
        assert len(collection) == 1
