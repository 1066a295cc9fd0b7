"""
Test Suite for Layoff Cleaner.

Test organization:
    - unit/: Unit tests for individual stages and components
    - integration/: End-to-end runs over in-memory, CSV and SQLite stores
    - fixtures/: Shared sample configuration and raw data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/layoff_cleaner         # With coverage
"""
