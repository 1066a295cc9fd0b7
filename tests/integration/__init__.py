"""
Integration Tests - Full Cleaning Runs.

Runs the complete pipeline over in-memory, CSV and SQLite stores.
"""
