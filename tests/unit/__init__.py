"""
Unit Tests - Testing Individual Components in Isolation.

Each stage is tested against a hand-built WorkingCollection.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_working_collection.py: Handles, removal, date column transition
    - test_deduplication.py: Natural-key grouping and ranking
    - test_text_normalization.py: Company, industry, country rules
    - test_date_parsing.py: Recognized patterns and absent fallback
    - test_null_canonicalization.py: Sentinels and numeric coercion
    - test_industry_backfill.py: Same-company propagation
    - test_pruning.py: Rows without layoff magnitude
    - test_config_loader.py: Configuration loading/validation
"""
