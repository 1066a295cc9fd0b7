"""
Pipeline Package - Orchestration and the Working Collection.

Components:
    - CleaningPipeline: Main orchestrator running the stages in order
    - WorkingCollection: Handle-addressable mutable copy of the raw rows

The pipeline is responsible for:
    - Reading the source once
    - Executing the stages in sequence over one collection
    - Wrapping the run in a unit of work when the store offers one
    - Handing the cleaned rows to the sink

Import CleaningPipeline from layoff_cleaner.pipeline.cleaning_pipeline;
this package does not import it eagerly because the stages depend on
WorkingCollection.
"""
