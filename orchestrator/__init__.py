"""Orchestrator module for the DBML parsing pipeline."""

from orchestrator.root import run_pipeline, run_pipeline_async

__all__ = [
    "run_pipeline",
    "run_pipeline_async",
]
