"""Media reorganization pipeline."""

from mediaorg.pipeline.processor import (
    create_media_from_file,
    reorganize_file,
    process_single_file,
)
from mediaorg.pipeline.orchestrator import (
    ProcessingStats,
    PipelineOrchestrator,
)

__all__ = [
    "create_media_from_file",
    "reorganize_file",
    "process_single_file",
    "ProcessingStats",
    "PipelineOrchestrator",
]
