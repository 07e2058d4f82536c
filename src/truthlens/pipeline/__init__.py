"""Analysis pipeline."""

from truthlens.pipeline.analysis import AnalysisPipeline, new_request_id

__all__ = [
    "AnalysisPipeline",
    "new_request_id",
]
