"""Narrative generators."""

from truthlens.generator.base import NarrativeGenerator
from truthlens.generator.claude import ClaudeNarrativeGenerator
from truthlens.generator.static import StaticNarrativeGenerator

__all__ = [
    "ClaudeNarrativeGenerator",
    "NarrativeGenerator",
    "StaticNarrativeGenerator",
]
