"""Narrative extraction."""

from truthlens.extract.extractor import (
    DEFAULT_MEDIA_CONFIDENCE,
    extract,
    parse_bullets,
    parse_enum,
    parse_flag,
    parse_scalar,
)
from truthlens.extract.grammar import GRAMMARS, FieldKind, Section, SectionRule, scan

__all__ = [
    "DEFAULT_MEDIA_CONFIDENCE",
    "GRAMMARS",
    "FieldKind",
    "Section",
    "SectionRule",
    "extract",
    "parse_bullets",
    "parse_enum",
    "parse_flag",
    "parse_scalar",
    "scan",
]
