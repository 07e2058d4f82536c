"""Media forensics collaborators."""

from truthlens.forensics.base import MediaForensics
from truthlens.forensics.hive import (
    HIVE_API_URL,
    HiveForensics,
    authenticity_from_deepfake,
    parse_report,
)

__all__ = [
    "HIVE_API_URL",
    "HiveForensics",
    "MediaForensics",
    "authenticity_from_deepfake",
    "parse_report",
]
