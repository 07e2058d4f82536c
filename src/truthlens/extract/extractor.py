"""Narrative-to-fields extraction.

``extract`` never raises on malformed or missing structure: a section that
cannot be found or converted leaves its field at the documented default.
"""

import re
from enum import StrEnum
from typing import Any

from truthlens.bounds import clamp
from truthlens.config.models import HeuristicsConfig
from truthlens.data import AnalysisKind, AuthenticityRating, ExtractedFields, VerificationStatus
from truthlens.extract.grammar import GRAMMARS, FieldKind, Section, scan
from truthlens.heuristics import DEFAULT_HEURISTICS, credibility_baseline

DEFAULT_MEDIA_CONFIDENCE = 50

_SCALAR = re.compile(r"^[\[(]?\s*(\d{1,4})")
_BULLET = re.compile(r"^\s*(?:(?P<dot>[•·▪●])\s*|(?:[-*–]|\d{1,2}[.)])\s+)(?P<item>.*)$")

_ENUM_TYPES: dict[str, type[StrEnum]] = {
    "verification_status": VerificationStatus,
    "authenticity": AuthenticityRating,
}

_ENUM_ALIASES: dict[str, StrEnum] = {
    "NOT_VERIFIED": VerificationStatus.UNVERIFIED,
    "NOT_AUTHENTIC": AuthenticityRating.QUESTIONABLE,
}


def parse_scalar(text: str) -> int | None:
    """Parse a leading integer such as ``82``, ``[82]`` or ``82/100``."""
    match = _SCALAR.match(text)
    if match is None:
        return None
    return clamp(int(match.group(1)))


def parse_enum(text: str, enum_type: type[StrEnum]) -> StrEnum | None:
    """Map free text to the single enum token it names.

    Tokens are searched longest first and blanked out once found, so
    ``UNVERIFIED`` does not also count as ``VERIFIED``. Text naming more
    than one token (for example an echoed ``[A/B/C]`` template) is
    ambiguous and yields ``None``.
    """
    normalized = re.sub(r"[^A-Z]+", "_", text.upper()).strip("_")
    if not normalized:
        return None
    if normalized in _ENUM_ALIASES:
        return _ENUM_ALIASES[normalized]

    found: list[StrEnum] = []
    remaining = normalized
    for member in sorted(enum_type, key=lambda m: len(m.value), reverse=True):
        token = re.compile(rf"(?<![A-Z]){re.escape(member.value)}(?![A-Z])")
        if token.search(remaining):
            found.append(member)
            remaining = token.sub(" ", remaining)

    if len(found) == 1:
        return found[0]
    return None


def parse_flag(text: str) -> bool | None:
    word = text.strip("[] ").upper()
    if word.startswith("YES"):
        return True
    if word.startswith("NO"):
        return False
    return None


def parse_bullets(section: Section) -> tuple[str, ...]:
    """Collect bulleted lines of a section, markers stripped.

    Non-bulleted lines are ignored. A ``•`` line holding several inline
    bullets yields one item per bullet.
    """
    lines = [section.inline, *section.body] if section.inline else list(section.body)
    items: list[str] = []
    for line in lines:
        match = _BULLET.match(line)
        if match is None:
            continue
        item = match.group("item")
        parts = item.split("•") if match.group("dot") else [item]
        items.extend(part.strip() for part in parts if part.strip())
    return tuple(items)


def _convert(section: Section, field: str, kind: FieldKind) -> Any:
    if kind is FieldKind.SCALAR:
        return parse_scalar(section.inline)
    if kind is FieldKind.ENUM:
        return parse_enum(section.inline, _ENUM_TYPES[field])
    if kind is FieldKind.FLAG:
        return parse_flag(section.inline)
    if kind is FieldKind.TEXT:
        return section.inline or None
    return parse_bullets(section)


def extract(
    kind: AnalysisKind,
    narrative: str,
    *,
    baseline: int | None = None,
    config: HeuristicsConfig = DEFAULT_HEURISTICS,
) -> ExtractedFields:
    """Recover typed fields from a generated narrative.

    Args:
        kind: Analysis the narrative was generated for.
        narrative: Free text returned by the narrative generator.
        baseline: Credibility score to use when a fact-check narrative
            carries no score. Defaults to the keyword baseline of the
            narrative itself.
        config: Heuristics used to compute that default baseline.

    Returns:
        Extracted fields. Missing fact-check verdicts default to
        ``UNVERIFIED`` and missing media verdicts to ``QUESTIONABLE``.
    """
    narrative = narrative or ""
    rules = GRAMMARS[kind]
    sections = scan(narrative, rules)

    values: dict[str, Any] = {}
    for rule in rules:
        if values.get(rule.field) is not None:
            continue
        section = sections.get(rule.label)
        if section is None:
            continue
        values[rule.field] = _convert(section, rule.field, rule.kind)

    if kind is AnalysisKind.FACT_CHECK:
        if values.get("score") is None:
            values["score"] = (
                clamp(baseline) if baseline is not None else credibility_baseline(narrative, config)
            )
        if values.get("verification_status") is None:
            values["verification_status"] = VerificationStatus.UNVERIFIED
    elif kind is AnalysisKind.MEDIA_AUTHENTICITY:
        if values.get("authenticity") is None:
            values["authenticity"] = AuthenticityRating.QUESTIONABLE
        if values.get("confidence") is None:
            values["confidence"] = DEFAULT_MEDIA_CONFIDENCE

    return ExtractedFields(**values)
