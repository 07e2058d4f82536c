"""Extraction grammar: which labelled sections each narrative kind carries.

Each kind has one ordered table of ``SectionRule`` entries. A scan pass finds
the first occurrence of every label and captures its span; a conversion pass
then types each span according to its ``FieldKind``. Adding a field is one
table entry plus the matching header in the prompt template.
"""

import re
from dataclasses import dataclass
from enum import StrEnum

from truthlens.data import AnalysisKind


class FieldKind(StrEnum):
    """How a captured section span is converted."""

    SCALAR = "scalar"
    ENUM = "enum"
    LIST = "list"
    TEXT = "text"
    FLAG = "flag"


@dataclass(frozen=True)
class SectionRule:
    """A labelled section and the field it fills."""

    label: str
    field: str
    kind: FieldKind


@dataclass(frozen=True)
class Section:
    """A captured section.

    ``inline`` is the remainder of the header line after the colon, with
    bold markers removed. ``body`` holds the following lines up to the next
    header or blank line.
    """

    label: str
    inline: str
    body: tuple[str, ...] = ()


GRAMMARS: dict[AnalysisKind, tuple[SectionRule, ...]] = {
    AnalysisKind.FACT_CHECK: (
        SectionRule("CREDIBILITY SCORE", "score", FieldKind.SCALAR),
        SectionRule("SCORE", "score", FieldKind.SCALAR),
        SectionRule("VERIFICATION STATUS", "verification_status", FieldKind.ENUM),
        SectionRule("KEY FINDINGS", "key_findings", FieldKind.LIST),
        SectionRule("RED FLAGS", "flags", FieldKind.LIST),
        SectionRule("SOURCES TO CHECK", "sources", FieldKind.LIST),
        SectionRule("RECOMMENDATIONS", "recommendations", FieldKind.LIST),
        SectionRule("SUMMARY", "summary", FieldKind.TEXT),
    ),
    AnalysisKind.BIAS: (
        SectionRule("BIAS DETECTED", "bias_detected", FieldKind.FLAG),
        SectionRule("OBJECTIVITY SCORE", "score", FieldKind.SCALAR),
        SectionRule("BIAS TYPES DETECTED", "flags", FieldKind.LIST),
        SectionRule("LANGUAGE PATTERNS", "key_findings", FieldKind.LIST),
        SectionRule("RECOMMENDATIONS", "recommendations", FieldKind.LIST),
        SectionRule("SUMMARY", "summary", FieldKind.TEXT),
    ),
    AnalysisKind.MEDIA_AUTHENTICITY: (
        SectionRule("AUTHENTICITY", "authenticity", FieldKind.ENUM),
        SectionRule("CONFIDENCE", "confidence", FieldKind.SCALAR),
        SectionRule("VERIFICATION STEPS", "verification_steps", FieldKind.LIST),
        SectionRule("RED FLAGS", "flags", FieldKind.LIST),
        SectionRule("RECOMMENDATIONS", "recommendations", FieldKind.LIST),
        SectionRule("SUMMARY", "summary", FieldKind.TEXT),
    ),
}

# An all-caps "LABEL:" line, or a markdown heading, starts a new section.
_GENERIC_HEADER = re.compile(r"^\s*(?:#{1,6}\s|[A-Z][A-Z0-9 /_-]{2,}:)")


def header_pattern(rules: tuple[SectionRule, ...]) -> re.Pattern[str]:
    """Compile one alternation matching any label followed by a colon.

    Longer labels are tried first so ``RED FLAGS`` wins over a shorter
    label that is its prefix or suffix.
    """
    labels = sorted({rule.label for rule in rules}, key=len, reverse=True)
    alternation = "|".join(re.escape(label) for label in labels)
    return re.compile(
        rf"(?<![A-Za-z])(?P<label>{alternation})[ \t]*\**[ \t]*:",
        re.IGNORECASE,
    )


def _clean_inline(text: str) -> str:
    return text.strip().strip("*_").strip()


def _ends_section(line: str, pattern: re.Pattern[str]) -> bool:
    stripped = line.strip()
    if not stripped or stripped.startswith("**"):
        return True
    if _GENERIC_HEADER.match(line):
        return True
    return pattern.match(stripped) is not None


def scan(narrative: str, rules: tuple[SectionRule, ...]) -> dict[str, Section]:
    """Capture the first occurrence of every labelled section.

    Returns:
        Mapping from upper-cased label to its captured section. Labels
        that never occur are absent.
    """
    pattern = header_pattern(rules)
    sections: dict[str, Section] = {}

    for match in pattern.finditer(narrative):
        label = match.group("label").upper()
        if label in sections:
            continue

        line_end = narrative.find("\n", match.end())
        if line_end == -1:
            sections[label] = Section(label=label, inline=_clean_inline(narrative[match.end() :]))
            continue

        body: list[str] = []
        for line in narrative[line_end + 1 :].split("\n"):
            if _ends_section(line, pattern):
                break
            body.append(line)

        sections[label] = Section(
            label=label,
            inline=_clean_inline(narrative[match.end() : line_end]),
            body=tuple(body),
        )

    return sections
