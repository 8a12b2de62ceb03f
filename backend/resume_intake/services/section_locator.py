"""
Section Locator — find the labelled sections of a resume text.

A section starts at its label (e.g. "Summary:") at the beginning of a line and
runs until the next label that comes later in canonical order, or to the end
of the text. The Name section is confined to its own line.
"""

from __future__ import annotations

from typing import NamedTuple

from resume_intake.models.resume_models import Section

_CANONICAL_ORDER = {section: index for index, section in enumerate(Section)}


class _LabelHit(NamedTuple):
    section: Section
    label_start: int
    content_start: int
    line_end: int


def _scan_labels(text: str) -> list[_LabelHit]:
    """Return every start-of-line label occurrence, in text order."""
    hits: list[_LabelHit] = []
    offset = 0
    for line in text.splitlines(keepends=True):
        body = line.splitlines()[0]
        stripped = body.lstrip(" \t")
        indent = len(body) - len(stripped)
        for section in Section:
            if stripped.startswith(section.label):
                label_start = offset + indent
                hits.append(_LabelHit(
                    section=section,
                    label_start=label_start,
                    content_start=label_start + len(section.label),
                    line_end=offset + len(body),
                ))
                break
        offset += len(line)
    return hits


def locate(text: str) -> dict[Section, str | None]:
    """Map every section to its raw (untrimmed) span, or None when absent."""
    hits = _scan_labels(text)

    first_hits: dict[Section, _LabelHit] = {}
    for hit in hits:
        first_hits.setdefault(hit.section, hit)

    spans: dict[Section, str | None] = {}
    for section in Section:
        hit = first_hits.get(section)
        if hit is None:
            spans[section] = None
            continue

        rank = _CANONICAL_ORDER[section]
        end = min(
            (
                other.label_start
                for other in hits
                if _CANONICAL_ORDER[other.section] > rank
                and other.label_start >= hit.content_start
            ),
            default=len(text),
        )
        if section.single_line:
            end = min(end, hit.line_end)

        spans[section] = text[hit.content_start:end]

    return spans
