"""
Extraction Pipeline — free-form resume text → ResumeRecord.

Runs the section locator, the contact parser (only when a Contact Information
section exists) and the record assembler, in that order. Pure and
deterministic: no I/O, no shared state.
"""

from __future__ import annotations

import logging

from resume_intake.models.resume_models import ResumeRecord, Section
from resume_intake.services.contact_parser import parse_contact
from resume_intake.services.record_assembler import assemble
from resume_intake.services.section_locator import locate

logger = logging.getLogger(__name__)


class ExtractionError(ValueError):
    """Base class for resume text extraction failures."""


class EmptyInputError(ExtractionError):
    """The input text is empty or whitespace only."""

    def __init__(self) -> None:
        super().__init__("Resume text is empty")


def extract(text: str) -> ResumeRecord:
    """Extract a ResumeRecord from resume text.

    Raises:
        EmptyInputError: if the text is empty or whitespace only.

    Text without any recognised labels is not an error; it yields a record
    with every field set to None.
    """
    if not text or not text.strip():
        raise EmptyInputError()

    sections = locate(text)

    contact = None
    contact_segment = sections[Section.CONTACT_INFO]
    if contact_segment is not None:
        contact = parse_contact(contact_segment)

    record = assemble(sections, contact)

    found = sum(1 for span in sections.values() if span is not None)
    logger.debug(f"Located {found}/{len(sections)} sections in {len(text)} chars")
    return record
