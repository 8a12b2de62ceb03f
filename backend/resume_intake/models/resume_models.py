from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel


# ── Sections ────────────────────────────────────────────────────────────────


class Section(Enum):
    """Labelled resume sections, declared in canonical order."""

    NAME = "Name:"
    CONTACT_INFO = "Contact Information:"
    SUMMARY = "Summary:"
    WORK_EXPERIENCE = "Work Experience:"
    EDUCATION = "Education:"
    SKILLS = "Skills:"

    @property
    def label(self) -> str:
        return self.value

    @property
    def single_line(self) -> bool:
        return self is Section.NAME


# ── Sub-Models ──────────────────────────────────────────────────────────────


class ContactInfo(BaseModel):
    """Candidate contact information."""

    location: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    profile_link: Optional[str] = None


# ── Main Record Model ───────────────────────────────────────────────────────


class ResumeRecord(BaseModel):
    """Structured output of resume text extraction.

    Every field is independently optional. An empty string means the section
    label was found with nothing under it; None means the label was absent.
    """

    name: Optional[str] = None
    contact_info: Optional[ContactInfo] = None
    summary: Optional[str] = None
    work_experience: Optional[str] = None
    skills: Optional[str] = None

    def missing_fields(self) -> list[str]:
        """Names of the fields that were not found in the source text."""
        return [field for field, value in self if value is None]


class StoredResume(BaseModel):
    """A record as persisted by the record store."""

    id: str
    file_name: str
    mime_type: str
    file_hash: str
    record: ResumeRecord
    source_text: str


# ── Request / Response Models ───────────────────────────────────────────────


class ProcessResumeResponse(BaseModel):
    """Status report for a processed upload."""

    status: Literal["success", "failed"]
    message: str
    record_id: Optional[str] = None
    record: Optional[ResumeRecord] = None


class ResumeFilePayload(BaseModel):
    """A file posted as JSON by the upload form (base64 data)."""

    original_name: Optional[str] = None
    mimetype: Optional[str] = None
    data: Optional[str] = None
    size: Optional[int] = None
    last_modified: Optional[int] = None


class ProcessBase64Request(BaseModel):
    files: list[ResumeFilePayload] = []


class ExtractTextRequest(BaseModel):
    text: str
