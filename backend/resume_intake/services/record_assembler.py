from __future__ import annotations

from resume_intake.models.resume_models import ContactInfo, ResumeRecord, Section

# Sections surfaced in the record. Education only bounds Work Experience.
_RECORD_FIELDS = {
    Section.NAME: "name",
    Section.SUMMARY: "summary",
    Section.WORK_EXPERIENCE: "work_experience",
    Section.SKILLS: "skills",
}


def assemble(
    sections: dict[Section, str | None],
    contact: ContactInfo | None,
) -> ResumeRecord:
    """Combine located sections and parsed contact fields into a ResumeRecord."""
    fields: dict[str, object] = {}
    for section, field in _RECORD_FIELDS.items():
        span = sections.get(section)
        if span is not None:
            fields[field] = span.strip()

    if sections.get(Section.CONTACT_INFO) is not None:
        fields["contact_info"] = contact if contact is not None else ContactInfo()

    return ResumeRecord(**fields)
