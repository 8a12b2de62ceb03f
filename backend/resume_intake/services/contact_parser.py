"""
Contact field parser for the Contact Information section.
"""

from __future__ import annotations

from resume_intake.models.resume_models import ContactInfo

# label → ContactInfo attribute
CONTACT_LABELS = {
    "Location:": "location",
    "Phone:": "phone",
    "Email:": "email",
    "LinkedIn:": "profile_link",
}


def parse_contact(segment: str) -> ContactInfo:
    """Pull each labelled contact field from the segment independently.

    A field captures the rest of its own line, stripped. Lines are split with
    str.splitlines, the same line breaks the section locator honours. Fields
    whose label does not appear stay None; no format validation is done.
    """
    values: dict[str, str] = {}
    for line in segment.splitlines():
        for label, field in CONTACT_LABELS.items():
            if field in values:
                continue
            index = line.find(label)
            if index != -1:
                values[field] = line[index + len(label):].strip()
    return ContactInfo(**values)
