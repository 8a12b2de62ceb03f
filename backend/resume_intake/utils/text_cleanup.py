"""
Text cleanup utilities for raw resume text extraction.
"""

from __future__ import annotations

import re
import unicodedata

_REPLACEMENTS = {
    "\u2019": "'",   # right single quote
    "\u2018": "'",   # left single quote
    "\u201c": '"',   # left double quote
    "\u201d": '"',   # right double quote
    "\u2013": "-",   # en-dash
    "\u2014": "-",   # em-dash
    "\u2026": "...", # ellipsis
    "\u00a0": " ",   # non-breaking space
    "\u200b": "",    # zero-width space
    "\ufeff": "",    # BOM
}


def normalize_text(text: str) -> str:
    """Normalize unicode, line endings and whitespace in raw extracted text.

    Section labels must start their lines, so every line is stripped and
    Windows/Mac line endings are folded into "\\n".
    """
    text = unicodedata.normalize("NFKC", text)

    for old, new in _REPLACEMENTS.items():
        text = text.replace(old, new)

    text = text.replace("\r\n", "\n").replace("\r", "\n")

    # Collapse runs of spaces/tabs into one
    text = re.sub(r"[ \t]+", " ", text)

    lines = [line.strip() for line in text.split("\n")]
    text = "\n".join(lines)

    # Collapse 3+ consecutive newlines into 2
    text = re.sub(r"\n{3,}", "\n\n", text)

    return text.strip()
