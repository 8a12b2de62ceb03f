"""
Text Extractor — turn an uploaded resume file into plain text.

Supports PDF (pdfplumber), DOCX (python-docx) and plain text. The file type is
taken from the extension, falling back to the MIME type when the name has none.
"""

from __future__ import annotations

import logging
from io import BytesIO

import docx
import pdfplumber

logger = logging.getLogger(__name__)

SUPPORTED_EXTENSIONS = ("pdf", "docx", "txt")

_MIME_EXTENSIONS = {
    "application/pdf": "pdf",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document": "docx",
    "text/plain": "txt",
}


class UnsupportedFileError(ValueError):
    """The uploaded file is not a PDF, DOCX or plain-text file."""


def detect_file_type(file_name: str, mime_type: str | None = None) -> str:
    """Return "pdf", "docx" or "txt" for the file, or raise UnsupportedFileError."""
    ext = file_name.rsplit(".", 1)[-1].lower() if "." in file_name else ""
    if not ext and mime_type:
        ext = _MIME_EXTENSIONS.get(mime_type.split(";", 1)[0].strip().lower(), "")
    if ext not in SUPPORTED_EXTENSIONS:
        label = f".{ext}" if ext else (mime_type or "unknown")
        raise UnsupportedFileError(
            f"Unsupported file type: {label}. Please upload PDF, DOCX or TXT."
        )
    return ext


def extract_text(file_bytes: bytes, file_name: str, mime_type: str | None = None) -> str:
    """Extract raw text from an uploaded file."""
    file_type = detect_file_type(file_name, mime_type)
    logger.info(f"Extracting text from '{file_name}' ({file_type}, {len(file_bytes)} bytes)")

    if file_type == "pdf":
        return _extract_pdf_text(file_bytes)
    if file_type == "docx":
        return _extract_docx_text(file_bytes)
    return _decode_plain_text(file_bytes)


# ── Extractors ───────────────────────────────────────────────────────────────


def _extract_pdf_text(file_bytes: bytes) -> str:
    """Extract text from a PDF file using pdfplumber."""
    text_parts: list[str] = []
    with pdfplumber.open(BytesIO(file_bytes)) as pdf:
        for page in pdf.pages:
            page_text = page.extract_text()
            if page_text:
                text_parts.append(page_text)
    return "\n\n".join(text_parts)


def _extract_docx_text(file_bytes: bytes) -> str:
    """Extract text from a DOCX file using python-docx."""
    document = docx.Document(BytesIO(file_bytes))
    text_parts: list[str] = []

    for para in document.paragraphs:
        stripped = para.text.strip()
        if stripped:
            text_parts.append(stripped)

    # Also extract text from tables (some resumes use tables for layout)
    for table in document.tables:
        for row in table.rows:
            for cell in row.cells:
                cell_text = cell.text.strip()
                if cell_text:
                    text_parts.append(cell_text)

    return "\n".join(text_parts)


def _decode_plain_text(file_bytes: bytes) -> str:
    return file_bytes.decode("utf-8-sig", errors="replace")
