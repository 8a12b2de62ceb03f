"""
Resume Service — process an uploaded resume end to end.

Responsibilities:
  • Extract raw text from the uploaded file (PDF / DOCX / TXT)
  • Clean up the extracted text
  • Optionally reformat it into the labelled layout via LLM
  • Run the extraction pipeline over the text
  • Upsert the record into the record store under an id derived from the name
"""

from __future__ import annotations

import base64
import binascii
import logging
import re
from pathlib import PurePath

from resume_intake.models.resume_models import (
    ProcessResumeResponse,
    ResumeRecord,
    StoredResume,
)
from resume_intake.services.extraction_pipeline import EmptyInputError, extract
from resume_intake.services.formatter_service import (
    FormatterUnavailableError,
    reformat_resume_text,
)
from resume_intake.services.record_store import ResumeRecordStore
from resume_intake.services.text_extractor import UnsupportedFileError, extract_text
from resume_intake.utils.file_hash import md5_hash
from resume_intake.utils.text_cleanup import normalize_text

logger = logging.getLogger(__name__)

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_DATA_URL_PREFIX_RE = re.compile(r"^data:[^,]*;base64,")

DEFAULT_RECORD_ID = "resume"


# ── Public API ───────────────────────────────────────────────────────────────


async def process_resume(
    *,
    file_bytes: bytes,
    file_name: str,
    mime_type: str | None,
    store: ResumeRecordStore,
    reformat: bool = True,
    provider: str | None = None,
    model_key: str | None = None,
    api_key: str | None = None,
) -> ProcessResumeResponse:
    """Run text extraction → (reformat) → field extraction → upsert for one file."""
    if reformat and not (provider and model_key and api_key):
        raise ValueError("reformat requires provider, model_key and api_key")
    if not file_bytes:
        return _failed("No data found in the uploaded file")

    try:
        try:
            raw_text = extract_text(file_bytes, file_name, mime_type)
        except UnsupportedFileError as e:
            return _failed(str(e))

        raw_text = normalize_text(raw_text)
        if not raw_text:
            return _failed(
                f"Could not extract any text from {file_name}. "
                "The file may be image-based or corrupted."
            )

        text = raw_text
        if reformat:
            try:
                text = await reformat_resume_text(
                    raw_text,
                    provider=provider,
                    model_key=model_key,
                    api_key=api_key,
                )
            except FormatterUnavailableError as e:
                logger.error(f"Reformatting failed for '{file_name}': {e}")
                return _failed(f"Extraction service unavailable: {e}")

        try:
            record = extract(text)
        except EmptyInputError:
            return _failed("Text had no recognizable structure")

        record_id = derive_record_id(record, file_name)
        await store.upsert(StoredResume(
            id=record_id,
            file_name=file_name,
            mime_type=mime_type or "application/octet-stream",
            file_hash=md5_hash(file_bytes),
            record=record,
            source_text=text,
        ))
    except Exception as e:
        logger.exception(f"Unexpected error processing '{file_name}'")
        return _failed(f"Error processing the file: {e}")

    missing = record.missing_fields()
    logger.info(f"Processed '{file_name}' → '{record_id}' (missing: {missing or 'none'})")

    message = f"File {file_name} processed successfully! Stored as '{record_id}'."
    if len(missing) == len(ResumeRecord.model_fields):
        message += " No recognizable sections were found."
    elif missing:
        message += f" Missing sections: {', '.join(missing)}."

    return ProcessResumeResponse(
        status="success",
        message=message,
        record_id=record_id,
        record=record,
    )


def derive_record_id(record: ResumeRecord, file_name: str) -> str:
    """Build the storage id from the extracted name, else from the file name."""
    for candidate in (record.name, PurePath(file_name).stem):
        if candidate:
            slug = _slugify(candidate)
            if slug:
                return slug
    return DEFAULT_RECORD_ID


def decode_file_data(data: str) -> bytes:
    """Decode base64 file data, with or without a data-URL prefix."""
    payload = _DATA_URL_PREFIX_RE.sub("", data.strip(), count=1)
    try:
        return base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"File data is invalid: {e}") from e


# ── Helpers ──────────────────────────────────────────────────────────────────


def _slugify(value: str) -> str:
    return _NON_ALNUM_RE.sub("_", value.lower()).strip("_")


def _failed(message: str) -> ProcessResumeResponse:
    logger.warning(f"Resume processing failed: {message}")
    return ProcessResumeResponse(status="failed", message=message)
