from fastapi import APIRouter, HTTPException, UploadFile, File, Depends, Header, Query
import logging

from resume_intake.config import MODELS, settings
from resume_intake.models.resume_models import (
    ExtractTextRequest,
    ProcessBase64Request,
    ProcessResumeResponse,
    ResumeRecord,
    StoredResume,
)
from resume_intake.services.extraction_pipeline import EmptyInputError, extract
from resume_intake.services.record_store import ResumeRecordStore, get_record_store
from resume_intake.services.resume_service import decode_file_data, process_resume
from resume_intake.utils.dependencies import APIKeys, get_api_keys

logger = logging.getLogger(__name__)

router = APIRouter()


def _resolve_key(api_keys: APIKeys, provider: str, model_key: str, reformat: bool) -> str | None:
    """Get the API key for the given provider, required only when reformatting."""
    if not reformat:
        return None
    if provider not in MODELS:
        raise HTTPException(status_code=400, detail=f"Unknown provider: {provider}")
    if model_key not in MODELS[provider]:
        raise HTTPException(status_code=400, detail=f"Unknown model: {model_key} for provider {provider}")
    key = api_keys.get_key(provider)
    if not key:
        raise HTTPException(
            status_code=400,
            detail=f"Missing API key for provider '{provider}'. Set it in Settings or pass reformat=false.",
        )
    return key


def _check_size(file_bytes: bytes) -> None:
    if len(file_bytes) > settings.max_upload_mb * 1024 * 1024:
        logger.warning(f"Rejected upload of {len(file_bytes)} bytes (max {settings.max_upload_mb} MB)")
        raise HTTPException(status_code=400, detail=f"File too large (max {settings.max_upload_mb} MB)")


@router.post("/process", response_model=ProcessResumeResponse)
async def process_uploaded_resume(
    file: UploadFile = File(...),
    reformat: bool = Query(True),
    provider: str = Header(alias="X-LLM-Provider", default="groq"),
    model_key: str = Header(alias="X-LLM-Model", default="llama-3.3-70b"),
    api_keys: APIKeys = Depends(get_api_keys),
    store: ResumeRecordStore = Depends(get_record_store),
):
    """Upload a resume file (PDF/DOCX/TXT), extract its fields and store them."""
    if not file.filename:
        return ProcessResumeResponse(status="failed", message="No files uploaded")

    key = _resolve_key(api_keys, provider, model_key, reformat)

    file_bytes = await file.read()
    _check_size(file_bytes)

    return await process_resume(
        file_bytes=file_bytes,
        file_name=file.filename,
        mime_type=file.content_type,
        store=store,
        reformat=reformat,
        provider=provider,
        model_key=model_key,
        api_key=key,
    )


@router.post("/process-base64", response_model=ProcessResumeResponse)
async def process_base64_resume(
    body: ProcessBase64Request,
    reformat: bool = Query(True),
    provider: str = Header(alias="X-LLM-Provider", default="groq"),
    model_key: str = Header(alias="X-LLM-Model", default="llama-3.3-70b"),
    api_keys: APIKeys = Depends(get_api_keys),
    store: ResumeRecordStore = Depends(get_record_store),
):
    """Process the first file of a JSON upload whose data is base64 encoded."""
    if not body.files:
        return ProcessResumeResponse(status="failed", message="No files uploaded")

    payload = body.files[0]
    if not payload.data:
        return ProcessResumeResponse(status="failed", message="No data found in the uploaded file")

    key = _resolve_key(api_keys, provider, model_key, reformat)

    try:
        file_bytes = decode_file_data(payload.data)
    except ValueError:
        return ProcessResumeResponse(status="failed", message="File data is invalid")
    _check_size(file_bytes)

    return await process_resume(
        file_bytes=file_bytes,
        file_name=payload.original_name or ("resume" if payload.mimetype else "resume.txt"),
        mime_type=payload.mimetype,
        store=store,
        reformat=reformat,
        provider=provider,
        model_key=model_key,
        api_key=key,
    )


@router.post("/extract", response_model=ResumeRecord)
async def extract_resume_text(req: ExtractTextRequest):
    """Extract a record from already-labelled text without storing it."""
    try:
        return extract(req.text)
    except EmptyInputError as e:
        raise HTTPException(status_code=422, detail=str(e))


@router.get("/records", response_model=list[StoredResume])
async def list_records(store: ResumeRecordStore = Depends(get_record_store)):
    """List all stored resume records."""
    return store.list_records()


@router.get("/records/{record_id}", response_model=StoredResume)
async def get_record(record_id: str, store: ResumeRecordStore = Depends(get_record_store)):
    """Get a stored resume record by id."""
    stored = store.get(record_id)
    if not stored:
        raise HTTPException(status_code=404, detail=f"Resume record '{record_id}' not found")
    return stored


@router.delete("/records/{record_id}")
async def delete_record(record_id: str, store: ResumeRecordStore = Depends(get_record_store)):
    """Delete a stored resume record."""
    if not await store.delete(record_id):
        raise HTTPException(status_code=404, detail=f"Resume record '{record_id}' not found")
    return {"deleted": record_id}


@router.delete("/records")
async def clear_records(store: ResumeRecordStore = Depends(get_record_store)):
    """Delete every stored resume record."""
    count = await store.clear()
    return {"cleared": count}
