from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from resume_intake.services.llm_service import get_providers_info, validate_api_key
from resume_intake.utils.dependencies import APIKeys, get_api_keys

router = APIRouter()


class ValidateKeyRequest(BaseModel):
    provider: str
    key: str


class ValidateKeyResponse(BaseModel):
    valid: bool
    provider: str
    model_used: str
    error: str | None = None


@router.get("/providers")
async def list_providers(api_keys: APIKeys = Depends(get_api_keys)):
    """
    List the LLM providers usable for reformatting, and which ones have a key
    available (from headers or server config). Keys themselves are never returned.
    """
    available = set(api_keys.available_providers())
    providers = get_providers_info()
    for provider in providers:
        provider["has_key"] = provider["id"] in available
    return {"providers": providers}


@router.post("/validate-key", response_model=ValidateKeyResponse)
async def validate_key_endpoint(req: ValidateKeyRequest):
    """
    Test if an API key is valid for a given provider.
    Makes a tiny completion call with the provider's recommended model.
    """
    if not req.key or not req.key.strip():
        raise HTTPException(status_code=400, detail="API key cannot be empty")
    if not req.provider:
        raise HTTPException(status_code=400, detail="Provider is required")

    try:
        result = await validate_api_key(provider=req.provider, api_key=req.key.strip())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ValidateKeyResponse(**result)
