from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Resume Intake"
    debug: bool = True
    log_level: str = "INFO"

    # CORS
    frontend_url: str = "http://localhost:5173"

    # LLM API Keys (request headers take precedence, these are optional server defaults)
    groq_api_key: Optional[str] = None
    openrouter_api_key: Optional[str] = None
    gemini_api_key: Optional[str] = None

    # Record store
    records_path: str = "data/resume_records.yaml"

    # Uploads
    max_upload_mb: int = 10

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "groq": {
        "llama-3.3-70b": {
            "name": "LLaMA 3.3 70B",
            "model_id": "groq/llama-3.3-70b-versatile",
            "description": "Best all-rounder for resume reformatting",
            "recommended": True,
        },
        "llama-3.1-8b": {
            "name": "LLaMA 3.1 8B Instant",
            "model_id": "groq/llama-3.1-8b-instant",
            "description": "Fast and cheap, fine for clean resumes",
            "recommended": False,
        },
    },
    "google": {
        "gemini-2.0-flash": {
            "name": "Gemini 2.0 Flash",
            "model_id": "gemini/gemini-2.0-flash",
            "description": "Most reliable at following the section layout",
            "recommended": True,
        },
        "gemini-1.5-flash": {
            "name": "Gemini 1.5 Flash",
            "model_id": "gemini/gemini-1.5-flash",
            "description": "Fallback when 2.0 hits rate limits",
            "recommended": False,
        },
    },
    "openrouter": {
        "deepseek-r1-0528": {
            "name": "DeepSeek R1 0528",
            "model_id": "openrouter/deepseek/deepseek-r1-0528:free",
            "description": "Deep reasoning, slower",
            "recommended": False,
        },
        "kimi-k2": {
            "name": "Kimi K2",
            "model_id": "openrouter/moonshotai/kimi-k2:free",
            "description": "Good with tech-heavy resumes",
            "recommended": True,
        },
    },
}

# ── Prompt Configuration ────────────────────────────────────────────────────

PROMPT_CONFIG = {
    "resume_formatter": {"temperature": 0.1, "max_tokens": 2000},
}
