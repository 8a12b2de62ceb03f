"""
Request-scoped helpers — extract API keys from headers, fall back to server defaults.
"""

from __future__ import annotations

from fastapi import Header
from typing import Optional

from resume_intake.config import settings


class APIKeys:
    """Container for per-request API keys extracted from headers."""

    def __init__(
        self,
        groq: str | None = None,
        google: str | None = None,
        openrouter: str | None = None,
    ):
        self.groq = groq
        self.google = google
        self.openrouter = openrouter

    def get_key(self, provider: str) -> str | None:
        """Get the key for a specific provider, None for unknown providers."""
        keys = {
            "groq": self.groq,
            "google": self.google,
            "openrouter": self.openrouter,
        }
        return keys.get(provider)

    def available_providers(self) -> list[str]:
        return [p for p in ("groq", "google", "openrouter") if self.get_key(p)]


async def get_api_keys(
    x_groq_key: Optional[str] = Header(None, alias="X-Groq-Key"),
    x_google_key: Optional[str] = Header(None, alias="X-Google-Key"),
    x_openrouter_key: Optional[str] = Header(None, alias="X-OpenRouter-Key"),
) -> APIKeys:
    """FastAPI dependency: header keys first, then keys configured on the server."""
    return APIKeys(
        groq=x_groq_key or settings.groq_api_key or None,
        google=x_google_key or settings.gemini_api_key or None,
        openrouter=x_openrouter_key or settings.openrouter_api_key or None,
    )
