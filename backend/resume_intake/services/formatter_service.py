"""
Formatter Service — ask an LLM to rewrite raw resume text into the labelled
layout the extraction pipeline reads.
"""

from __future__ import annotations

import logging
import re

from resume_intake.prompts.resume_formatter import SYSTEM_PROMPT, USER_PROMPT_TEMPLATE
from resume_intake.services.llm_service import complete

logger = logging.getLogger(__name__)

_CODE_FENCE_RE = re.compile(r"^```[a-zA-Z]*\s*\n(.*?)\n?```\s*$", re.DOTALL)


class FormatterUnavailableError(RuntimeError):
    """The reformatting LLM could not be reached or rejected the request."""


async def reformat_resume_text(
    raw_text: str,
    *,
    provider: str,
    model_key: str,
    api_key: str,
) -> str:
    """Return the LLM's labelled rendition of the resume text."""
    messages = [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": USER_PROMPT_TEMPLATE.format(resume_text=raw_text)},
    ]

    logger.info(f"Reformatting resume text ({len(raw_text)} chars) with {provider}/{model_key}")

    try:
        reply = await complete(
            provider=provider,
            model_key=model_key,
            api_key=api_key,
            messages=messages,
            prompt_name="resume_formatter",
        )
    except Exception as e:
        raise FormatterUnavailableError(f"{provider}/{model_key}: {e}") from e

    return _strip_code_fence(reply)


def _strip_code_fence(reply: str) -> str:
    """Unwrap a reply the model put inside a ``` block."""
    match = _CODE_FENCE_RE.match(reply.strip())
    if match:
        return match.group(1)
    return reply
