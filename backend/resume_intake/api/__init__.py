from resume_intake.api import (
    resume_routes,
    llm_routes,
)

__all__ = [
    "resume_routes",
    "llm_routes",
]
