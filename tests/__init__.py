"""
Test suite for resume_intake.

    # Run all tests
    python -m pytest tests/ -v

LLM calls are always mocked; no API keys or network access are needed.
"""
