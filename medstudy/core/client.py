"""
Gemini client factory
"""
from typing import Optional
from google import genai

from medstudy.config import Settings


def get_ai_client(settings: Settings) -> Optional[genai.Client]:
    """Build a Gemini client from the configured API key.

    Returns None when no key is configured; callers must branch on that
    before making network calls.
    """
    if not settings.has_credential:
        return None
    return genai.Client(api_key=settings.gemini_api_key.strip())
