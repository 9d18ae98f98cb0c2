"""
Shared fixtures: settings, a recording sleep and fake Gemini clients.
"""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from medstudy.config import Settings


def _text_response(text):
    return SimpleNamespace(text=text, candidates=[], usage_metadata=None)


def _inline_part(data, mime_type="image/png"):
    return SimpleNamespace(text=None, inline_data=SimpleNamespace(data=data, mime_type=mime_type))


def _text_part(text):
    return SimpleNamespace(text=text, inline_data=None)


def _parts_response(*parts):
    return SimpleNamespace(
        text=None,
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=list(parts)))],
        usage_metadata=SimpleNamespace(total_token_count=42),
    )


def _make_client(*outcomes):
    # Exception instances in `outcomes` are raised instead of returned
    generate = AsyncMock(side_effect=list(outcomes))
    return SimpleNamespace(
        aio=SimpleNamespace(
            models=SimpleNamespace(generate_content=generate),
            chats=MagicMock(),
        )
    )


@pytest.fixture
def gemini():
    """Builders for fake genai clients and GenerateContentResponse-shaped objects."""
    return SimpleNamespace(
        client=_make_client,
        text_response=_text_response,
        parts_response=_parts_response,
        inline_part=_inline_part,
        text_part=_text_part,
    )


@pytest.fixture
def offline_settings():
    """No API key configured: mock mode."""
    return Settings(gemini_api_key=None, _env_file=None)


@pytest.fixture
def online_settings():
    """API key configured; clients are faked per test."""
    return Settings(gemini_api_key="test-key", _env_file=None)


@pytest.fixture
def sleep_calls():
    return []


@pytest.fixture
def fake_sleep(sleep_calls):
    """Records requested delays instead of waiting."""

    async def _sleep(seconds):
        sleep_calls.append(seconds)

    return _sleep
