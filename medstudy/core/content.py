"""
Study content generation with Gemini: guides, quizzes, diagrams, narration and tutor chat
"""
import asyncio
import base64
import time
from typing import Any, Awaitable, Callable, List, Optional, TypeVar, Union

from google import genai
from google.genai import types
from google.genai.chats import AsyncChat

from medstudy.config import Settings, settings as default_settings
from medstudy.core.client import get_ai_client
from medstudy.core.exceptions import (
    MissingCredentialError,
    NoImageGeneratedError,
    NoTextPayloadError,
)
from medstudy.core.logging import get_logger, metrics_logger
from medstudy.core.mock_data import generate_mock_quiz, generate_mock_study_guide
from medstudy.core.prompts import (
    QUIZ_SCHEMA,
    STUDY_GUIDE_SCHEMA,
    STUDY_GUIDE_SYSTEM_PROMPT,
    build_image_prompt,
    build_quiz_prompt,
    build_study_guide_prompt,
    build_tutor_instruction,
)
from medstudy.core.retry import with_retry
from medstudy.schemas import Difficulty, QuizSession, StudyGuide, coerce_difficulty

logger = get_logger(__name__)

T = TypeVar('T')

ClientFactory = Callable[[Settings], Optional[genai.Client]]

DEFAULT_IMAGE_MIME_TYPE = "image/png"


def _to_base64(data: Union[bytes, str]) -> str:
    # The SDK decodes inline data to bytes; str payloads are already encoded
    if isinstance(data, str):
        return data
    return base64.b64encode(data).decode("ascii")


def _candidate_parts(response: Any) -> List[Any]:
    """Parts of the first candidate, or an empty list when the response has none."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        return []
    content = getattr(candidates[0], "content", None)
    if content is None:
        return []
    return list(content.parts or [])


class MedicalContentService:
    """Generate medical study content, falling back to mock data without an API key.

    Configuration is injected at construction and a client is rebuilt from it
    on every call. Study guides and quizzes degrade to deterministic mock
    content when no key is configured; chat, image and speech have no offline
    rendition and raise MissingCredentialError instead.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        client_factory: ClientFactory = get_ai_client,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ):
        self.settings = settings or default_settings
        self._client_factory = client_factory
        self._sleep = sleep

    def _client(self) -> Optional[genai.Client]:
        return self._client_factory(self.settings)

    def _require_client(self, operation: str) -> genai.Client:
        client = self._client()
        if client is None:
            logger.error("Gemini client unavailable", operation=operation)
            raise MissingCredentialError(operation)
        return client

    async def _with_retry(self, operation: Callable[[], Awaitable[T]], operation_name: str) -> T:
        return await with_retry(
            operation,
            retries=self.settings.llm_max_retries,
            base_delay=self.settings.retry_base_delay_seconds,
            sleep=self._sleep,
            operation_name=operation_name,
        )

    async def _simulate_latency(self) -> None:
        if self.settings.mock_latency_seconds > 0:
            await self._sleep(self.settings.mock_latency_seconds)

    async def _generate(
        self,
        client: genai.Client,
        *,
        model: str,
        contents: Any,
        config: Optional[types.GenerateContentConfig],
        operation: str,
        prompt_length: int,
    ) -> types.GenerateContentResponse:
        """Single generate_content call with request/duration metrics"""
        metrics_logger.log_llm_request(model, operation, prompt_length)
        start_time = time.time()
        try:
            response = await client.aio.models.generate_content(
                model=model,
                contents=contents,
                config=config,
            )
        except Exception:
            metrics_logger.log_llm_complete(model, operation, time.time() - start_time, success=False)
            raise

        usage = getattr(response, "usage_metadata", None)
        tokens_used = getattr(usage, "total_token_count", None)
        metrics_logger.log_llm_complete(
            model,
            operation,
            time.time() - start_time,
            tokens_used=tokens_used if isinstance(tokens_used, int) else 0,
        )
        return response

    async def generate_medical_content(self, topic: str) -> StudyGuide:
        """Structured clinical anatomy study guide for `topic`"""
        client = self._client()

        if client is None:
            metrics_logger.log_mock_response("study_guide", topic)
            await self._simulate_latency()
            return generate_mock_study_guide(topic)

        prompt = build_study_guide_prompt(topic)
        config = types.GenerateContentConfig(
            system_instruction=STUDY_GUIDE_SYSTEM_PROMPT,
            response_mime_type="application/json",
            temperature=self.settings.study_guide_temperature,
            response_schema=STUDY_GUIDE_SCHEMA,
        )

        async def _attempt() -> StudyGuide:
            response = await self._generate(
                client,
                model=self.settings.text_model,
                contents=prompt,
                config=config,
                operation="study_guide",
                prompt_length=len(prompt),
            )
            if not response.text:
                raise NoTextPayloadError("Failed to generate content", {"topic": topic})
            return StudyGuide.model_validate_json(response.text)

        guide = await self._with_retry(_attempt, "study_guide")
        logger.info("Study guide generated", topic=topic, sections=len(guide.sections))
        return guide

    def create_chat_session(self, topic: str) -> AsyncChat:
        """Tutor chat preloaded with a persona and Google Search grounding.

        The returned session is the SDK's own; send messages with
        `await chat.send_message(...)`.
        """
        client = self._require_client("chat_session")
        return client.aio.chats.create(
            model=self.settings.chat_model,
            config=types.GenerateContentConfig(
                system_instruction=build_tutor_instruction(topic),
                tools=[types.Tool(google_search=types.GoogleSearch())],
            ),
        )

    async def generate_quiz_questions(
        self,
        topic: str,
        difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
    ) -> QuizSession:
        """Five clinical vignette questions on `topic`"""
        level = coerce_difficulty(difficulty)
        client = self._client()

        if client is None:
            metrics_logger.log_mock_response("quiz", topic)
            await self._simulate_latency()
            return generate_mock_quiz(topic, level)

        prompt = build_quiz_prompt(topic, level)
        config = types.GenerateContentConfig(
            response_mime_type="application/json",
            temperature=self.settings.quiz_temperature,
            response_schema=QUIZ_SCHEMA,
        )

        async def _attempt() -> QuizSession:
            response = await self._generate(
                client,
                model=self.settings.text_model,
                contents=prompt,
                config=config,
                operation="quiz",
                prompt_length=len(prompt),
            )
            if not response.text:
                raise NoTextPayloadError("Failed to generate quiz", {"topic": topic, "difficulty": level.value})
            return QuizSession.model_validate_json(response.text)

        quiz = await self._with_retry(_attempt, "quiz")
        logger.info("Quiz generated", topic=topic, difficulty=level.value, questions=len(quiz.questions))
        return quiz

    async def generate_anatomy_image(self, topic: str, section: str) -> str:
        """Labelled anatomy diagram as a base64 data URI"""
        client = self._require_client("anatomy_image")
        prompt = build_image_prompt(topic, section)

        async def _attempt() -> str:
            response = await self._generate(
                client,
                model=self.settings.image_model,
                contents=prompt,
                config=None,
                operation="anatomy_image",
                prompt_length=len(prompt),
            )
            for part in _candidate_parts(response):
                inline = getattr(part, "inline_data", None)
                if inline is not None and inline.data:
                    mime_type = inline.mime_type or DEFAULT_IMAGE_MIME_TYPE
                    return f"data:{mime_type};base64,{_to_base64(inline.data)}"
            raise NoImageGeneratedError("No image generated", {"topic": topic, "section": section})

        return await self._with_retry(_attempt, "anatomy_image")

    async def generate_speech(self, text: str) -> Optional[str]:
        """Narrate `text`; returns base64 audio, or None when the response carries none"""
        client = self._require_client("speech")
        config = types.GenerateContentConfig(
            response_modalities=[types.Modality.AUDIO],
            speech_config=types.SpeechConfig(
                voice_config=types.VoiceConfig(
                    prebuilt_voice_config=types.PrebuiltVoiceConfig(
                        voice_name=self.settings.tts_voice_name,
                    )
                )
            ),
        )

        async def _attempt() -> Optional[str]:
            response = await self._generate(
                client,
                model=self.settings.speech_model,
                contents=[types.Content(parts=[types.Part(text=text)])],
                config=config,
                operation="speech",
                prompt_length=len(text),
            )
            parts = _candidate_parts(response)
            inline = getattr(parts[0], "inline_data", None) if parts else None
            if inline is None or not inline.data:
                logger.warning("Speech response carried no audio", text_length=len(text))
                return None
            return _to_base64(inline.data)

        return await self._with_retry(_attempt, "speech")


# Singleton instance
_content_service = None


def get_content_service() -> MedicalContentService:
    """Get singleton content service built from the global settings"""
    global _content_service
    if _content_service is None:
        _content_service = MedicalContentService()
    return _content_service


async def generate_medical_content(topic: str) -> StudyGuide:
    return await get_content_service().generate_medical_content(topic)


def create_chat_session(topic: str) -> AsyncChat:
    return get_content_service().create_chat_session(topic)


async def generate_quiz_questions(
    topic: str,
    difficulty: Union[Difficulty, str] = Difficulty.MEDIUM,
) -> QuizSession:
    return await get_content_service().generate_quiz_questions(topic, difficulty)


async def generate_anatomy_image(topic: str, section: str) -> str:
    return await get_content_service().generate_anatomy_image(topic, section)


async def generate_speech(text: str) -> Optional[str]:
    return await get_content_service().generate_speech(text)
