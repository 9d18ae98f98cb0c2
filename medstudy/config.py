"""
Configuration using Pydantic Settings for the medical study content client
"""
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import AliasChoices, Field, field_validator
from enum import Enum


class Environment(str, Enum):
    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings with validation and type safety"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Environment
    environment: Environment = Field(default=Environment.DEVELOPMENT)

    # API Keys
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("gemini_api_key", "api_key"),
        description="Google Gemini API key; unset switches content generation to mock mode"
    )

    # Models
    text_model: str = Field(default="gemini-2.5-flash")
    chat_model: str = Field(default="gemini-2.5-flash")
    image_model: str = Field(default="gemini-2.5-flash-image")
    speech_model: str = Field(default="gemini-2.5-flash-preview-tts")
    tts_voice_name: str = Field(default="Kore")

    # Generation
    study_guide_temperature: float = Field(default=0.4)
    quiz_temperature: float = Field(default=0.5)

    # Retry
    llm_max_retries: int = Field(default=2, ge=0)
    retry_base_delay_seconds: float = Field(default=1.5, ge=0)

    # Mock mode
    mock_latency_seconds: float = Field(
        default=1.0,
        ge=0,
        description="Simulated loading delay before returning mock content"
    )

    # Logging
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="json")

    @field_validator("study_guide_temperature", "quiz_temperature")
    def validate_temperature(cls, v):
        if not 0 <= v <= 2:
            raise ValueError("temperature must be between 0 and 2")
        return v

    @property
    def has_credential(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION


# Create global settings instance
settings = Settings()
