from typing import Optional
from pydantic import Field, computed_field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AISettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )
    # Model provider selection: "google" or "openrouter"
    provider: str = Field(default="google", alias="MODEL_PROVIDER")
    gemini_api_key: Optional[str] = Field(default=None, alias="GEMINI_API_KEY")
    google_model: str = Field(
        default="gemini-2.5-flash", alias="NOTECRAFT_GOOGLE_MODEL"
    )
    openrouter_api_key: Optional[str] = Field(
        default=None, alias="OPENROUTER_API_KEY"
    )
    openrouter_model: str = Field(
        default="openai/gpt-4.1", alias="OPENROUTER_MODEL"
    )
    timeout_seconds: float = Field(default=60.0, alias="NOTECRAFT_AI_TIMEOUT")
    output_retries: int = Field(default=2, alias="NOTECRAFT_AI_RETRIES")

    @computed_field
    def is_openrouter(self) -> bool:
        return (self.provider or "google").lower() == "openrouter"


class GenerationSettings(BaseSettings):
    """Thresholds shared by the analyzer and the synthesizers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
        populate_by_name=True,
    )
    minimum_flashcards: int = Field(default=15, alias="NOTECRAFT_MIN_FLASHCARDS")
    minimum_questions: int = Field(default=15, alias="NOTECRAFT_MIN_QUESTIONS")
    short_content_threshold: int = Field(
        default=100, alias="NOTECRAFT_SHORT_CONTENT"
    )

    max_term_length: int = Field(default=50, alias="NOTECRAFT_MAX_TERM_LENGTH")
    max_definition_length: int = Field(
        default=100, alias="NOTECRAFT_MAX_DEFINITION_LENGTH"
    )
    max_bullet_length: int = Field(default=100, alias="NOTECRAFT_MAX_BULLET_LENGTH")
    min_phrase_length: int = Field(default=5, alias="NOTECRAFT_MIN_PHRASE_LENGTH")
    max_phrase_length: int = Field(default=80, alias="NOTECRAFT_MAX_PHRASE_LENGTH")

    key_term_limit: int = Field(default=20, alias="NOTECRAFT_KEY_TERM_LIMIT")
    key_term_min_frequency: int = Field(
        default=2, alias="NOTECRAFT_KEY_TERM_MIN_FREQUENCY"
    )
    key_term_min_length: int = Field(default=4, alias="NOTECRAFT_KEY_TERM_MIN_LENGTH")


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    ai: AISettings = Field(default_factory=lambda: AISettings())
    generation: GenerationSettings = Field(
        default_factory=lambda: GenerationSettings()
    )

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")


settings = Settings()
