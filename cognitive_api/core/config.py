from __future__ import annotations

from functools import lru_cache
from pathlib import Path

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def _default_media_dir() -> Path:
    # <repo>/uploads
    return (Path(__file__).resolve().parents[2] / "uploads").resolve()


class Settings(BaseSettings):
    """Application settings read from the environment and an optional `.env` file."""

    model_config = SettingsConfigDict(case_sensitive=True, env_file=".env", extra="ignore")

    APP_NAME: str = Field(default="cognitive-api")
    ENV: str = Field(default="dev")
    LOG_LEVEL: str = Field(default="INFO")
    LOG_JSON: bool = Field(default=False)

    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=3000)
    API_PREFIX: str = Field(default="/api")
    PUBLIC_BASE_URL: str = Field(default="http://localhost:3000")
    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["http://localhost:8080"])

    # Generated assets live here and are published under /uploads
    MEDIA_DIR: Path = Field(default_factory=_default_media_dir)
    MEDIA_URL_PATH: str = Field(default="/uploads")
    # Staging dir for incoming uploads; None means the system temp dir
    UPLOAD_DIR: Path | None = Field(default=None)
    MAX_UPLOAD_BYTES: int = Field(default=10 * 1024 * 1024, gt=0)

    HTTP_TIMEOUT_SECONDS: float = Field(default=30.0, gt=0)
    HTTP_VERIFY_SSL: bool = Field(default=True)

    AZURE_LANGUAGE_ENDPOINT: str | None = Field(default=None)
    AZURE_LANGUAGE_KEY: SecretStr | None = Field(default=None)
    LANGUAGE_API_VERSION: str = Field(default="2023-04-01")
    SUMMARY_SENTENCE_COUNT: int = Field(default=3, gt=0)
    SUMMARY_LANGUAGE: str = Field(default="en")
    MIN_SUMMARY_TEXT_LENGTH: int = Field(default=10, gt=0)

    AZURE_TRANSLATOR_ENDPOINT: str = Field(default="https://api.cognitive.microsofttranslator.com")
    AZURE_TRANSLATOR_KEY: SecretStr | None = Field(default=None)
    AZURE_TRANSLATOR_REGION: str = Field(default="global")

    AZURE_VISION_ENDPOINT: str | None = Field(default=None)
    AZURE_VISION_KEY: SecretStr | None = Field(default=None)

    AZURE_SPEECH_KEY: SecretStr | None = Field(default=None)
    AZURE_SPEECH_REGION: str | None = Field(default=None)
    TTS_DEFAULT_VOICE: str = Field(default="en-US-JennyNeural")
    STT_LANGUAGE: str = Field(default="en-US")
    STT_RECOGNITION_WINDOW_SECONDS: float = Field(default=5.0, gt=0)

    POLL_INTERVAL_SECONDS: float = Field(default=1.0, gt=0)
    POLL_MAX_ATTEMPTS: int | None = Field(default=60, gt=0)
    POLL_MAX_WAIT_SECONDS: float | None = Field(default=120.0, gt=0)

    HANDWRITING_MOCK_ENABLED: bool = Field(default=True)
    HANDWRITING_MOCK_DELAY_SECONDS: float = Field(default=2.0, ge=0)

    def media_url(self, filename: str) -> str:
        """Public URL of a file stored in MEDIA_DIR."""
        base = self.PUBLIC_BASE_URL.rstrip("/")
        path = "/" + self.MEDIA_URL_PATH.strip("/")
        return f"{base}{path}/{filename}"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
