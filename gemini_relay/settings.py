# gemini_relay/settings.py
import os
from pathlib import Path
from typing import List, Optional

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

ROOT = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Gemini Relay")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)

    # upstream key; genai.Client also reads GOOGLE_API_KEY on its own
    GEMINI_API_KEY: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )

    # serving
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])
    PUBLIC_DIR: Path = ROOT / "public"

    # per-kind model overrides (fall back to generate/config.yaml)
    TEXT_MODEL: Optional[str] = None
    IMAGE_MODEL: Optional[str] = None
    AUDIO_MODEL: Optional[str] = None
    DOCUMENT_MODEL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def has_api_key(self) -> bool:
        return self.GEMINI_API_KEY is not None and bool(self.GEMINI_API_KEY.get_secret_value())


settings = Settings()
