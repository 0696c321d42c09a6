from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, ConfigDict

from gemini_relay.settings import Settings, settings as default_settings

CONFIG_PATH = Path(__file__).with_name("config.yaml")

ATTACHMENT_KINDS = ("image", "document", "audio")


class GeminiModels(BaseModel):
    model_config = ConfigDict(frozen=True)

    text: str = "gemini-2.5-flash-lite"
    image: str = "gemini-2.5-flash"
    audio: str = "gemini-2.5-flash"
    document: str = "gemini-2.5-flash-lite"

    def for_kind(self, kind: str) -> str:
        return getattr(self, kind)


class DefaultPrompts(BaseModel):
    model_config = ConfigDict(frozen=True)

    image: str = "describe the following image"
    document: str = "summarize the following document"
    audio: str = "transcribe the following audio"

    def for_kind(self, kind: str) -> str:
        return getattr(self, kind)


class RelayConfig(BaseModel):
    """Built once at startup and shared read-only by every request."""
    model_config = ConfigDict(frozen=True)

    models: GeminiModels = GeminiModels()
    default_prompts: DefaultPrompts = DefaultPrompts()


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def load_relay_config(path: Path = CONFIG_PATH, settings: Optional[Settings] = None) -> RelayConfig:
    settings = settings or default_settings
    cfg = _load_yaml(path)

    models = dict(cfg.get("models") or {})
    overrides = {
        "text": settings.TEXT_MODEL,
        "image": settings.IMAGE_MODEL,
        "audio": settings.AUDIO_MODEL,
        "document": settings.DOCUMENT_MODEL,
    }
    models.update({k: v for k, v in overrides.items() if v})

    return RelayConfig(
        models=GeminiModels(**models),
        default_prompts=DefaultPrompts(**(cfg.get("default_prompts") or {})),
    )
