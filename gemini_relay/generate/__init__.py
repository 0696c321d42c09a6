# Generator package

# Exposes the generator, its config and the extraction helper.

from .config import DefaultPrompts, GeminiModels, RelayConfig, load_relay_config
from .extract import extract_text
from .generator import ContentGenerator
from .types import Attachment, GenerationResult, Message
from .clients.echo_dev_client import EchoDevClient

__all__ = [
    "ContentGenerator",
    "RelayConfig",
    "GeminiModels",
    "DefaultPrompts",
    "load_relay_config",
    "extract_text",
    "Attachment",
    "GenerationResult",
    "Message",
    "EchoDevClient",
]
