# ContentGenerator:
# - accepts any model client (Gemini, Echo)
# - picks the model per request kind from RelayConfig
# - builds upstream messages (text, text + inline attachment, chat turns)
# - returns the extracted text of the raw result

from __future__ import annotations
from typing import List, Optional, Sequence

from gemini_relay.errors import InvalidInputError, UpstreamError
from gemini_relay.logger import get_logger
from .config import ATTACHMENT_KINDS, RelayConfig
from .extract import extract_text
from .types import Attachment, GenerationResult, Message

logger = get_logger(__name__)

MODEL_ROLES = {"bot", "assistant", "model"}


def to_upstream_role(role: str) -> str:
    return "model" if (role or "").lower() in MODEL_ROLES else "user"


class ContentGenerator:
    def __init__(self, model_client, config: RelayConfig):
        self.model_client = model_client
        self.config = config

    async def _call(self, model: str, messages: List[Message]) -> str:
        try:
            raw: GenerationResult = await self.model_client.generate(model, messages)
        except Exception as e:
            logger.error("Generation call to %s failed: %s", model, e)
            raise UpstreamError(str(e)) from e
        return extract_text(raw)

    async def generate_text(self, prompt: str) -> str:
        return await self._call(self.config.models.text, [Message(role="user", content=prompt)])

    async def generate_from_attachment(self, kind: str, attachment: Attachment, prompt: Optional[str] = None) -> str:
        """Send a prompt plus one inline attachment; blank prompts use the per-kind default."""
        if kind not in ATTACHMENT_KINDS:
            raise ValueError(f"Unknown attachment kind: {kind}")
        text = prompt if prompt and prompt.strip() else self.config.default_prompts.for_kind(kind)
        message = Message(role="user", content=text, attachment=attachment)
        return await self._call(self.config.models.for_kind(kind), [message])

    async def chat(self, turns: Sequence[Message]) -> str:
        if not turns:
            raise InvalidInputError("messages", "At least one message is required.")
        messages = [Message(role=to_upstream_role(t.role), content=t.content) for t in turns]
        return await self._call(self.config.models.text, messages)
