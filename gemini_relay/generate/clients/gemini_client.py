# Client for the Gemini API via the google-genai SDK.
# Exposes the same async generate(model, messages) interface as EchoDevClient.

from typing import List, Optional

from google import genai
from google.genai import types

from ..types import GenerationResult, Message


class GeminiClient:
    def __init__(self, api_key: Optional[str] = None):
        self.engine = "gemini"
        # api_key=None lets the SDK read GEMINI_API_KEY / GOOGLE_API_KEY itself
        self.client = genai.Client(api_key=api_key)

    async def generate(self, model: str, messages: List[Message]) -> GenerationResult:
        contents = [self._to_content(m) for m in messages]
        return await self.client.aio.models.generate_content(model=model, contents=contents)

    @staticmethod
    def _to_content(message: Message) -> types.Content:
        parts = [types.Part.from_text(text=message.content)]
        if message.attachment is not None:
            parts.append(
                types.Part.from_bytes(
                    data=message.attachment.data,
                    mime_type=message.attachment.mime_type,
                )
            )
        role = "model" if message.role == "model" else "user"
        return types.Content(role=role, parts=parts)
