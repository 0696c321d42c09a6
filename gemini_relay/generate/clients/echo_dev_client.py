# Dummy model client for local dev and testing without API calls.
# Returns a dict shaped like an upstream response so extraction runs for real.

from typing import Any, Dict, List
from ..types import Message


class EchoDevClient:
    def __init__(self):
        self.engine = "echo"
        self.calls: List[Dict[str, Any]] = []

    async def generate(self, model: str, messages: List[Message]) -> Dict[str, Any]:
        self.calls.append({"model": model, "messages": messages})
        user_turns = [m for m in messages if m.role == "user"]
        last = user_turns[-1] if user_turns else None
        text = f"[ECHO RESPONSE]\n{last.content if last else '(no user input)'}"
        if last is not None and last.attachment is not None:
            text += f"\n(attachment: {last.attachment.mime_type}, {len(last.attachment.data)} bytes)"
        return {
            "candidates": [{"content": {"role": "model", "parts": [{"text": text}]}}],
            "modelVersion": model,
        }
