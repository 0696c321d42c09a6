# Typed dataclasses shared across generator modules.

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional

# Raw upstream output: an SDK response object or a nested dict/list tree.
GenerationResult = Any


@dataclass(frozen=True)
class Attachment:
    """Binary payload sent inline next to a text prompt."""
    mime_type: str
    data: bytes


@dataclass
class Message:
    """Single chat turn: user or model, optionally carrying an attachment."""
    role: str
    content: str
    attachment: Optional[Attachment] = None
