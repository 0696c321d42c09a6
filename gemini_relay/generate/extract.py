"""
Locate the human-readable text inside a raw generation result.

Upstream response shapes differ between SDK versions and call modes, so
``extract_text`` walks an ordered list of known paths and takes the first
string it finds. When nothing matches, the whole result is returned as
pretty-printed JSON instead. ``extract_text`` never raises.
"""

from __future__ import annotations

import base64
import json
import math
from collections.abc import Mapping, Sequence
from typing import Any, Optional, Tuple, Union

from .types import GenerationResult
from gemini_relay.logger import get_logger

logger = get_logger(__name__)

PathStep = Union[str, int]

# Priority order matters: first present string wins.
EXTRACTION_PATHS: Tuple[Tuple[PathStep, ...], ...] = (
    ("response", "candidates", 0, "content", "parts", 0, "text"),
    ("candidates", 0, "content", "parts", 0, "text"),
    ("response", "candidates", 0, "content", "text"),
)

UNSERIALIZABLE_RESULT = "[unserializable generation result]"

_MISSING = object()


def _step(node: Any, key: PathStep) -> Any:
    if node is None:
        return _MISSING
    if isinstance(key, int):
        if isinstance(node, (str, bytes)) or not isinstance(node, Sequence):
            return _MISSING
        return node[key] if -len(node) <= key < len(node) else _MISSING
    if isinstance(node, Mapping):
        return node.get(key, _MISSING)
    return getattr(node, key, _MISSING)


def follow_path(result: GenerationResult, path: Tuple[PathStep, ...]) -> Optional[str]:
    """Walk one path; None when any step is absent or the leaf is not a string."""
    node = result
    for key in path:
        node = _step(node, key)
        if node is _MISSING or node is None:
            return None
    return node if isinstance(node, str) else None


def to_jsonable(result: GenerationResult) -> Any:
    # SDK responses are pydantic models; unset fields are dropped like undefined in JSON.
    dump = getattr(result, "model_dump", None)
    if callable(dump):
        return dump(mode="json", exclude_none=True)
    return result


def _json_safe(value: Any) -> Any:
    # non-finite floats become null and bytes become base64, as in the SDK json dump
    if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
        return None
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(value).decode("ascii")
    if isinstance(value, Mapping):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value

def dump_result(result: GenerationResult) -> str:
    try:
        return json.dumps(_json_safe(to_jsonable(result)), indent=2, ensure_ascii=False)
    except Exception:
        logger.exception("Generation result could not be serialized")
        return UNSERIALIZABLE_RESULT


def extract_text(result: GenerationResult) -> str:
    try:
        for path in EXTRACTION_PATHS:
            text = follow_path(result, path)
            if text is not None:
                return text
    except Exception:
        logger.exception("Error extracting text from generation result")
        return dump_result(result)

    logger.warning("No known text shape in generation result; returning raw dump")
    return dump_result(result)
