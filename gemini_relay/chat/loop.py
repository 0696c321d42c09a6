"""
Chat interaction loop, one submission at a time.

    IDLE -> SENDING -> AWAITING_RESPONSE -> RENDERED | FAILED -> IDLE

The loop drives a ``ChatView`` (bubbles, input state) and a transport that
posts to ``/api/chat``. No retry and no timeout at this layer. While a
submission is in flight the input is disabled, which serializes submissions
from a single loop instance.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Literal, Optional, Protocol

import requests

from gemini_relay.logger import get_logger
from gemini_relay.render import render_markdown

logger = get_logger(__name__)

THINKING = "Thinking..."
NO_RESPONSE = "Sorry, no response was received from the server."
FAILURE = "Failed to get a response. Please check the connection and try again."


class ChatState(str, Enum):
    IDLE = "idle"
    SENDING = "sending"
    AWAITING_RESPONSE = "awaiting_response"
    RENDERED = "rendered"
    FAILED = "failed"


@dataclass
class ChatMessage:
    content: str
    role: Literal["user", "bot"]
    error: bool = False


class ChatView(Protocol):
    def add_message(self, content: str, role: str) -> ChatMessage: ...

    def set_input_enabled(self, enabled: bool) -> None: ...

    def clear_input(self) -> None: ...

    def focus_input(self) -> None: ...


@dataclass
class TranscriptView:
    """In-memory view: keeps bubbles and input state as plain attributes."""
    messages: List[ChatMessage] = field(default_factory=list)
    input_enabled: bool = True
    input_value: str = ""
    focused: bool = False

    def add_message(self, content: str, role: str) -> ChatMessage:
        msg = ChatMessage(content=content, role=role)
        self.messages.append(msg)
        return msg

    def set_input_enabled(self, enabled: bool) -> None:
        self.input_enabled = enabled
        if not enabled:
            self.focused = False

    def clear_input(self) -> None:
        self.input_value = ""

    def focus_input(self) -> None:
        self.focused = True


class ChatTransport(Protocol):
    def send(self, messages: List[Dict[str, str]]) -> Dict[str, Any]: ...


class HttpChatTransport:
    def __init__(self, base_url: str = "http://localhost:3000", path: str = "/api/chat", session: Optional[requests.Session] = None):
        self.url = base_url.rstrip("/") + path
        self.session = session or requests.Session()

    def send(self, messages: List[Dict[str, str]]) -> Dict[str, Any]:
        # raises on transport errors and non-2xx statuses
        resp = self.session.post(self.url, json={"messages": messages})
        resp.raise_for_status()
        return resp.json()


class ChatLoop:
    def __init__(self, view: ChatView, transport: ChatTransport):
        self.view = view
        self.transport = transport
        self.state = ChatState.IDLE
        self.transitions: List[ChatState] = [ChatState.IDLE]

    def _enter(self, state: ChatState) -> None:
        self.state = state
        self.transitions.append(state)

    def submit(self, text: str) -> ChatState:
        """Run one submission to completion and return the terminal state reached."""
        message = (text or "").strip()
        if not message or self.state is not ChatState.IDLE:
            return self.state

        self.view.set_input_enabled(False)
        self.view.add_message(message, "user")
        self.view.clear_input()
        bubble = self.view.add_message(THINKING, "bot")
        self._enter(ChatState.SENDING)

        terminal = ChatState.FAILED
        try:
            self._enter(ChatState.AWAITING_RESPONSE)
            data = self.transport.send([{"role": "user", "content": message}])
            result = data.get("result") if isinstance(data, dict) else None
            bubble.content = render_markdown(str(result)) if result else NO_RESPONSE
            terminal = ChatState.RENDERED
        except Exception as e:
            logger.error("Error fetching chat response: %s", e)
            bubble.content = FAILURE
            bubble.error = True
        finally:
            self._enter(terminal)
            self.view.set_input_enabled(True)
            self.view.focus_input()
            self._enter(ChatState.IDLE)
        return terminal
