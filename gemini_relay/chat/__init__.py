from .loop import (
    ChatLoop,
    ChatMessage,
    ChatState,
    ChatView,
    HttpChatTransport,
    TranscriptView,
)

__all__ = ["ChatLoop", "ChatMessage", "ChatState", "ChatView", "HttpChatTransport", "TranscriptView"]
