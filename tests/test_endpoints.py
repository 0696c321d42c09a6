from fastapi.testclient import TestClient

from gemini_relay.app import create_app
from gemini_relay.generate import EchoDevClient


class FailingClient:
    engine = "failing"

    async def generate(self, model, messages):
        raise RuntimeError("quota exceeded")


echo = EchoDevClient()
client = TestClient(create_app(model_client=echo))
failing = TestClient(create_app(model_client=FailingClient()))


def test_root_serves_chat_client():
    r = client.get("/")
    assert r.status_code == 200
    assert "chat-form" in r.text


def test_health_ok():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json()["status"] == "ok"


def test_healthz_reports_engine():
    r = client.get("/healthz")
    assert r.status_code == 200
    assert r.json()["ok"] is True
    assert r.json()["engine"] == "echo"


def test_generate_text_ok():
    r = client.post("/generate-text", json={"prompt": "Hello there"})
    assert r.status_code == 200
    assert r.json() == {"result": "[ECHO RESPONSE]\nHello there"}
    assert echo.calls[-1]["model"] == "gemini-2.5-flash-lite"


def test_generate_text_missing_prompt():
    r = client.post("/generate-text", json={})
    assert r.status_code == 400
    assert r.json() == {"prompt": "Prompt is missing or invalid format."}


def test_generate_text_non_string_prompt():
    r = client.post("/generate-text", json={"prompt": 42})
    assert r.status_code == 400
    assert "prompt" in r.json()


def test_generate_text_without_body():
    r = client.post("/generate-text")
    assert r.status_code == 400


def test_generate_text_upstream_failure():
    r = failing.post("/generate-text", json={"prompt": "Hello"})
    assert r.status_code == 500
    assert r.json() == {"error": "quota exceeded"}


def test_generate_from_image_with_prompt():
    r = client.post(
        "/generate-from-image",
        data={"prompt": "What is this?"},
        files={"image": ("cat.png", b"\x89PNG", "image/png")},
    )
    assert r.status_code == 200
    assert r.json()["result"] == "[ECHO RESPONSE]\nWhat is this?\n(attachment: image/png, 4 bytes)"
    assert echo.calls[-1]["model"] == "gemini-2.5-flash"


def test_generate_from_document_default_prompt():
    r = client.post(
        "/generate-from-document",
        files={"document": ("a.pdf", b"%PDF-1.4", "application/pdf")},
    )
    assert r.status_code == 200
    assert r.json()["result"] == (
        "[ECHO RESPONSE]\nsummarize the following document\n(attachment: application/pdf, 8 bytes)"
    )


def test_generate_from_audio_default_prompt():
    r = client.post(
        "/generate-from-audio",
        files={"audio": ("clip.mp3", b"ID3", "audio/mpeg")},
    )
    assert r.status_code == 200
    assert "transcribe the following audio" in r.json()["result"]


def test_generate_from_document_missing_file():
    r = client.post("/generate-from-document", data={"prompt": "summarize"})
    assert r.status_code == 400
    assert r.json() == {"document": "Document file is missing."}


def test_generate_from_audio_upstream_failure():
    r = failing.post("/generate-from-audio", files={"audio": ("clip.mp3", b"ID3", "audio/mpeg")})
    assert r.status_code == 500
    assert r.json() == {"error": "quota exceeded"}


def test_api_chat_ok():
    r = client.post(
        "/api/chat",
        json={
            "messages": [
                {"role": "user", "content": "hi"},
                {"role": "bot", "content": "hello"},
                {"role": "user", "content": "how are you?"},
            ]
        },
    )
    assert r.status_code == 200
    assert r.json() == {"result": "[ECHO RESPONSE]\nhow are you?"}
    assert [m.role for m in echo.calls[-1]["messages"]] == ["user", "model", "user"]


def test_api_chat_empty_messages():
    r = client.post("/api/chat", json={"messages": []})
    assert r.status_code == 400
    assert r.json() == {"messages": "At least one message is required."}


def test_api_chat_missing_messages():
    r = client.post("/api/chat", json={})
    assert r.status_code == 400
    assert "messages" in r.json()