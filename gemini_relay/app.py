# ============================================================
# Gemini Relay FastAPI App
# ------------------------------------------------------------
# Stateless pass-through:
#   request -> Gemini generate_content -> extract_text -> {result}
#   - text, image, document and audio endpoints
#   - /api/chat for the browser client in public/
#   - Gemini client, or Echo client when no API key is set
# ============================================================

from typing import List, Optional

from fastapi import Depends, FastAPI, File, Form, Request, UploadFile
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pydantic import BaseModel

# --- Local imports ---
from gemini_relay import __version__
from gemini_relay.errors import InvalidInputError, UpstreamError
from gemini_relay.generate import Attachment, ContentGenerator, Message, RelayConfig, load_relay_config
from gemini_relay.generate.clients.echo_dev_client import EchoDevClient
from gemini_relay.logger import get_logger
from gemini_relay.settings import Settings, settings as default_settings

logger = get_logger(__name__)

PROMPT_INVALID = "Prompt is missing or invalid format."


# ------------------------------------------------------------
# 🔧 Model client selection
# ------------------------------------------------------------
def build_model_client(settings: Settings):
    if settings.has_api_key:
        from gemini_relay.generate.clients.gemini_client import GeminiClient
        return GeminiClient(api_key=settings.GEMINI_API_KEY.get_secret_value())
    logger.warning("No GEMINI_API_KEY configured; using the echo dev client.")
    return EchoDevClient()


# ------------------------------------------------------------
# 📦 Pydantic models
# ------------------------------------------------------------
class ChatTurn(BaseModel):
    role: str
    content: str


class ChatRequest(BaseModel):
    messages: List[ChatTurn]


class GenerationPayload(BaseModel):
    result: str


# ------------------------------------------------------------
# 🧰 Helpers
# ------------------------------------------------------------
def get_generator(request: Request) -> ContentGenerator:
    return request.app.state.generator


async def read_json_object(request: Request) -> dict:
    try:
        body = await request.json()
    except ValueError:
        return {}
    return body if isinstance(body, dict) else {}


async def read_attachment(upload: Optional[UploadFile], field: str) -> Attachment:
    """Buffer an uploaded file in memory."""
    if upload is None:
        raise InvalidInputError(field, f"{field.capitalize()} file is missing.")
    try:
        data = await upload.read()
    except Exception as e:
        raise UpstreamError(str(e)) from e
    return Attachment(mime_type=upload.content_type or "application/octet-stream", data=data)


# ------------------------------------------------------------
# 🚀 FastAPI init
# ------------------------------------------------------------
def create_app(
    config: Optional[RelayConfig] = None,
    model_client=None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    settings = settings or default_settings
    config = config or load_relay_config(settings=settings)
    model_client = model_client or build_model_client(settings)

    app = FastAPI(title=f"{settings.APP_NAME} API", version=__version__)
    app.state.settings = settings
    app.state.config = config
    app.state.generator = ContentGenerator(model_client=model_client, config=config)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # --------------------------------------------------------
    # ⚠️ Error translation
    # --------------------------------------------------------
    @app.exception_handler(InvalidInputError)
    async def invalid_input_handler(request: Request, exc: InvalidInputError):
        logger.info("Rejected %s: %s", request.url.path, exc.to_payload())
        return JSONResponse(status_code=400, content=exc.to_payload())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        errors = exc.errors()
        first = errors[0] if errors else {}
        loc = [str(p) for p in first.get("loc", ()) if p != "body"]
        field = loc[0] if loc else "body"
        return JSONResponse(status_code=400, content={field: first.get("msg", "Invalid request.")})

    @app.exception_handler(UpstreamError)
    async def upstream_handler(request: Request, exc: UpstreamError):
        logger.error("Request to %s failed: %s", request.url.path, exc.message)
        return JSONResponse(status_code=500, content=exc.to_payload())

    # --------------------------------------------------------
    # ✍️ Generation routes
    # --------------------------------------------------------
    @app.post("/generate-text", response_model=GenerationPayload)
    async def generate_text(request: Request, gen: ContentGenerator = Depends(get_generator)):
        body = await read_json_object(request)
        prompt = body.get("prompt")
        if not prompt or not isinstance(prompt, str):
            raise InvalidInputError("prompt", PROMPT_INVALID)
        return {"result": await gen.generate_text(prompt)}

    @app.post("/generate-from-image", response_model=GenerationPayload)
    async def generate_from_image(
        image: Optional[UploadFile] = File(None),
        prompt: Optional[str] = Form(None),
        gen: ContentGenerator = Depends(get_generator),
    ):
        attachment = await read_attachment(image, "image")
        return {"result": await gen.generate_from_attachment("image", attachment, prompt)}

    @app.post("/generate-from-document", response_model=GenerationPayload)
    async def generate_from_document(
        document: Optional[UploadFile] = File(None),
        prompt: Optional[str] = Form(None),
        gen: ContentGenerator = Depends(get_generator),
    ):
        attachment = await read_attachment(document, "document")
        return {"result": await gen.generate_from_attachment("document", attachment, prompt)}

    @app.post("/generate-from-audio", response_model=GenerationPayload)
    async def generate_from_audio(
        audio: Optional[UploadFile] = File(None),
        prompt: Optional[str] = Form(None),
        gen: ContentGenerator = Depends(get_generator),
    ):
        attachment = await read_attachment(audio, "audio")
        return {"result": await gen.generate_from_attachment("audio", attachment, prompt)}

    # --------------------------------------------------------
    # 💬 Chat route (browser client)
    # --------------------------------------------------------
    @app.post("/api/chat", response_model=GenerationPayload)
    async def chat(req: ChatRequest, gen: ContentGenerator = Depends(get_generator)):
        turns = [Message(role=t.role, content=t.content) for t in req.messages]
        return {"result": await gen.chat(turns)}

    # --------------------------------------------------------
    # 🧭 Health checks
    # --------------------------------------------------------
    @app.get("/healthz")
    def healthz():
        return {
            "ok": True,
            "env": settings.ENV,
            "debug": settings.DEBUG,
            "app": settings.APP_NAME,
            "engine": getattr(model_client, "engine", type(model_client).__name__),
        }

    @app.get("/health")
    def health():
        return {"status": "ok", "env": settings.ENV}

    # static chat client last so API routes win
    if settings.PUBLIC_DIR.is_dir():
        app.mount("/", StaticFiles(directory=settings.PUBLIC_DIR, html=True), name="public")
    else:
        logger.warning("Public dir %s not found; chat client not served.", settings.PUBLIC_DIR)

    return app


app = create_app()
