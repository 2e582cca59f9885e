import logging

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from config import settings
from moderation import check_profanity
import schemas
from service import error_response, relay_chat

# Configure logger
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create FastAPI app
app = FastAPI(title="DataHub AI Relay")

# Warn about missing configuration on startup
@app.on_event("startup")
def startup_event():
    settings.validate()

# Global Custom Error Handlers
@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Convert 422 to 400 with the {"error"} body every endpoint uses."""
    return error_response(400, f"Invalid data format: {str(exc)}")

@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
    """Catch all unhandled exceptions."""
    logger.error(f"[ERROR] Unhandled: {str(exc)}")
    return error_response(500, str(exc) or "Unknown error")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ============================================
# ENDPOINTS
# ============================================

@app.get("/")
async def health():
    """Health check endpoint."""
    return {"status": "ok", "service": "datahub-ai-relay"}

@app.options("/ai-chat")
@app.options("/moderate-content")
async def preflight():
    """Answer pre-flight requests with CORS headers only."""
    return Response(status_code=200, headers=settings.CORS_HEADERS)

@app.post("/ai-chat")
async def ai_chat(request: schemas.ChatRequest):
    """
    AI consultant endpoint.
    Selects a system prompt by language and mode, forwards the conversation
    to the AI gateway and streams the event stream back unmodified.
    """
    logger.info(f"[ENDPOINT] /ai-chat called with {len(request.messages)} messages")
    return await relay_chat(request)

@app.post("/moderate-content")
async def moderate_content(request: Request):
    """
    Content moderation endpoint.
    Missing or non-string text is clean. Errors, including an unreadable body,
    fail open with isClean=true.
    """
    try:
        body = await request.json()
        # Non-object bodies carry no text
        payload = schemas.ModerationRequest.model_validate(body if isinstance(body, dict) else {})
        logger.info(f"[ENDPOINT] /moderate-content checking {payload.type or 'text'}")

        text = payload.text
        if not text or not isinstance(text, str):
            return JSONResponse(content={"isClean": True}, headers=settings.CORS_HEADERS)

        result = check_profanity(text)
    except Exception as e:
        logger.error(f"[ERROR] Moderation failed: {str(e)}")
        return JSONResponse(
            status_code=500,
            content={"error": str(e), "isClean": True},
            headers=settings.CORS_HEADERS,
        )

    logger.info(f"[LOGIC] Moderation result: isClean={result.is_clean}")
    return JSONResponse(
        content=result.model_dump(by_alias=True, exclude_none=True),
        headers=settings.CORS_HEADERS,
    )

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)
