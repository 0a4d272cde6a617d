"""
FastAPI application entry point.
"""
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from prep_assistant import __version__
from prep_assistant.config import get_settings
from prep_assistant.exceptions import PrepAssistantError
from prep_assistant.routers import events_router, generate_router, pages_router
from prep_assistant.utils.logger import setup_logging

settings = get_settings()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler."""
    setup_logging(settings.log_level)
    logger.info(
        "%s starting (providers: %s)",
        settings.app_name,
        settings.provider_base_url or "in-process",
    )
    yield
    logger.info("%s stopped", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Interview prep assistant with mock calendar and brief providers",
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(PrepAssistantError)
async def prep_assistant_error_handler(request: Request, exc: PrepAssistantError) -> JSONResponse:
    """Render application errors as ``{"error": ...}``."""
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors (404, 405, ...) as ``{"error": ...}``, keeping headers such as Allow."""
    message = exc.detail
    if exc.status_code == status.HTTP_405_METHOD_NOT_ALLOWED:
        message = "Method not allowed"
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": str(message)},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Malformed request bodies are client errors, reported as 400."""
    errors = exc.errors()
    detail = errors[0].get("msg") if errors else None
    message = f"Invalid request: {detail}" if detail else "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


# JSON API under /api, pages at the root
app.include_router(events_router, prefix="/api")
app.include_router(generate_router, prefix="/api")
app.include_router(pages_router)


@app.get("/api")
async def api_root():
    """API root endpoint."""
    return {
        "name": settings.app_name,
        "version": __version__,
        "docs": "/docs",
    }


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy"}


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    setup_logging(settings.log_level)
    uvicorn.run(
        "prep_assistant.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug,
    )
