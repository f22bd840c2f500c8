import logging
from fastapi import Depends, FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from contextlib import asynccontextmanager

from .core.config import (
    APP_VERSION,
    LOG_LEVEL_FROM_ENV,
    CORS_ALLOW_ORIGINS,
    GENERATE_PATH,
    MODELS_PATH,
)
from .core.gemini_client import GeminiChatClient, get_gemini_client, reset_gemini_client
from .api import generate as generate_router
from .middleware import AccessLogMiddleware
from .utils.helpers import error_response

numeric_log_level = getattr(logging, LOG_LEVEL_FROM_ENV, logging.INFO)

root_logger = logging.getLogger()
root_logger.setLevel(numeric_log_level)

console_handler = logging.StreamHandler()
console_handler.setFormatter(logging.Formatter(
    '%(asctime)s %(levelname)-8s [%(name)s:%(module)s:%(lineno)d] - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
))
root_logger.addHandler(console_handler)

logger = logging.getLogger("NovariaProxy.Main")

for lib_logger_name in ["httpx", "httpcore", "urllib3", "grpc", "uvicorn.access"]:
    logging.getLogger(lib_logger_name).setLevel(logging.WARNING)
logging.getLogger("uvicorn.error").setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    logger.info("Lifespan: application starting, initializing Gemini client...")
    try:
        client = get_gemini_client()
        if client.is_configured:
            logger.info("Lifespan: Gemini client ready.")
        else:
            logger.warning("Lifespan: Gemini client created without an API key; /api/generate will fail until GEMINI_API_KEY is set.")
    except Exception as e:
        logger.error(f"Lifespan: Gemini client initialization failed: {e}", exc_info=True)

    yield

    logger.info("Lifespan: application shutting down...")
    reset_gemini_client()
    logger.info("Lifespan: shutdown complete.")


app = FastAPI(
    title="Novaria Proxy",
    description=f"Gemini chat proxy, version: {APP_VERSION}",
    version=APP_VERSION,
    lifespan=lifespan,
    docs_url="/docs",
    redoc_url="/redoc"
)


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    # Framework errors (404, 405...) use the same {"message": ...} body as handler errors
    return error_response(exc.status_code, str(exc.detail), headers=getattr(exc, "headers", None))


app.add_middleware(AccessLogMiddleware)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_middleware(GZipMiddleware, minimum_size=500)
logger.info(f"FastAPI Novaria Proxy v{APP_VERSION} initialized. CORS origins: {CORS_ALLOW_ORIGINS}")

app.include_router(generate_router.router)
logger.info(f"Generate routes loaded at {GENERATE_PATH} and {MODELS_PATH}")


@app.get("/", status_code=200, include_in_schema=False, tags=["Utilities"])
async def root():
    """Root route, confirms the service is up"""
    return {
        "message": "Novaria Proxy API is running",
        "version": APP_VERSION,
        "status": "ok",
        "endpoints": {
            "generate": GENERATE_PATH,
            "models": MODELS_PATH,
            "health": "/health",
            "docs": "/docs",
        }
    }


@app.get("/health", status_code=200, include_in_schema=False, tags=["Utilities"])
async def health_check(client: GeminiChatClient = Depends(get_gemini_client)):
    if client.is_configured:
        client_status = "ok"
        detail_message = "Gemini client initialized with an API key."
    else:
        client_status = "warning"
        detail_message = "GEMINI_API_KEY is not configured."

    return {"status": client_status, "detail": detail_message, "app_version": APP_VERSION}
