import os
from dotenv import load_dotenv

load_dotenv()

APP_VERSION = os.getenv("APP_VERSION", "1.0.0")

LOG_LEVEL_FROM_ENV = os.getenv("LOG_LEVEL", "INFO").upper()

# Read once at startup; a missing key is logged and the failure deferred to the first request
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY")
GEMINI_SYSTEM_INSTRUCTION = os.getenv("GEMINI_SYSTEM_INSTRUCTION") or None

CORS_ALLOW_ORIGINS = [
    origin.strip()
    for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",")
    if origin.strip()
]

GENERATE_PATH = "/api/generate"
MODELS_PATH = "/api/models"

VALIDATION_ERROR_MESSAGE = "User message or attached file is required."
