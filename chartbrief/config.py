"""
Configuration constants and settings for chartbrief.

This module centralizes all configuration values including:
- Upload admissibility limits (size, extension, media types)
- Prompt bounds (preview row cap, file name length)
- LLM integration settings (OpenRouter API)
- Logging and CORS
"""
import os
from typing import Tuple
from dotenv import load_dotenv

load_dotenv()

# ============================================================================
# Upload admissibility
# ============================================================================
MAX_FILE_SIZE_BYTES = 3 * 1024 * 1024  # 3MB
ALLOWED_EXTENSION = ".csv"
ALLOWED_MIME_TYPES: Tuple[str, ...] = (
    "text/csv",
    "application/vnd.ms-excel",
    "text/plain",
)

INVALID_FILE_TYPE_MESSAGE = "Please upload a CSV file."
FILE_TOO_LARGE_MESSAGE = "File must be 3MB or less."
EMPTY_CSV_MESSAGE = "CSV file appears to be empty"
MISSING_FIELDS_MESSAGE = "Missing csvText or fileName"
UNEXPECTED_ERROR_MESSAGE = "An unexpected error occurred"
INVALID_TEXT_MESSAGE = "CSV text is not valid UTF-8"

# ============================================================================
# Prompt bounds
# ============================================================================
MAX_PROMPT_ROWS = 50
MAX_FILE_NAME_LENGTH = 100

# ============================================================================
# LLM integration configuration (OpenRouter API)
# https://openrouter.ai/docs
# ============================================================================
OPENROUTER_API_URL = os.getenv("OPENROUTER_API_URL", "https://openrouter.ai/api/v1/chat/completions")
OPENROUTER_API_KEY = os.getenv("OPENROUTER_API_KEY", "")
# Model ID from OpenRouter (e.g. anthropic/claude-3.5-haiku, openai/gpt-4o-mini)
OPENROUTER_MODEL = os.getenv("OPENROUTER_MODEL", "anthropic/claude-3.5-haiku")

LLM_API_URL = OPENROUTER_API_URL
LLM_API_KEY = OPENROUTER_API_KEY
LLM_MODEL = OPENROUTER_MODEL
LLM_MAX_TOKENS = int(os.getenv("LLM_MAX_TOKENS", "4096"))
LLM_TEMPERATURE = float(os.getenv("LLM_TEMPERATURE", "0.2"))
LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "60"))

DISABLE_SSL_VERIFY = os.getenv("DISABLE_SSL_VERIFY", "0").lower() in ("1", "true", "yes")

# ============================================================================
# HTTP server
# ============================================================================
CORS_ALLOW_ORIGINS = [
    origin.strip() for origin in os.getenv("CORS_ALLOW_ORIGINS", "*").split(",") if origin.strip()
]
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
