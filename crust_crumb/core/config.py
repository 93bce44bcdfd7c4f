import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

PACKAGE_DIR = Path(__file__).resolve().parent.parent

# Gemini (chat persona)
GEMINI_API_KEY = os.getenv("GEMINI_API_KEY", "")
GEMINI_MODEL = os.getenv("GEMINI_MODEL", "gemini-1.5-flash")
GEMINI_API_URL = os.getenv(
    "GEMINI_API_URL",
    "https://generativelanguage.googleapis.com/v1beta"
)

# YouTube Data API
YOUTUBE_API_KEY = os.getenv("YOUTUBE_API_KEY", "")
YOUTUBE_API_URL = os.getenv(
    "YOUTUBE_API_URL",
    "https://www.googleapis.com/youtube/v3"
)

# Google Custom Search (images)
GOOGLE_SEARCH_API_KEY = os.getenv("GOOGLE_SEARCH_API_KEY", "")
GOOGLE_SEARCH_ENGINE_ID = os.getenv("GOOGLE_SEARCH_ENGINE_ID", "")
GOOGLE_SEARCH_API_URL = os.getenv(
    "GOOGLE_SEARCH_API_URL",
    "https://www.googleapis.com/customsearch/v1"
)

GLOSSARY_PATH = os.getenv(
    "GLOSSARY_PATH",
    str(PACKAGE_DIR / "data" / "glossary.json")
)

HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))
PORT = int(os.getenv("PORT", "3001"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
CORS_ORIGINS = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]


def configured_services() -> dict:
    """Report which third-party providers have credentials (never the values)."""
    return {
        "gemini": bool(GEMINI_API_KEY),
        "youtube": bool(YOUTUBE_API_KEY),
        "google_search": bool(GOOGLE_SEARCH_API_KEY and GOOGLE_SEARCH_ENGINE_ID),
    }
