"""
Core configuration and settings module.

This module contains application-wide configuration including:
- Environment variables and their defaults
- Provider API keys and base URLs
- Logging setup and shared exception types
"""

from .config import (
    GEMINI_API_KEY,
    GEMINI_MODEL,
    YOUTUBE_API_KEY,
    GOOGLE_SEARCH_API_KEY,
    GOOGLE_SEARCH_ENGINE_ID,
    GLOSSARY_PATH,
    PORT,
    configured_services,
)
from .exceptions import GlossaryLoadError, UpstreamError
from .logging import setup_logging

__all__ = [
    "GEMINI_API_KEY",
    "GEMINI_MODEL",
    "YOUTUBE_API_KEY",
    "GOOGLE_SEARCH_API_KEY",
    "GOOGLE_SEARCH_ENGINE_ID",
    "GLOSSARY_PATH",
    "PORT",
    "configured_services",
    "GlossaryLoadError",
    "UpstreamError",
    "setup_logging",
]
