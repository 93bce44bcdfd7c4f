"""
Services module for the Crust & Crumb backend.

This module contains business logic and external service integrations:
- glossary: Load-once, read-only glossary store and its query operations
- gemini_client: Persona chat through the Gemini generateContent API
- youtube_client: YouTube video search and video details
- image_search: Google Custom Search image queries
- provider_http: Shared JSON request helper for the Google APIs
"""

from .glossary import DIFFICULTIES, GlossaryStore, load_glossary
from .gemini_client import generate_reply, build_contents
from .youtube_client import search_videos, get_video
from .image_search import search_images

__all__ = [
    "DIFFICULTIES",
    "GlossaryStore",
    "load_glossary",
    "generate_reply",
    "build_contents",
    "search_videos",
    "get_video",
    "search_images",
]
