"""
API Routes module.

This module contains all FastAPI route handlers organized by resource:
- chat: Persona chat endpoint
- media: YouTube and Google image search endpoints
- glossary: Read-only glossary lookup, filter and search endpoints
"""

from .chat import router as chat_router
from .media import router as media_router
from .glossary import router as glossary_router

__all__ = [
    "chat_router",
    "media_router",
    "glossary_router",
]
