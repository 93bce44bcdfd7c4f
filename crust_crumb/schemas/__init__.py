"""
Schema and Data Models module.

This module contains Pydantic models for request/response validation:
- GlossaryTerm: One glossary record as stored in the bundled dataset
- ChatRequest / ChatResponse: Persona chat payloads
- YouTubeSearchRequest / ImageSearchRequest: Media search payloads
"""

from .chat import ChatRequest, ChatResponse, ChatTurn
from .glossary import AffiliateTool, GlossaryTerm, TroubleshootingItem
from .media import ImageSearchRequest, YouTubeSearchRequest

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "ChatTurn",
    "AffiliateTool",
    "GlossaryTerm",
    "TroubleshootingItem",
    "ImageSearchRequest",
    "YouTubeSearchRequest",
]
