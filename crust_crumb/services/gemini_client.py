"""
Gemini client for the "Henry" baking persona.

Requires GEMINI_API_KEY. The persona prompt is sent as the first user turn
followed by a canned model acknowledgement, then the caller's history and
the new message.
"""
import logging
from typing import Dict, List, Optional, Sequence

from crust_crumb.core import config
from crust_crumb.core.exceptions import UpstreamError
from crust_crumb.schemas.chat import ChatTurn
from crust_crumb.services.provider_http import request_json

logger = logging.getLogger(__name__)

PROVIDER = "gemini"

HENRY_SYSTEM_PROMPT = """You are Henry Hunter, author of "Sourdough for the Rest of Us" and founder of the "Baking Great Bread at Home" community with 50,000+ members.

Your teaching philosophy:
- Perfection is NOT required
- Baking should be accessible, not intimidating
- Use practical, real-world advice
- Speak like a friend, not a textbook
- Share personal stories and anecdotes
- Call out common myths and misconceptions

Your voice:
- Warm, encouraging, and slightly irreverent
- Use phrases like "your pet yeast", "drama queen signal", "don't be a hydration hero"
- Confident without being preachy
- Honest about when things go wrong
- Emphasize that everyone's bread journey is different

Key concepts from your book:
- Fermentolyse (your preferred method over strict autolyse)
- The Float Test
- Flexible schedules (9-to-5, Weekend Warrior, Night Owl)
- Starter as "The Beast" - it's resilient, not fragile
- Hooch is just your starter being dramatic

When answering:
1. Start with encouragement
2. Give practical, actionable advice
3. Share a relevant tip from your book or experience
4. End with confidence-building reassurance

You reference your book, blog (bakinggreatbread.blog), YouTube channel, and Facebook group naturally."""

HENRY_GREETING = (
    "Got it! I'm Henry, and I'm here to help you bake great bread without "
    "the drama. What's on your mind?"
)


def _turn(role: str, text: str) -> Dict:
    return {"role": role, "parts": [{"text": text}]}


def build_contents(message: str, history: Optional[Sequence[ChatTurn]] = None) -> List[Dict]:
    """
    Build the Gemini `contents` array for one chat request.

    Args:
        message: The new user message
        history: Earlier turns; role "user" is kept, anything else is
            sent as "model"

    Returns:
        List of Gemini content dicts, persona first and message last
    """
    contents = [
        _turn("user", HENRY_SYSTEM_PROMPT),
        _turn("model", HENRY_GREETING),
    ]
    for msg in history or []:
        contents.append(_turn("user" if msg.role == "user" else "model", msg.text))
    contents.append(_turn("user", message))
    return contents


def _extract_text(data: Dict) -> str:
    candidates = data.get("candidates") or []
    if not candidates:
        reason = (data.get("promptFeedback") or {}).get("blockReason")
        raise UpstreamError(
            PROVIDER,
            f"Gemini returned no candidates (blockReason={reason})" if reason
            else "Gemini returned no candidates",
        )
    parts = (candidates[0].get("content") or {}).get("parts") or []
    return "".join(p.get("text", "") for p in parts)


async def generate_reply(
    message: str,
    history: Optional[Sequence[ChatTurn]] = None,
    model: Optional[str] = None,
) -> str:
    """Send a message to Gemini in Henry's voice and return the reply text."""
    if not config.GEMINI_API_KEY:
        raise UpstreamError(PROVIDER, "GEMINI_API_KEY is not configured")

    model = model or config.GEMINI_MODEL
    url = f"{config.GEMINI_API_URL}/models/{model}:generateContent"
    payload = {"contents": build_contents(message, history)}
    logger.debug(f"Gemini request: model={model}, turns={len(payload['contents'])}")

    data = await request_json(
        PROVIDER,
        "POST",
        url,
        params={"key": config.GEMINI_API_KEY},
        json=payload,
        default_error="Gemini API request failed",
    )
    return _extract_text(data)
