"""
YouTube Data API v3 client.

Responses are reshaped into flat dicts the frontend can embed directly.
"""
import logging
from typing import Any, Dict, List, Optional

from crust_crumb.core import config
from crust_crumb.core.exceptions import UpstreamError
from crust_crumb.services.provider_http import request_json

logger = logging.getLogger(__name__)

PROVIDER = "youtube"
EMBED_BASE_URL = "https://www.youtube.com/embed"


def embed_url(video_id: Optional[str]) -> Optional[str]:
    if not video_id:
        return None
    return f"{EMBED_BASE_URL}/{video_id}"


def _thumbnail(snippet: Dict[str, Any], size: str) -> Optional[str]:
    thumbnails = snippet.get("thumbnails") or {}
    chosen = thumbnails.get(size) or thumbnails.get("default") or {}
    return chosen.get("url")


def _reshape_search_item(item: Dict[str, Any]) -> Dict[str, Any]:
    video_id = (item.get("id") or {}).get("videoId")
    snippet = item.get("snippet") or {}
    return {
        "id": video_id,
        "title": snippet.get("title"),
        "description": snippet.get("description"),
        "thumbnail": _thumbnail(snippet, "medium"),
        "channelTitle": snippet.get("channelTitle"),
        "publishedAt": snippet.get("publishedAt"),
        "embedUrl": embed_url(video_id),
    }


def _reshape_video(video: Dict[str, Any]) -> Dict[str, Any]:
    snippet = video.get("snippet") or {}
    return {
        "id": video.get("id"),
        "title": snippet.get("title"),
        "description": snippet.get("description"),
        "thumbnail": _thumbnail(snippet, "high"),
        "channelTitle": snippet.get("channelTitle"),
        "publishedAt": snippet.get("publishedAt"),
        "duration": (video.get("contentDetails") or {}).get("duration"),
        "viewCount": (video.get("statistics") or {}).get("viewCount"),
        "embedUrl": embed_url(video.get("id")),
    }


def _require_key() -> str:
    if not config.YOUTUBE_API_KEY:
        raise UpstreamError(PROVIDER, "YOUTUBE_API_KEY is not configured")
    return config.YOUTUBE_API_KEY


async def search_videos(query: str, max_results: int = 5) -> List[Dict[str, Any]]:
    """
    Search YouTube for videos.

    Args:
        query: Free-text search query
        max_results: Number of videos to request (YouTube caps this at 50)

    Returns:
        List of reshaped video dicts, in YouTube's order
    """
    params = {
        "part": "snippet",
        "type": "video",
        "maxResults": str(max_results),
        "q": query,
        "key": _require_key(),
    }
    data = await request_json(
        PROVIDER,
        "GET",
        f"{config.YOUTUBE_API_URL}/search",
        params=params,
        default_error="YouTube API request failed",
    )
    items = data.get("items") or []
    logger.info(f"YouTube search '{query}' returned {len(items)} videos")
    return [_reshape_search_item(item) for item in items]


async def get_video(video_id: str) -> Optional[Dict[str, Any]]:
    """Fetch details for one video; None when YouTube has no such id."""
    params = {
        "part": "snippet,contentDetails,statistics",
        "id": video_id,
        "key": _require_key(),
    }
    data = await request_json(
        PROVIDER,
        "GET",
        f"{config.YOUTUBE_API_URL}/videos",
        params=params,
        default_error="YouTube API request failed",
    )
    items = data.get("items") or []
    if not items:
        return None
    return _reshape_video(items[0])
