import logging
from typing import Any, Dict, List

from crust_crumb.core import config
from crust_crumb.core.exceptions import UpstreamError
from crust_crumb.services.provider_http import request_json

logger = logging.getLogger(__name__)

PROVIDER = "google_search"


def _reshape_image(item: Dict[str, Any]) -> Dict[str, Any]:
    image = item.get("image") or {}
    return {
        "title": item.get("title"),
        "link": item.get("link"),
        "thumbnail": image.get("thumbnailLink"),
        "width": image.get("width"),
        "height": image.get("height"),
        "contextLink": image.get("contextLink"),
    }


async def search_images(query: str, num: int = 5) -> List[Dict[str, Any]]:
    """Run a Google Custom Search image query and return simplified results."""
    if not (config.GOOGLE_SEARCH_API_KEY and config.GOOGLE_SEARCH_ENGINE_ID):
        raise UpstreamError(
            PROVIDER, "GOOGLE_SEARCH_API_KEY and GOOGLE_SEARCH_ENGINE_ID must be configured"
        )

    params = {
        "q": query,
        "cx": config.GOOGLE_SEARCH_ENGINE_ID,
        "searchType": "image",
        "key": config.GOOGLE_SEARCH_API_KEY,
        "num": str(num),
    }
    data = await request_json(
        PROVIDER,
        "GET",
        config.GOOGLE_SEARCH_API_URL,
        params=params,
        default_error="Google Search API request failed",
    )
    items = data.get("items") or []
    logger.info(f"Image search '{query}' returned {len(items)} results")
    return [_reshape_image(item) for item in items]
