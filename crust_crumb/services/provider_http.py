import logging
import httpx
from typing import Any, Dict, Optional

from crust_crumb.core import config
from crust_crumb.core.exceptions import UpstreamError

logger = logging.getLogger(__name__)


def _error_message(data: Any, default: str) -> str:
    """Google APIs report failures as {"error": {"message": ...}}."""
    if isinstance(data, dict):
        error = data.get("error")
        if isinstance(error, dict) and error.get("message"):
            return error["message"]
    return default


async def request_json(
    provider: str,
    method: str,
    url: str,
    params: Optional[Dict[str, Any]] = None,
    json: Optional[Dict[str, Any]] = None,
    default_error: str = "API request failed",
) -> Dict[str, Any]:
    """
    Call a provider endpoint and return its decoded JSON body.

    Raises:
        UpstreamError: connection failure, non-JSON body or non-2xx status
    """
    logger.debug(f"{provider}: {method} {url}")
    try:
        async with httpx.AsyncClient() as client:
            resp = await client.request(
                method, url, params=params, json=json, timeout=config.HTTP_TIMEOUT
            )
    except httpx.HTTPError as e:
        raise UpstreamError(provider, f"Cannot connect to {provider}: {e}") from e

    try:
        data = resp.json()
    except ValueError:
        data = None

    if resp.is_error:
        raise UpstreamError(
            provider, _error_message(data, default_error), status_code=resp.status_code
        )
    if not isinstance(data, dict):
        raise UpstreamError(provider, f"{provider} returned an unexpected response body")
    return data
