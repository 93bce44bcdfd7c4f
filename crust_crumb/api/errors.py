import logging
from typing import Optional

from fastapi.responses import JSONResponse

from crust_crumb.core.exceptions import UpstreamError


def error_response(status_code: int, error: str, details: Optional[str] = None) -> JSONResponse:
    """JSON error body in the shape the frontend expects: {error, details?}."""
    content = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def upstream_failure(summary: str, exc: UpstreamError) -> JSONResponse:
    logging.error(f"[{exc.provider}] {summary}: {exc}", exc_info=True)
    return error_response(500, summary, str(exc))
