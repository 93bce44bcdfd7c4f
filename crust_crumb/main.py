import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crust_crumb.api import chat_router, glossary_router, media_router
from crust_crumb.core.config import CORS_ORIGINS, configured_services
from crust_crumb.core.logging import setup_logging
from crust_crumb.services.glossary import load_glossary

logger = logging.getLogger(__name__)

ENDPOINTS = {
    "chat": "/api/chat",
    "youtubeSearch": "/api/youtube/search",
    "youtubeVideo": "/api/youtube/video/{video_id}",
    "imageSearch": "/api/images/search",
    "glossaryTerms": "/api/glossary/terms",
    "glossaryTerm": "/api/glossary/terms/{term_id}",
    "glossaryCategories": "/api/glossary/categories",
    "glossaryDifficulties": "/api/glossary/difficulties",
}


def create_app(glossary_path: Optional[Union[str, Path]] = None) -> FastAPI:
    """
    Build the FastAPI application.

    The glossary is loaded once in the lifespan, before the first request.
    A load failure propagates and aborts startup.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        app.state.glossary = load_glossary(glossary_path)
        for name, ok in configured_services().items():
            logger.info(f"{name}: {'configured' if ok else 'missing'}")
        yield

    app = FastAPI(
        title="Crust & Crumb API",
        description="Henry persona chat, YouTube/image search proxy and baking glossary",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(chat_router, prefix="/api")
    app.include_router(media_router, prefix="/api")
    app.include_router(glossary_router, prefix="/api")

    @app.get("/health")
    def health():
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "endpoints": ENDPOINTS,
        }

    return app


setup_logging()
app = create_app()
