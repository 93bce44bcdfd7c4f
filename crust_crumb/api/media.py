from fastapi import APIRouter

from crust_crumb.api.errors import error_response, upstream_failure
from crust_crumb.core.exceptions import UpstreamError
from crust_crumb.schemas.media import ImageSearchRequest, YouTubeSearchRequest
from crust_crumb.services.image_search import search_images
from crust_crumb.services.youtube_client import get_video, search_videos

router = APIRouter()


# -------------------------
# YOUTUBE SEARCH
# -------------------------
@router.post("/youtube/search")
async def youtube_search(req: YouTubeSearchRequest):
    if not req.query:
        return error_response(400, "Query is required")

    try:
        videos = await search_videos(req.query, max_results=req.max_results)
    except UpstreamError as e:
        return upstream_failure("Failed to search YouTube", e)

    return {"videos": videos}


# -------------------------
# YOUTUBE VIDEO DETAILS
# -------------------------
@router.get("/youtube/video/{video_id}")
async def youtube_video(video_id: str):
    try:
        video = await get_video(video_id)
    except UpstreamError as e:
        return upstream_failure("Failed to get video details", e)

    if video is None:
        return error_response(404, "Video not found")
    return video


# -------------------------
# IMAGE SEARCH
# -------------------------
@router.post("/images/search")
async def image_search(req: ImageSearchRequest):
    if not req.query:
        return error_response(400, "Query is required")

    try:
        images = await search_images(req.query, num=req.num)
    except UpstreamError as e:
        return upstream_failure("Failed to search images", e)

    return {"images": images}
