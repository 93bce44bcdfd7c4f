from pydantic import BaseModel, ConfigDict, Field
from typing import Optional


class YouTubeSearchRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    query: Optional[str] = None
    max_results: int = Field(default=5, alias="maxResults")


class ImageSearchRequest(BaseModel):
    query: Optional[str] = None
    num: int = 5
