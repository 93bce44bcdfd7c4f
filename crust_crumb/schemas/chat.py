from pydantic import BaseModel
from typing import List, Optional


class ChatTurn(BaseModel):
    role: Optional[str] = None
    text: str


class ChatRequest(BaseModel):
    message: Optional[str] = None
    history: List[ChatTurn] = []


class ChatResponse(BaseModel):
    response: str
