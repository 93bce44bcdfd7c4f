from fastapi import APIRouter

from crust_crumb.api.errors import error_response, upstream_failure
from crust_crumb.core.exceptions import UpstreamError
from crust_crumb.schemas.chat import ChatRequest, ChatResponse
from crust_crumb.services.gemini_client import generate_reply

router = APIRouter()


@router.post("/chat", response_model=ChatResponse)
async def chat(req: ChatRequest):
    """
    Persona chat endpoint.

    - Sends the message plus prior turns to Gemini as "Henry"
    - History entries are {role, text}; role "user" or anything else (model)
    """
    if not req.message:
        return error_response(400, "Message is required")

    try:
        text = await generate_reply(req.message, history=req.history)
    except UpstreamError as e:
        return upstream_failure("Failed to get response from AI", e)

    return {"response": text}
