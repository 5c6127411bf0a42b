from fastapi import APIRouter
from scaffold.models import MessageResponse

router = APIRouter()

@router.get("/get", response_model=MessageResponse)
async def get_request() -> MessageResponse:
    """Demonstrates routing; always answers with the same message"""
    return MessageResponse(message="GET request successful")
