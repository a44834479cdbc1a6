from fastapi import APIRouter

from app.application.use_cases.create_greeting import create_greeting
from app.interfaces.api.schemas import MessageRead

router = APIRouter(prefix="/api", tags=["message"])


@router.get("/message", response_model=MessageRead)
async def read_message() -> MessageRead:
    greeting = create_greeting()
    return MessageRead(message=greeting.message)
