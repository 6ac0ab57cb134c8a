import structlog
from fastapi import APIRouter, Depends

from bloodwise.core.config import settings
from bloodwise.core.simulator_factory import get_simulator
from bloodwise.schemas.chat import ChatMessage, ChatRequest
from bloodwise.services.chat_responder import GREETING, ChatResponder
from bloodwise.services.simulation.base import Simulator

router = APIRouter()
logger = structlog.get_logger()

@router.get("/chat/greeting", response_model=ChatMessage)
async def chat_greeting():
    return ChatMessage(role="assistant", content=GREETING)

@router.post("/chat", response_model=ChatMessage)
async def chat_reply(
    payload: ChatRequest,
    simulator: Simulator = Depends(get_simulator)
):
    logger.info(
        "chat_message_received",
        length=len(payload.message),
        predictions=len(payload.predictions),
        verified=payload.report_verified
    )

    # "Typing" delay
    await simulator.pause_between(settings.CHAT_DELAY_MIN_SECONDS, settings.CHAT_DELAY_MAX_SECONDS)

    reply = ChatResponder.respond(payload.message, payload.predictions, payload.report_verified)
    return ChatMessage(role="assistant", content=reply)
