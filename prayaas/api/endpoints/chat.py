from fastapi import APIRouter, HTTPException
from loguru import logger
from pydantic import BaseModel, Field

from prayaas.core.exceptions import ConversationBusy, InvalidQuery
from prayaas.models.conversation import Conversation, ConversationTurn, Role
from prayaas.models.profile import UserProfile
from prayaas.services.intent_router import intent_router
from prayaas.services.templates import SUGGESTED_QUESTIONS, render_greeting

router = APIRouter(prefix="/chat", tags=["chat"])


class ChatRequest(BaseModel):
    profile: UserProfile
    message: str
    history: list[ConversationTurn] = Field(default_factory=list)


class ChatResponse(BaseModel):
    reply: ConversationTurn
    topic: str


@router.get("/greeting", response_model=ConversationTurn)
async def greeting() -> ConversationTurn:
    return ConversationTurn(role=Role.ASSISTANT, text=render_greeting())


@router.get("/suggestions")
async def suggestions() -> list[str]:
    return list(SUGGESTED_QUESTIONS)


@router.post("", response_model=ChatResponse)
async def chat(payload: ChatRequest) -> ChatResponse:
    conversation = Conversation.from_history(payload.history, greeting=render_greeting())
    try:
        reply = conversation.ask(
            payload.message,
            lambda text, history: intent_router.respond(payload.profile, text, history),
        )
        return ChatResponse(reply=reply, topic=intent_router.classify(conversation.turns[-2].text))
    except InvalidQuery as e:
        logger.warning(f"Rejected chat message: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except ConversationBusy as e:
        raise HTTPException(status_code=409, detail=str(e))
    except Exception as e:
        logger.exception(f"Error answering chat message: {e}")
        raise HTTPException(status_code=500, detail=str(e))
