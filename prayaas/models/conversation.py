from datetime import datetime, timezone
from enum import Enum
from typing import Callable, Sequence

from pydantic import BaseModel, ConfigDict, Field

from prayaas.core.exceptions import ConversationBusy, EmptyMessage


class Role(str, Enum):
    USER = "user"
    ASSISTANT = "assistant"


class ConversationTurn(BaseModel):
    model_config = ConfigDict(frozen=True)

    role: Role
    text: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ConversationState(str, Enum):
    IDLE = "idle"
    AWAITING_RESPONSE = "awaiting_response"


class Conversation:
    """
    Append-only chat transcript owned by the hosting layer.

    Enforces at most one in-flight user turn: Idle -> AwaitingResponse -> Idle.
    Turns are never edited or removed.
    """

    def __init__(self, greeting: str):
        self._turns: list[ConversationTurn] = [ConversationTurn(role=Role.ASSISTANT, text=greeting)]
        self._state = ConversationState.IDLE

    @classmethod
    def from_history(cls, history: Sequence[ConversationTurn], greeting: str) -> "Conversation":
        """Rebuild a conversation from turns the client sent back; a trailing user turn is still pending."""
        conversation = cls(greeting)
        if history:
            conversation._turns = list(history)
            if history[-1].role is Role.USER:
                conversation._state = ConversationState.AWAITING_RESPONSE
        return conversation

    @property
    def turns(self) -> tuple[ConversationTurn, ...]:
        return tuple(self._turns)

    @property
    def state(self) -> ConversationState:
        return self._state

    def submit(self, text: str) -> ConversationTurn:
        if self._state is ConversationState.AWAITING_RESPONSE:
            raise ConversationBusy("Previous message is still awaiting a response")
        text = (text or "").strip()
        if not text:
            raise EmptyMessage("Message must not be blank")

        turn = ConversationTurn(role=Role.USER, text=text)
        self._turns.append(turn)
        self._state = ConversationState.AWAITING_RESPONSE
        return turn

    def resolve(self, text: str) -> ConversationTurn:
        if self._state is not ConversationState.AWAITING_RESPONSE:
            raise RuntimeError("No user message is awaiting a response")
        turn = ConversationTurn(role=Role.ASSISTANT, text=text)
        self._turns.append(turn)
        self._state = ConversationState.IDLE
        return turn

    def ask(self, text: str, responder: Callable[[str, tuple[ConversationTurn, ...]], str]) -> ConversationTurn:
        """Submit a user turn and resolve it with the responder's reply."""
        user_turn = self.submit(text)
        history = self.turns[:-1]
        return self.resolve(responder(user_turn.text, history))
