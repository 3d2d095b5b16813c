"""Use case asking the advice assistant about the current snapshot."""

from dataclasses import dataclass, field
from typing import Literal
from uuid import uuid4

from src.application.ports.advice_client import AdviceClientPort
from src.domain.models import AppState
from src.domain.services.summary import build_advice_context
from src.infrastructure.logging.logger import get_app_logger

ADVICE_UNAVAILABLE = "Terjadi kesalahan saat menghubungi asisten AI."

GREETING = (
    "Halo! Saya asisten finansial cerdas Anda. Saya telah menganalisis data "
    "portofolio dan transaksi Anda. Ada yang bisa saya bantu hari ini?"
)


@dataclass(frozen=True)
class ChatMessage:
    """One message of the advice conversation."""

    id: str
    role: Literal["user", "model"]
    text: str


@dataclass
class AdviceConversation:
    """Conversation history plus the pending-request flag."""

    messages: list[ChatMessage] = field(
        default_factory=lambda: [ChatMessage("greeting", "model", GREETING)]
    )
    pending: bool = False


class RequestAdviceUseCase:
    """Send a question with a snapshot summary to the advice assistant.

    Any failure of the assistant is logged and answered with the
    ``ADVICE_UNAVAILABLE`` message instead of being raised.
    """

    def __init__(self, advice_client: AdviceClientPort, logger=None) -> None:
        """Initialize the use case.

        Args:
            advice_client: Port answering questions.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._advice_client = advice_client
        self._logger = logger or get_app_logger()

    async def execute(self, query: str, state: AppState) -> str:
        """Return advice for ``query`` given ``state``.

        Args:
            query: Question typed by the user.
            state: Snapshot summarized for the assistant.

        Returns:
            str: Advice text, or the unavailable message on failure.
        """
        context = build_advice_context(state, query)
        try:
            advice = await self._advice_client.get_advice(query, context)
        except Exception as exc:
            self._logger.error(f"Advice request failed: {exc}")
            return ADVICE_UNAVAILABLE
        return advice or ADVICE_UNAVAILABLE

    async def ask(
        self,
        conversation: AdviceConversation,
        query: str,
        state: AppState,
    ) -> ChatMessage | None:
        """Append the question and the reply to ``conversation``.

        Blank questions and questions sent while a request is pending are
        ignored.

        Returns:
            ChatMessage | None: The reply, or None when nothing was sent.
        """
        if not query.strip() or conversation.pending:
            return None
        conversation.messages.append(ChatMessage(uuid4().hex, "user", query))
        conversation.pending = True
        try:
            text = await self.execute(query, state)
        finally:
            conversation.pending = False
        reply = ChatMessage(uuid4().hex, "model", text)
        conversation.messages.append(reply)
        return reply


__all__ = [
    "ADVICE_UNAVAILABLE",
    "AdviceConversation",
    "ChatMessage",
    "RequestAdviceUseCase",
]
