"""Port for the financial advice assistant."""

from typing import Protocol


class AdviceClientPort(Protocol):
    """Port answering a question given a plain-text financial summary."""

    async def get_advice(self, query: str, context: str) -> str:
        """Return advice text.

        Args:
            query: Question typed by the user.
            context: Deterministic summary of the current snapshot.

        Returns:
            str: Advice text. Implementations may raise on transport errors.
        """


__all__ = ["AdviceClientPort"]
