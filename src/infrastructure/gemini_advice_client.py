"""Advice client backed by the Gemini ``generateContent`` REST endpoint."""

import httpx

from src.application.ports.advice_client import AdviceClientPort
from src.infrastructure.logging.logger import get_app_logger

GEMINI_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
MISSING_API_KEY_MESSAGE = (
    "API Key belum dikonfigurasi. Mohon atur GEMINI_API_KEY."
)
EMPTY_RESPONSE_MESSAGE = "Maaf, saya tidak dapat memberikan saran saat ini."


class GeminiAdviceClient(AdviceClientPort):
    """Send the financial summary to Gemini and return its answer."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str = GEMINI_BASE_URL,
        timeout: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
        logger=None,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: Gemini API key; without it no request is sent.
            model: Model name, e.g. ``gemini-3-flash-preview``.
            base_url: API root URL.
            timeout: Request timeout in seconds.
            transport: Optional httpx transport, used by tests.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._api_key = api_key
        self._model = model
        self._base_url = base_url.rstrip("/")
        self._timeout = timeout
        self._transport = transport
        self._logger = logger or get_app_logger()

    async def get_advice(self, query: str, context: str) -> str:
        """Return the model's answer to the summarized question.

        Raises:
            httpx.HTTPError: On transport failures or non-2xx responses.
        """
        if not self._api_key:
            self._logger.warning("GEMINI_API_KEY is not configured")
            return MISSING_API_KEY_MESSAGE

        url = f"{self._base_url}/models/{self._model}:generateContent"
        payload = {"contents": [{"parts": [{"text": context}]}]}
        headers = {
            "x-goog-api-key": self._api_key,
            "Content-Type": "application/json",
        }
        async with httpx.AsyncClient(
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            response = await client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            body = response.json()

        text = self._extract_text(body)
        self._logger.info(
            f"Advice received from {self._model} ({len(text)} chars)"
        )
        return text or EMPTY_RESPONSE_MESSAGE

    @staticmethod
    def _extract_text(body: dict) -> str:
        candidates = body.get("candidates") or []
        if not candidates:
            return ""
        parts = (candidates[0].get("content") or {}).get("parts") or []
        return "".join(part.get("text", "") for part in parts)


__all__ = [
    "GeminiAdviceClient",
    "MISSING_API_KEY_MESSAGE",
    "EMPTY_RESPONSE_MESSAGE",
]
