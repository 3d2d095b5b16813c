"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
import os
from pathlib import Path

import dotenv

from src.infrastructure.logging.logger import get_app_logger
from src.utils.utils import get_project_root

DEFAULT_STATE_KEY = "dompetpintar_state"
DEFAULT_PRICE_TICK_SECONDS = Decimal("5")
DEFAULT_GEMINI_MODEL = "gemini-3-flash-preview"
SUPPORTED_BACKENDS = ("json", "sqlalchemy")


@dataclass(frozen=True)
class AppSettings:
    """Settings for persistence, the price feed, and the advice client.

    Attributes:
        backend: Persistence backend identifier (json or sqlalchemy).
        state_dir: Directory holding JSON snapshots.
        state_db_url: Database URL for the sqlalchemy backend.
        state_key: Key under which the snapshot is stored.
        price_tick_seconds: Interval between simulated price ticks.
        gemini_api_key: API key of the advice assistant, if any.
        gemini_model: Model name used by the advice assistant.
    """

    backend: str = "json"
    state_dir: Path | None = None
    state_db_url: str | None = None
    state_key: str = DEFAULT_STATE_KEY
    price_tick_seconds: Decimal = DEFAULT_PRICE_TICK_SECONDS
    gemini_api_key: str | None = None
    gemini_model: str = DEFAULT_GEMINI_MODEL

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables and ``.env``.

        Returns:
            AppSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        backend = os.getenv("STATE_BACKEND", "json").strip().lower()
        if backend not in SUPPORTED_BACKENDS:
            logger.warning(
                f"Unknown STATE_BACKEND '{backend}'. Falling back to json."
            )
            backend = "json"
        raw_dir = os.getenv("STATE_DIR")
        state_dir = (
            Path(raw_dir).expanduser().resolve()
            if raw_dir
            else get_project_root() / "data"
        )
        return cls(
            backend=backend,
            state_dir=state_dir,
            state_db_url=os.getenv("STATE_DB_URL") or None,
            state_key=os.getenv("STATE_KEY", DEFAULT_STATE_KEY).strip()
            or DEFAULT_STATE_KEY,
            price_tick_seconds=cls._parse_interval(
                os.getenv("PRICE_TICK_SECONDS"),
                logger=logger,
            ),
            gemini_api_key=os.getenv("GEMINI_API_KEY") or None,
            gemini_model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        )

    @staticmethod
    def _parse_interval(raw: str | None, logger) -> Decimal:
        """Parse the tick interval, keeping the default on bad input.

        Args:
            raw: Raw interval string in seconds.
            logger: Logger used for warnings.

        Returns:
            Decimal: Positive interval in seconds.
        """
        if not raw:
            return DEFAULT_PRICE_TICK_SECONDS
        try:
            value = Decimal(raw.strip())
        except InvalidOperation:
            logger.warning(
                f"Invalid PRICE_TICK_SECONDS '{raw}'. Using default."
            )
            return DEFAULT_PRICE_TICK_SECONDS
        if value <= 0:
            logger.warning(
                f"PRICE_TICK_SECONDS must be positive, got {raw}. "
                "Using default."
            )
            return DEFAULT_PRICE_TICK_SECONDS
        return value


__all__ = ["AppSettings"]
