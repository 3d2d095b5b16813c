"""Use case applying one price tick to every investment."""

from dataclasses import replace

from src.application.ports.price_feed import PriceFeedPort
from src.application.state_store import AppStateStore
from src.domain.models import AppState
from src.domain.services.pricing import apply_price_tick
from src.infrastructure.logging.logger import get_app_logger


class RefreshPricesUseCase:
    """Reprice all holdings from the latest snapshot in one swap."""

    def __init__(
        self,
        store: AppStateStore,
        price_feed: PriceFeedPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            store: State container to update.
            price_feed: Source of per-investment multipliers.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._store = store
        self._price_feed = price_feed
        self._logger = logger or get_app_logger()

    def execute(self) -> AppState:
        """Apply one tick and return the resulting snapshot."""

        def _tick(state: AppState) -> AppState:
            if not state.investments:
                return state
            multipliers = self._price_feed.multipliers(state.investments)
            return replace(
                state,
                investments=apply_price_tick(state.investments, multipliers),
            )

        updated = self._store.apply(_tick)
        self._logger.debug(
            f"Price tick applied to {len(updated.investments)} investments"
        )
        return updated


__all__ = ["RefreshPricesUseCase"]
