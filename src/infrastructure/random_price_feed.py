"""Simulated price feed drawing small random moves."""

from collections.abc import Sequence
from decimal import Decimal
import random

from src.application.ports.price_feed import PriceFeedPort
from src.domain.constants import PRICE_TICK_MAX, PRICE_TICK_MIN
from src.domain.models import Investment


class RandomPriceFeed(PriceFeedPort):
    """Feed returning an independent multiplier in [0.99, 1.01] per holding."""

    def __init__(self, rng: random.Random | None = None) -> None:
        """Initialize the feed.

        Args:
            rng: Optional random generator; seeded ones make ticks repeatable.
        """
        self._rng = rng or random.Random()

    def multipliers(
        self,
        investments: Sequence[Investment],
    ) -> dict[str, Decimal]:
        low = float(PRICE_TICK_MIN)
        high = float(PRICE_TICK_MAX)
        return {
            investment.id: Decimal(str(self._rng.uniform(low, high)))
            for investment in investments
        }


__all__ = ["RandomPriceFeed"]
