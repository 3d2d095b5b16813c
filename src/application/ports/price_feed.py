"""Port for the periodic price source."""

from collections.abc import Sequence
from decimal import Decimal
from typing import Protocol

from src.domain.models import Investment


class PriceFeedPort(Protocol):
    """Port supplying one price multiplier per investment on each tick."""

    def multipliers(
        self,
        investments: Sequence[Investment],
    ) -> dict[str, Decimal]:
        """Return a multiplier keyed by investment id."""


__all__ = ["PriceFeedPort"]
