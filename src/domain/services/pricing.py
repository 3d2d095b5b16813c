"""Price refresh applied to investment holdings."""

from collections.abc import Iterable, Mapping
from dataclasses import replace
from decimal import Decimal

from src.domain.models import Investment
from src.utils.decimal_utils import coerce_decimal, round_whole


def apply_price_tick(
    investments: Iterable[Investment],
    multipliers: Mapping[str, Decimal],
) -> tuple[Investment, ...]:
    """Scale each current price by its multiplier, rounded to whole units.

    Args:
        investments: Holdings from the latest snapshot.
        multipliers: Multiplier per investment id; missing ids keep their
            price.

    Returns:
        tuple[Investment, ...]: Repriced holdings in the same order.
    """
    repriced = []
    for investment in investments:
        multiplier = multipliers.get(investment.id)
        if multiplier is None:
            repriced.append(investment)
            continue
        price = round_whole(
            coerce_decimal(investment.current_price) * coerce_decimal(multiplier)
        )
        repriced.append(replace(investment, current_price=price))
    return tuple(repriced)


__all__ = ["apply_price_tick"]
