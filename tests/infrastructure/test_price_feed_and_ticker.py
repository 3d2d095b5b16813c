"""Tests for the simulated price feed and ticker."""

from decimal import Decimal
import random
from unittest.mock import MagicMock

import pytest

from src.domain.models import Investment, InvestmentType
from src.infrastructure.price_ticker import PriceTicker
from src.infrastructure.random_price_feed import RandomPriceFeed


class _FakeTimer:
    def __init__(self, interval, callback) -> None:
        self.interval = interval
        self.callback = callback
        self.daemon = False
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True


class _TimerFactory:
    def __init__(self) -> None:
        self.timers: list[_FakeTimer] = []

    def __call__(self, interval, callback) -> _FakeTimer:
        timer = _FakeTimer(interval, callback)
        self.timers.append(timer)
        return timer


def _investment(inv_id: str) -> Investment:
    return Investment(
        id=inv_id,
        symbol=inv_id,
        name=inv_id,
        type=InvestmentType.CRYPTO,
        quantity=Decimal("1"),
        avg_buy_price=Decimal("100"),
        current_price=Decimal("100"),
    )


def test_random_feed_stays_within_bounds() -> None:
    feed = RandomPriceFeed(rng=random.Random(42))
    investments = [_investment(str(i)) for i in range(50)]

    multipliers = feed.multipliers(investments)

    assert set(multipliers) == {str(i) for i in range(50)}
    assert all(
        Decimal("0.99") <= value <= Decimal("1.01")
        for value in multipliers.values()
    )


def test_random_feed_is_repeatable_with_seed() -> None:
    investments = [_investment("a"), _investment("b")]

    first = RandomPriceFeed(rng=random.Random(7)).multipliers(investments)
    second = RandomPriceFeed(rng=random.Random(7)).multipliers(investments)

    assert first == second


def test_ticker_schedules_daemon_timer_and_reschedules() -> None:
    factory = _TimerFactory()
    tick = MagicMock()
    ticker = PriceTicker(tick, interval=5, logger=MagicMock(),
                         timer_factory=factory)

    ticker.start()
    ticker.start()

    assert ticker.running is True
    assert len(factory.timers) == 1
    timer = factory.timers[0]
    assert timer.interval == 5.0
    assert timer.daemon is True
    assert timer.started is True

    timer.callback()

    tick.assert_called_once_with()
    assert len(factory.timers) == 2


def test_ticker_keeps_running_after_failed_tick() -> None:
    factory = _TimerFactory()
    logger = MagicMock()
    ticker = PriceTicker(
        MagicMock(side_effect=RuntimeError("feed down")),
        interval=1,
        logger=logger,
        timer_factory=factory,
    )

    ticker.start()
    factory.timers[0].callback()

    logger.error.assert_called_once()
    assert len(factory.timers) == 2


def test_ticker_stop_cancels_future_ticks() -> None:
    factory = _TimerFactory()
    ticker = PriceTicker(MagicMock(), interval=1, logger=MagicMock(),
                         timer_factory=factory)

    ticker.start()
    first = factory.timers[0]
    ticker.stop()
    first.callback()

    assert first.cancelled is True
    assert ticker.running is False
    assert len(factory.timers) == 1


def test_ticker_rejects_non_positive_interval() -> None:
    with pytest.raises(ValueError):
        PriceTicker(MagicMock(), interval=0, logger=MagicMock())
