"""Fixed-interval driver for the price refresh use case."""

import threading
from typing import Callable

from src.infrastructure.logging.logger import get_app_logger


class PriceTicker:
    """Run a tick callback every ``interval`` seconds on a timer thread.

    Stopping only cancels future ticks; every tick is a complete snapshot
    replacement, so nothing needs to be rolled back.
    """

    def __init__(
        self,
        tick: Callable[[], object],
        interval: float,
        logger=None,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
    ) -> None:
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive: {interval}")
        self._tick = tick
        self._interval = float(interval)
        self._logger = logger or get_app_logger()
        self._timer_factory = timer_factory
        self._timer: threading.Timer | None = None
        self._lock = threading.Lock()
        self._running = False

    @property
    def running(self) -> bool:
        return self._running

    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            self._running = True
            self._schedule()
        self._logger.info(f"Price ticker started every {self._interval}s")

    def stop(self) -> None:
        with self._lock:
            self._running = False
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
        self._logger.info("Price ticker stopped")

    def _schedule(self) -> None:
        timer = self._timer_factory(self._interval, self._run)
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _run(self) -> None:
        try:
            self._tick()
        except Exception as exc:
            self._logger.error(f"Price tick failed: {exc}")
        with self._lock:
            if self._running:
                self._schedule()


__all__ = ["PriceTicker"]
