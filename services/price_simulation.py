"""Synthetic price movement for the investment portfolio.

There is no market data feed. While the simulator runs, every holding's
current price takes a small random step at a fixed interval.
"""

import random
import threading
from typing import Optional
from logger import get_logger

logger = get_logger()

DEFAULT_INTERVAL = 10.0
DEFAULT_VOLATILITY = 0.02


class PriceSimulator:
    """Background random walk of investment prices.

    On each tick every holding's current price is multiplied by
    ``1 + change`` where ``change`` is drawn uniformly from
    ``[-volatility, +volatility]``; the portfolio is then saved once.

    The simulator runs on its own daemon thread until ``stop()`` is called.
    The owning ledger must call ``stop()`` when it is discarded.

    Args:
        ledger: InvestmentLedger whose prices are moved.
        interval: Seconds between ticks.
        volatility: Largest relative change applied in one tick.
        rng: Random source. Pass a seeded ``random.Random`` for
             reproducible walks.
    """

    def __init__(
        self,
        ledger,
        interval: float = DEFAULT_INTERVAL,
        volatility: float = DEFAULT_VOLATILITY,
        rng: Optional[random.Random] = None,
    ):
        if interval <= 0:
            raise ValueError(f"interval must be positive, got {interval}")
        if volatility < 0:
            raise ValueError(f"volatility must not be negative, got {volatility}")

        self.ledger = ledger
        self.interval = interval
        self.volatility = volatility
        self.rng = rng or random.Random()
        self.ticks = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def draw_change(self) -> float:
        return self.rng.uniform(-self.volatility, self.volatility)

    def tick(self) -> None:
        """Move every price once and persist the portfolio."""
        self.ledger.apply_price_walk(self.draw_change)
        self.ticks += 1

    def start(self) -> None:
        """Start ticking in the background. No-op if already running."""
        if self.running:
            return

        self._stop_event = threading.Event()
        self._thread = threading.Thread(
            target=self._run,
            args=(self._stop_event,),
            name="price-simulation",
            daemon=True,
        )
        self._thread.start()
        logger.info(f"Price simulation started (every {self.interval}s)")

    def stop(self) -> None:
        """Stop the background thread and wait for it to exit.

        Safe to call more than once, and from the simulator thread itself.
        """
        thread = self._thread
        if thread is None:
            return

        self._stop_event.set()
        if thread is not threading.current_thread():
            thread.join()
        self._thread = None
        logger.info(f"Price simulation stopped after {self.ticks} tick(s)")

    def _run(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self.interval):
            try:
                self.tick()
            except Exception:
                logger.exception("Price simulation tick failed")
