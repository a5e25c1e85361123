"""Investment ledger: portfolio holdings, performance metrics and the price walk."""

import random
from decimal import Decimal
from typing import Callable, Dict, List, Optional
from models.investment import Investment, InvestmentType
from services.ledger import Ledger
from services.price_simulation import (
    DEFAULT_INTERVAL,
    DEFAULT_VOLATILITY,
    PriceSimulator,
)
from logger import get_logger

logger = get_logger()


class InvestmentLedger(Ledger[Investment]):
    """Service for managing the simulated investment portfolio.

    The ledger owns a PriceSimulator. It does not start on its own; call
    ``start_price_simulation()`` and, when done with the ledger, ``close()``.

    Args:
        store: RecordStore used for persistence.
        interval: Seconds between price simulation ticks.
        volatility: Largest relative price change per tick.
        rng: Random source for the price walk.
        on_change: Optional callback invoked after each persisted mutation.
    """

    record_name = "investment"

    def __init__(
        self,
        store,
        interval: float = DEFAULT_INTERVAL,
        volatility: float = DEFAULT_VOLATILITY,
        rng: Optional[random.Random] = None,
        on_change: Optional[Callable[[], None]] = None,
    ):
        super().__init__(store, on_change)
        self.simulator = PriceSimulator(
            self, interval=interval, volatility=volatility, rng=rng
        )

    def _load(self) -> List[Investment]:
        return self.store.load_investments()

    def _save(self, records: List[Investment]) -> None:
        self.store.save_investments(records)

    @property
    def investments(self) -> List[Investment]:
        return self.snapshot()

    def total_portfolio_value(self) -> Decimal:
        with self._lock:
            return sum((i.total_value for i in self._records), Decimal("0"))

    def total_invested(self) -> Decimal:
        with self._lock:
            return sum((i.total_cost for i in self._records), Decimal("0"))

    def total_gain_loss(self) -> Decimal:
        with self._lock:
            return sum((i.gain_loss for i in self._records), Decimal("0"))

    def portfolio_gain_loss_percentage(self) -> Decimal:
        """Overall return of the portfolio in percent (0 when nothing invested)."""
        with self._lock:
            invested = self.total_invested()
            if invested <= 0:
                return Decimal("0")
            return self.total_gain_loss() / invested * 100

    def top_performer(self) -> Optional[Investment]:
        """Holding with the highest gain/loss percentage; first one wins ties."""
        # max() and min() keep the first of equal elements
        with self._lock:
            return max(
                self._records, key=lambda i: i.gain_loss_percentage, default=None
            )

    def worst_performer(self) -> Optional[Investment]:
        """Holding with the lowest gain/loss percentage; first one wins ties."""
        with self._lock:
            return min(
                self._records, key=lambda i: i.gain_loss_percentage, default=None
            )

    def allocation_by_type(self) -> Dict[InvestmentType, Decimal]:
        """Total current value held per investment type (types held only)."""
        allocation: Dict[InvestmentType, Decimal] = {}
        with self._lock:
            for investment in self._records:
                allocation[investment.type] = (
                    allocation.get(investment.type, Decimal("0"))
                    + investment.total_value
                )
        return allocation

    def apply_price_walk(self, draw_change: Callable[[], float]) -> None:
        """Apply one random step to every current price, then persist once.

        Args:
            draw_change: Returns the relative change for one holding.
        """
        with self._lock:
            for investment in self._records:
                change = Decimal(str(draw_change()))
                investment.current_price *= 1 + change
            self._persist()
        logger.debug(f"Price walk applied to {len(self._records)} investment(s)")

    def start_price_simulation(self) -> None:
        self.simulator.start()

    def close(self) -> None:
        """Stop the price simulation. The ledger must not be used afterwards."""
        self.simulator.stop()
