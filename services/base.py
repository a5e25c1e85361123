"""Base services container for dependency injection."""

from config import Config
from db.manager import DatabaseManager


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a test database. One RecordStore is shared by every
    ledger.

    Use it as a context manager, or call ``close()``, so the investment
    price simulation is stopped when the container is discarded.

    Args:
        config: Application configuration object.
        db_manager: Optional database manager for testing. If provided, it is
                    used instead of a DatabaseManager built from config.
        clock: Optional ``() -> date`` used for "current month" logic.
        rng: Optional random source for the price simulation.
    """

    def __init__(self, config: Config, db_manager=None, clock=None, rng=None):
        self.config = config
        self.db_manager = db_manager or DatabaseManager(config)

        # Lazy import to avoid circular dependencies
        from services.records import RecordStore
        from services.expenses import ExpenseLedger
        from services.investments import InvestmentLedger
        from services.budgets import BudgetPlanner
        from services.dashboard import DashboardService

        clock_kwargs = {"clock": clock} if clock is not None else {}

        self.records = RecordStore(self.db_manager)
        self.expenses = ExpenseLedger(self.records, **clock_kwargs)
        self.investments = InvestmentLedger(
            self.records,
            interval=config.simulation_interval,
            volatility=config.simulation_volatility,
            rng=rng,
        )
        self.budgets = BudgetPlanner(self.records, **clock_kwargs)
        self.dashboard = DashboardService(
            self.expenses, self.investments, self.budgets
        )

    def start(self) -> None:
        """Start background work enabled in the configuration."""
        if self.config.simulation_enabled:
            self.investments.start_price_simulation()

    def close(self) -> None:
        """Stop background work."""
        self.investments.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
