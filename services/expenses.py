"""Expense ledger: recorded expenses and their totals."""

from datetime import date
from decimal import Decimal
from typing import Callable, Iterator, List, Optional
from categorization import categorize
from models.expense import Expense, ExpenseCategory
from models.fields import same_month
from services.ledger import Ledger


class ExpenseLedger(Ledger[Expense]):
    """Service for recording expenses and computing totals.

    Args:
        store: RecordStore used for persistence.
        clock: Returns today's date. Injected so "current month" is testable.
        on_change: Optional callback invoked after each persisted mutation.
    """

    record_name = "expense"

    def __init__(
        self,
        store,
        clock: Callable[[], date] = date.today,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.clock = clock
        super().__init__(store, on_change)

    def _load(self) -> List[Expense]:
        return self.store.load_expenses()

    def _save(self, records: List[Expense]) -> None:
        self.store.save_expenses(records)

    @property
    def expenses(self) -> List[Expense]:
        return self.snapshot()

    def sorted_by_date(self) -> List[Expense]:
        """Expenses newest first."""
        return sorted(self.snapshot(), key=lambda e: e.date, reverse=True)

    def total_expenses(self) -> Decimal:
        return sum((e.amount for e in self.snapshot()), Decimal("0"))

    def total_for_category(self, category: ExpenseCategory) -> Decimal:
        return sum(
            (e.amount for e in self.snapshot() if e.category == category),
            Decimal("0"),
        )

    def expenses_for_current_month(self) -> Iterator[Expense]:
        """Lazily yield expenses dated in the current calendar month.

        "Now" is read from the clock on every call.
        """
        today = self.clock()
        return (e for e in self.snapshot() if same_month(e.date, today))

    def monthly_total(self) -> Decimal:
        return sum(
            (e.amount for e in self.expenses_for_current_month()), Decimal("0")
        )

    def categorize(
        self, description: str, amount: Optional[Decimal] = None
    ) -> ExpenseCategory:
        """Suggest a category for a description. See categorization.categorize."""
        return categorize(description, amount)
