"""Budget planner: monthly category limits reconciled against expenses."""

from datetime import date
from decimal import Decimal
from typing import Callable, Iterable, List, Optional
from models.budget import Budget
from models.expense import Expense
from models.fields import same_month
from services.ledger import Ledger
from logger import get_logger

logger = get_logger()

# Seeded when no budgets have been stored yet
DEFAULT_BUDGETS = [
    ("Food", Decimal("500")),
    ("Transport", Decimal("200")),
    ("Entertainment", Decimal("150")),
    ("Shopping", Decimal("300")),
    ("Utilities", Decimal("250")),
]


def category_matches(budget_category: str, expense_category: str) -> bool:
    """Loose, case-insensitive match of a budget category to an expense category.

    Either name may contain the other, so a budget called "food" matches
    Food and one called "Fast Food" matches Food too.
    """
    budget_name = budget_category.lower()
    expense_name = expense_category.lower()
    return budget_name in expense_name or expense_name in budget_name


class BudgetPlanner(Ledger[Budget]):
    """Service for planning budgets and tracking spending against them.

    On construction the default budgets are created for the current month
    if the store holds none.

    Args:
        store: RecordStore used for persistence.
        clock: Returns today's date; used for seeding.
        on_change: Optional callback invoked after each persisted mutation.
    """

    record_name = "budget"

    def __init__(
        self,
        store,
        clock: Callable[[], date] = date.today,
        on_change: Optional[Callable[[], None]] = None,
    ):
        self.clock = clock
        super().__init__(store, on_change)
        self._seed_defaults()

    def _load(self) -> List[Budget]:
        return self.store.load_budgets()

    def _save(self, records: List[Budget]) -> None:
        self.store.save_budgets(records)

    def _seed_defaults(self) -> None:
        with self._lock:
            if self._records:
                return
            month = self.clock()
            self._records = [
                Budget(category=category, limit=limit, month=month)
                for category, limit in DEFAULT_BUDGETS
            ]
            self._persist()
        logger.info(f"Seeded {len(DEFAULT_BUDGETS)} default budgets for {month:%Y-%m}")

    @property
    def budgets(self) -> List[Budget]:
        return self.snapshot()

    def update(self, budget: Budget) -> bool:
        """Replace the stored budget that has the same ID.

        Returns:
            True if the budget was replaced, False if no budget has its ID.
        """
        with self._lock:
            for index, existing in enumerate(self._records):
                if existing.id == budget.id:
                    self._records[index] = budget
                    self._persist()
                    break
            else:
                logger.warning(f"Budget {budget.id} not found, nothing updated")
                return False

        logger.debug(f"Updated budget {budget.id}")
        return True

    def sync_with_expenses(self, expenses: Iterable[Expense]) -> None:
        """Recompute every budget's spent amount from the given expenses.

        An expense counts toward a budget when it is dated in the budget's
        month and its category matches the budget category (see
        category_matches). Every budget is recomputed from scratch, then
        the collection is saved once.
        """
        expenses = list(expenses)
        with self._lock:
            for budget in self._records:
                budget.spent = sum(
                    (
                        e.amount
                        for e in expenses
                        if same_month(e.date, budget.month)
                        and category_matches(budget.category, e.category.value)
                    ),
                    Decimal("0"),
                )
            self._persist()

        logger.debug(
            f"Synced {len(self._records)} budget(s) against {len(expenses)} expense(s)"
        )

    def total_budget(self) -> Decimal:
        with self._lock:
            return sum((b.limit for b in self._records), Decimal("0"))

    def total_spent(self) -> Decimal:
        with self._lock:
            return sum((b.spent for b in self._records), Decimal("0"))

    def total_remaining(self) -> Decimal:
        with self._lock:
            return sum((b.remaining for b in self._records), Decimal("0"))

    def over_budget_count(self) -> int:
        with self._lock:
            return sum(1 for b in self._records if b.is_over_budget)
