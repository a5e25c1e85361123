from datetime import date
from decimal import Decimal

import pytest

from models.expense import Expense, ExpenseCategory
from services.expenses import ExpenseLedger
from tests.helpers import make_expense


class TestExpenseLedger:
    """Tests for ExpenseLedger."""

    def test_starts_empty(self, services):
        """Test a fresh ledger has no expenses and zero totals."""
        assert services.expenses.expenses == []
        assert services.expenses.total_expenses() == Decimal("0")
        assert services.expenses.monthly_total() == Decimal("0")

    def test_add_persists(self, services, store):
        """Test that adding an expense saves the whole collection."""
        expense = services.expenses.add(make_expense("45.00", ExpenseCategory.FOOD))

        assert services.expenses.expenses == [expense]
        assert store.load_expenses() == [expense]

    def test_add_generates_unique_ids(self, services):
        """Test that each expense gets its own ID."""
        first = services.expenses.add(make_expense())
        second = services.expenses.add(make_expense())

        assert first.id != second.id

    def test_delete_by_id(self, services, store):
        """Test deleting an expense by ID."""
        keep = services.expenses.add(make_expense("1"))
        drop = services.expenses.add(make_expense("2"))

        assert services.expenses.delete(drop.id) is True

        assert services.expenses.expenses == [keep]
        assert store.load_expenses() == [keep]

    def test_delete_unknown_id(self, services):
        """Test deleting an unknown ID returns False."""
        services.expenses.add(make_expense())

        assert services.expenses.delete("missing") is False
        assert len(services.expenses) == 1

    def test_delete_at_positions(self, services, store):
        """Test deleting by positions, ignoring out of range ones."""
        expenses = [services.expenses.add(make_expense(str(n))) for n in range(4)]

        removed = services.expenses.delete_at({0, 2, 9})

        assert removed == 2
        assert services.expenses.expenses == [expenses[1], expenses[3]]
        assert store.load_expenses() == [expenses[1], expenses[3]]

    def test_total_expenses(self, services):
        """Test the sum of all amounts."""
        services.expenses.add(make_expense("10.25"))
        services.expenses.add(make_expense("4.75"))

        assert services.expenses.total_expenses() == Decimal("15.00")

    def test_total_for_category(self, services):
        """Test per-category totals use exact category equality."""
        services.expenses.add(make_expense("10", ExpenseCategory.FOOD))
        services.expenses.add(make_expense("5", ExpenseCategory.FOOD))
        services.expenses.add(make_expense("7", ExpenseCategory.HEALTH))

        assert services.expenses.total_for_category(ExpenseCategory.FOOD) == Decimal("15")
        assert services.expenses.total_for_category(ExpenseCategory.HEALTH) == Decimal("7")
        assert services.expenses.total_for_category(ExpenseCategory.OTHER) == Decimal("0")

    def test_category_totals_add_up(self, services):
        """Test that category totals sum to the overall total."""
        for n, category in enumerate(ExpenseCategory):
            services.expenses.add(make_expense(f"{n + 1}.10", category))

        by_category = sum(
            services.expenses.total_for_category(c) for c in ExpenseCategory
        )

        assert by_category == services.expenses.total_expenses()

    def test_current_month_filter(self, services):
        """Test only expenses in the current calendar month are counted."""
        this_month = services.expenses.add(make_expense("3", on=date(2026, 3, 1)))
        services.expenses.add(make_expense("5", on=date(2026, 2, 28)))
        services.expenses.add(make_expense("7", on=date(2025, 3, 15)))

        assert list(services.expenses.expenses_for_current_month()) == [this_month]
        assert services.expenses.monthly_total() == Decimal("3")

    def test_current_month_reads_clock_each_call(self, store):
        """Test that the current month follows the clock, not a cached value."""
        today = {"value": date(2026, 3, 20)}
        ledger = ExpenseLedger(store, clock=lambda: today["value"])
        ledger.add(make_expense("45.00", on=date(2026, 3, 15)))

        assert ledger.monthly_total() == Decimal("45.00")

        today["value"] = date(2026, 4, 1)
        assert ledger.monthly_total() == Decimal("0")

    def test_current_month_is_restartable(self, services):
        """Test each call yields a fresh sequence."""
        services.expenses.add(make_expense("3"))

        assert len(list(services.expenses.expenses_for_current_month())) == 1
        assert len(list(services.expenses.expenses_for_current_month())) == 1

    def test_sorted_by_date_newest_first(self, services):
        """Test expenses are sorted newest first."""
        old = services.expenses.add(make_expense(on=date(2026, 1, 5)))
        new = services.expenses.add(make_expense(on=date(2026, 3, 5)))
        mid = services.expenses.add(make_expense(on=date(2026, 2, 5)))

        assert services.expenses.sorted_by_date() == [new, mid, old]

    def test_reload_reads_store(self, services, store):
        """Test that a new ledger sees previously saved expenses."""
        expense = services.expenses.add(make_expense())

        assert ExpenseLedger(store).expenses == [expense]

    def test_on_change_called_after_mutation(self, store):
        """Test the change callback fires on add and delete."""
        calls = []
        ledger = ExpenseLedger(store, on_change=lambda: calls.append(1))

        expense = ledger.add(make_expense())
        ledger.delete(expense.id)

        assert len(calls) == 2

    def test_scenario_grocery_run(self, services):
        """Test the grocery run scenario end to end."""
        ledger = services.expenses
        category = ledger.categorize("grocery run", Decimal("45.00"))
        assert category == ExpenseCategory.FOOD

        ledger.add(
            Expense(
                amount=Decimal("45.00"),
                category=category,
                date=date(2026, 3, 15),
                description="grocery run",
            )
        )

        assert ledger.total_for_category(ExpenseCategory.FOOD) == Decimal("45.00")
        assert ledger.monthly_total() == Decimal("45.00")

    def test_invalid_category_rejected(self):
        """Test that an expense outside the fixed categories cannot be built."""
        with pytest.raises(ValueError):
            make_expense(category="Groceries")

    def test_category_label_accepted(self):
        """Test that the category label converts to the enum member."""
        expense = make_expense(category="Food")

        assert expense.category is ExpenseCategory.FOOD

    def test_from_dict_rejects_non_boolean_recurring(self):
        """Test that a stored recurring flag must be a real boolean."""
        record = make_expense().to_dict()
        record["isRecurring"] = "false"

        with pytest.raises(ValueError):
            Expense.from_dict(record)
