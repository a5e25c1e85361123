"""Dashboard figures combining the three ledgers."""

from dataclasses import dataclass
from decimal import Decimal
from typing import List
from models.expense import Expense


@dataclass
class Overview:
    """Headline numbers shown on the home screen."""

    expense_count: int
    investment_count: int
    budget_count: int
    monthly_expenses: Decimal
    portfolio_value: Decimal
    portfolio_return: Decimal  # percent
    net_worth: Decimal


class DashboardService:
    """Read-only summaries across expenses, investments and budgets."""

    def __init__(self, expenses, investments, budgets):
        """Initialize the dashboard service.

        Args:
            expenses: ExpenseLedger instance.
            investments: InvestmentLedger instance.
            budgets: BudgetPlanner instance.
        """
        self.expenses = expenses
        self.investments = investments
        self.budgets = budgets

    def net_worth(self) -> Decimal:
        """Portfolio value minus everything spent."""
        return self.investments.total_portfolio_value() - self.expenses.total_expenses()

    def recent_expenses(self, limit: int = 3) -> List[Expense]:
        return self.expenses.sorted_by_date()[:limit]

    def overview(self) -> Overview:
        return Overview(
            expense_count=len(self.expenses),
            investment_count=len(self.investments),
            budget_count=len(self.budgets),
            monthly_expenses=self.expenses.monthly_total(),
            portfolio_value=self.investments.total_portfolio_value(),
            portfolio_return=self.investments.portfolio_gain_loss_percentage(),
            net_worth=self.net_worth(),
        )
