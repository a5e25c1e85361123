"""Helper utilities for tests."""

from datetime import date
from decimal import Decimal
from pathlib import Path
import sqlite3

from models.budget import Budget
from models.expense import Expense, ExpenseCategory
from models.investment import Investment, InvestmentType

# Fixed "today" used by the services fixture
TODAY = date(2026, 3, 20)


def run_migrations(conn: sqlite3.Connection, migrations_dir: Path) -> None:
    """Run all SQL migrations in order.

    Args:
        conn: SQLite connection to run migrations against.
        migrations_dir: Path to directory containing .sql migration files.
    """
    for migration_file in sorted(migrations_dir.glob("*.sql")):
        conn.executescript(migration_file.read_text())

    conn.commit()


def make_expense(
    amount="10.00",
    category=ExpenseCategory.OTHER,
    on=date(2026, 3, 15),
    description="test expense",
    **kwargs,
) -> Expense:
    return Expense(
        amount=Decimal(amount),
        category=category,
        date=on,
        description=description,
        **kwargs,
    )


def make_investment(
    symbol="TEST",
    shares="10",
    purchase_price="100.00",
    current_price="100.00",
    type=InvestmentType.STOCK,
    **kwargs,
) -> Investment:
    return Investment(
        name=f"{symbol} Holding",
        symbol=symbol,
        type=type,
        shares=Decimal(shares),
        purchase_price=Decimal(purchase_price),
        current_price=Decimal(current_price),
        purchase_date=date(2025, 1, 2),
        **kwargs,
    )


def make_budget(category="Food", limit="500", month=date(2026, 3, 1), **kwargs) -> Budget:
    return Budget(category=category, limit=Decimal(limit), month=month, **kwargs)
