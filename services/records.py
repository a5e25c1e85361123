"""Record store: whole-collection persistence in keyed database slots."""

import json
import sqlite3
from typing import Callable, List, TypeVar
from models.budget import Budget
from models.expense import Expense
from models.investment import Investment
from logger import get_logger

logger = get_logger()

T = TypeVar("T")

EXPENSES_KEY = "expenses"
INVESTMENTS_KEY = "investments"
BUDGETS_KEY = "budgets"

ALL_KEYS = (EXPENSES_KEY, INVESTMENTS_KEY, BUDGETS_KEY)


class RecordStore:
    """Persists the expense, investment and budget collections.

    Each collection lives in its own row of ``record_slots`` as a JSON
    array. Saving replaces the whole row; the last write wins.

    Loading never fails: a missing slot and a slot that cannot be decoded
    both read as an empty collection. Write errors are logged and
    otherwise ignored.
    """

    def __init__(self, db_manager):
        """Initialize the record store.

        Args:
            db_manager: Database manager instance for database operations.
        """
        self.db_manager = db_manager

    def save_expenses(self, expenses: List[Expense]) -> None:
        self._save(EXPENSES_KEY, [e.to_dict() for e in expenses])

    def load_expenses(self) -> List[Expense]:
        return self._load(EXPENSES_KEY, Expense.from_dict)

    def save_investments(self, investments: List[Investment]) -> None:
        self._save(INVESTMENTS_KEY, [i.to_dict() for i in investments])

    def load_investments(self) -> List[Investment]:
        return self._load(INVESTMENTS_KEY, Investment.from_dict)

    def save_budgets(self, budgets: List[Budget]) -> None:
        self._save(BUDGETS_KEY, [b.to_dict() for b in budgets])

    def load_budgets(self) -> List[Budget]:
        return self._load(BUDGETS_KEY, Budget.from_dict)

    def reset_all_data(self) -> None:
        """Delete all three slots."""
        placeholders = ", ".join(["?"] * len(ALL_KEYS))
        try:
            with self.db_manager.connect() as conn:
                conn.execute(
                    f"DELETE FROM record_slots WHERE key IN ({placeholders})",
                    ALL_KEYS,
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.warning(f"Failed to reset stored data: {e}")
            return

        logger.info("All stored data has been reset")

    def _save(self, key: str, records: List[dict]) -> None:
        payload = json.dumps(records)
        try:
            with self.db_manager.connect() as conn:
                conn.execute(
                    """
                    INSERT INTO record_slots (key, payload, updated_at)
                    VALUES (?, ?, CURRENT_TIMESTAMP)
                    ON CONFLICT(key) DO UPDATE SET
                        payload = excluded.payload,
                        updated_at = excluded.updated_at
                    """,
                    (key, payload),
                )
                conn.commit()
        except sqlite3.Error as e:
            logger.warning(f"Failed to save {key}: {e}")
            return

        logger.debug(f"Saved {len(records)} {key}")

    def _load(self, key: str, decode: Callable[[dict], T]) -> List[T]:
        try:
            with self.db_manager.connect() as conn:
                row = conn.execute(
                    "SELECT payload FROM record_slots WHERE key = ?", (key,)
                ).fetchone()
        except sqlite3.Error:
            row = None

        if row is None:
            return []

        try:
            data = json.loads(row[0])
            if not isinstance(data, list):
                return []
            return [decode(item) for item in data]
        except (ValueError, KeyError, TypeError, AttributeError):
            # json.JSONDecodeError is a ValueError
            return []
