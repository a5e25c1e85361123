from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
import uuid

from models.fields import to_date, to_decimal


class ExpenseCategory(str, Enum):
    """Fixed set of expense categories, valued by their display labels."""

    FOOD = "Food"
    TRANSPORT = "Transport"
    ENTERTAINMENT = "Entertainment"
    UTILITIES = "Utilities"
    SHOPPING = "Shopping"
    HEALTH = "Health"
    EDUCATION = "Education"
    OTHER = "Other"


@dataclass
class Expense:
    amount: Decimal  # expected non-negative
    category: ExpenseCategory
    date: date
    description: str
    is_recurring: bool = False  # informational only, nothing is generated from it
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        # Raises ValueError for labels outside the fixed set
        self.category = ExpenseCategory(self.category)

    def to_dict(self) -> dict:
        """Convert expense to its persisted form."""
        return {
            "id": self.id,
            "amount": str(self.amount),
            "category": self.category.value,
            "date": self.date.isoformat(),
            "description": self.description,
            "isRecurring": self.is_recurring,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Expense":
        """Build an expense from its persisted form.

        Raises:
            KeyError: If a field is missing.
            ValueError: If a field has an invalid value.
        """
        is_recurring = data.get("isRecurring", False)
        if not isinstance(is_recurring, bool):
            raise ValueError(f"isRecurring must be a boolean, got {is_recurring!r}")

        return cls(
            id=str(data["id"]),
            amount=to_decimal(data["amount"]),
            category=ExpenseCategory(data["category"]),
            date=to_date(data["date"]),
            description=str(data["description"]),
            is_recurring=is_recurring,
        )
