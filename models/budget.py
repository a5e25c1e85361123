"""Budget model: a spending limit for one category in one month."""

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
import uuid

from models.fields import to_date, to_decimal


@dataclass
class Budget:
    """Represents a monthly category budget.

    Attributes:
        category: Free-text category name entered by the user. It is not
                  restricted to the expense categories.
        limit: Spending limit for the month.
        month: Any date within the budgeted month; the day is ignored.
        spent: Amount spent so far. Overwritten by reconciliation.
        id: Unique identifier (UUID4 string).
    """

    category: str
    limit: Decimal
    month: date
    spent: Decimal = Decimal("0")
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    @property
    def remaining(self) -> Decimal:
        return self.limit - self.spent

    @property
    def percentage_used(self) -> Decimal:
        """Share of the limit spent, in percent, capped at 100."""
        if self.limit <= 0:
            return Decimal("0")
        return min(self.spent / self.limit * 100, Decimal("100"))

    @property
    def is_over_budget(self) -> bool:
        return self.spent > self.limit

    def to_dict(self) -> dict:
        """Convert budget to its persisted form."""
        return {
            "id": self.id,
            "category": self.category,
            "limit": str(self.limit),
            "spent": str(self.spent),
            "month": self.month.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Budget":
        """Build a budget from its persisted form."""
        return cls(
            id=str(data["id"]),
            category=str(data["category"]),
            limit=to_decimal(data["limit"]),
            spent=to_decimal(data.get("spent", 0)),
            month=to_date(data["month"]),
        )
