from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
import uuid

from models.fields import to_date, to_decimal


class InvestmentType(str, Enum):
    STOCK = "Stock"
    CRYPTO = "Crypto"
    BOND = "Bond"
    ETF = "ETF"
    MUTUAL_FUND = "Mutual Fund"


@dataclass
class Investment:
    """A holding in the simulated portfolio.

    Attributes:
        name: Display name, e.g. "Apple Inc.".
        symbol: Ticker symbol, e.g. "AAPL".
        type: Asset class of the holding.
        shares: Quantity held (>= 0).
        purchase_price: Price per share paid.
        current_price: Latest simulated price per share. This is the only
                       field the price simulation mutates.
        purchase_date: When the holding was bought.
        id: Unique identifier (UUID4 string).
    """

    name: str
    symbol: str
    type: InvestmentType
    shares: Decimal
    purchase_price: Decimal
    current_price: Decimal
    purchase_date: date
    id: str = field(default_factory=lambda: str(uuid.uuid4()))

    def __post_init__(self):
        self.type = InvestmentType(self.type)

    @property
    def total_value(self) -> Decimal:
        return self.shares * self.current_price

    @property
    def total_cost(self) -> Decimal:
        return self.shares * self.purchase_price

    @property
    def gain_loss(self) -> Decimal:
        return self.total_value - self.total_cost

    @property
    def gain_loss_percentage(self) -> Decimal:
        """Gain or loss relative to cost, in percent (0 when cost is 0)."""
        total_cost = self.total_cost
        if total_cost <= 0:
            return Decimal("0")
        return self.gain_loss / total_cost * 100

    def to_dict(self) -> dict:
        """Convert investment to its persisted form."""
        return {
            "id": self.id,
            "name": self.name,
            "symbol": self.symbol,
            "type": self.type.value,
            "shares": str(self.shares),
            "purchasePrice": str(self.purchase_price),
            "currentPrice": str(self.current_price),
            "purchaseDate": self.purchase_date.isoformat(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Investment":
        """Build an investment from its persisted form."""
        return cls(
            id=str(data["id"]),
            name=str(data["name"]),
            symbol=str(data["symbol"]),
            type=InvestmentType(data["type"]),
            shares=to_decimal(data["shares"]),
            purchase_price=to_decimal(data["purchasePrice"]),
            current_price=to_decimal(data["currentPrice"]),
            purchase_date=to_date(data["purchaseDate"]),
        )
