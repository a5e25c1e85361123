import random
from decimal import Decimal

from models.investment import InvestmentType
from services.investments import InvestmentLedger
from tests.helpers import make_investment


class TestInvestmentMetrics:
    """Tests for the per-holding derived values."""

    def test_value_cost_and_gain(self):
        """Test value, cost and gain of a single holding."""
        investment = make_investment(shares="10", purchase_price="100", current_price="110")

        assert investment.total_value == Decimal("1100")
        assert investment.total_cost == Decimal("1000")
        assert investment.gain_loss == Decimal("100")
        assert investment.gain_loss_percentage == Decimal("10")

    def test_loss(self):
        """Test a holding trading below its purchase price."""
        investment = make_investment(shares="4", purchase_price="50", current_price="40")

        assert investment.gain_loss == Decimal("-40")
        assert investment.gain_loss_percentage == Decimal("-20")

    def test_zero_cost_percentage_is_zero(self):
        """Test no division by zero when the holding cost nothing."""
        investment = make_investment(shares="0", purchase_price="100", current_price="120")

        assert investment.gain_loss_percentage == Decimal("0")

        free = make_investment(shares="5", purchase_price="0", current_price="10")
        assert free.gain_loss_percentage == Decimal("0")


class TestInvestmentLedger:
    """Tests for InvestmentLedger."""

    def test_add_and_delete_persist(self, services, store):
        """Test that add and delete save the portfolio."""
        first = services.investments.add(make_investment("AAPL"))
        second = services.investments.add(make_investment("MSFT"))

        services.investments.delete(first.id)

        assert services.investments.investments == [second]
        assert store.load_investments() == [second]

    def test_delete_at_positions(self, services):
        """Test deleting holdings by position."""
        holdings = [services.investments.add(make_investment(s)) for s in "ABC"]

        assert services.investments.delete_at([1]) == 1
        assert services.investments.investments == [holdings[0], holdings[2]]

    def test_empty_portfolio_aggregates(self, services):
        """Test aggregates of an empty portfolio are zero or None."""
        ledger = services.investments

        assert ledger.total_portfolio_value() == Decimal("0")
        assert ledger.total_invested() == Decimal("0")
        assert ledger.total_gain_loss() == Decimal("0")
        assert ledger.portfolio_gain_loss_percentage() == Decimal("0")
        assert ledger.top_performer() is None
        assert ledger.worst_performer() is None

    def test_portfolio_aggregates(self, services):
        """Test portfolio totals across holdings."""
        ledger = services.investments
        ledger.add(make_investment("A", shares="10", purchase_price="100", current_price="120"))
        ledger.add(make_investment("B", shares="5", purchase_price="200", current_price="150"))

        assert ledger.total_portfolio_value() == Decimal("1950")
        assert ledger.total_invested() == Decimal("2000")
        assert ledger.total_gain_loss() == Decimal("-50")
        assert ledger.portfolio_gain_loss_percentage() == Decimal("-2.5")

    def test_gain_loss_identity(self, services):
        """Test total gain/loss equals value minus invested."""
        ledger = services.investments
        rng = random.Random(7)
        for n in range(6):
            ledger.add(
                make_investment(
                    f"S{n}",
                    shares=str(rng.randint(1, 50)),
                    purchase_price=f"{rng.uniform(1, 500):.2f}",
                    current_price=f"{rng.uniform(1, 500):.2f}",
                )
            )

        assert (
            ledger.total_gain_loss()
            == ledger.total_portfolio_value() - ledger.total_invested()
        )

    def test_top_and_worst_performer(self, services):
        """Test best and worst holdings by gain/loss percentage."""
        ledger = services.investments
        ledger.add(make_investment("FLAT", current_price="100"))
        best = ledger.add(make_investment("UP", current_price="150"))
        worst = ledger.add(make_investment("DOWN", current_price="60"))

        assert ledger.top_performer() is best
        assert ledger.worst_performer() is worst

    def test_performer_ties_pick_first(self, services):
        """Test that ties resolve to the first holding in order."""
        ledger = services.investments
        first = ledger.add(make_investment("ONE", current_price="110"))
        ledger.add(make_investment("TWO", current_price="110"))

        assert ledger.top_performer() is first
        assert ledger.worst_performer() is first

    def test_allocation_by_type(self, services):
        """Test value totals grouped by investment type."""
        ledger = services.investments
        ledger.add(make_investment("A", shares="1", current_price="100"))
        ledger.add(make_investment("B", shares="2", current_price="100"))
        ledger.add(make_investment("BTC", shares="1", current_price="50", type=InvestmentType.CRYPTO))

        assert ledger.allocation_by_type() == {
            InvestmentType.STOCK: Decimal("300"),
            InvestmentType.CRYPTO: Decimal("50"),
        }

    def test_apply_price_walk(self, services, store):
        """Test a price walk step changes prices and persists once."""
        ledger = services.investments
        ledger.add(make_investment("A", current_price="100"))
        ledger.add(make_investment("B", current_price="200"))
        changes = iter([0.01, -0.02])

        ledger.apply_price_walk(lambda: next(changes))

        prices = [i.current_price for i in ledger.investments]
        assert prices == [Decimal("101.00"), Decimal("196.00")]
        assert [i.current_price for i in store.load_investments()] == prices

    def test_price_walk_leaves_other_fields(self, services):
        """Test only the current price moves."""
        ledger = services.investments
        holding = ledger.add(make_investment("A", shares="3", purchase_price="80"))

        ledger.apply_price_walk(lambda: 0.015)

        assert holding.shares == Decimal("3")
        assert holding.purchase_price == Decimal("80")

    def test_ledger_loads_saved_portfolio(self, services, store):
        """Test a new ledger picks up the stored holdings."""
        holding = services.investments.add(make_investment("AAPL"))

        ledger = InvestmentLedger(store)
        try:
            assert ledger.investments == [holding]
        finally:
            ledger.close()
