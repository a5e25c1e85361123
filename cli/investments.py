#!/usr/bin/env python3

import sys
import time
from datetime import date
from cli.inputs import money, parse_amount, parse_date, percent
from models.investment import Investment, InvestmentType
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List all holdings with their performance."""
    investments = services.investments.investments

    if not investments:
        logger.info("No investments found.")
        return

    logger.info("\nInvestments:")
    logger.info("=" * 80)
    for investment in investments:
        logger.info(f"{investment.symbol} - {investment.name} ({investment.type.value})")
        logger.info(f"  ID: {investment.id}")
        logger.info(
            f"  Shares: {investment.shares}  "
            f"Bought: {money(investment.purchase_price)}  "
            f"Now: {money(investment.current_price)}"
        )
        logger.info(
            f"  Value: {money(investment.total_value)}  "
            f"Gain/Loss: {money(investment.gain_loss)} "
            f"({percent(investment.gain_loss_percentage)})"
        )
        logger.info("-" * 80)

    logger.info(f"\nTotal investments: {len(investments)}")


def cmd_add(args, services):
    """Add a holding to the portfolio."""
    investment = Investment(
        name=args.name,
        symbol=args.symbol.upper(),
        type=InvestmentType(args.type),
        shares=args.shares,
        purchase_price=args.purchase_price,
        current_price=(
            args.current_price
            if args.current_price is not None
            else args.purchase_price
        ),
        purchase_date=args.purchase_date or date.today(),
    )
    services.investments.add(investment)

    logger.info(f"\n✓ Investment added with ID: {investment.id}")
    logger.info(f"  {investment.symbol}: {investment.shares} @ {money(investment.purchase_price)}")


def cmd_delete(args, services):
    """Delete a holding by ID."""
    if not services.investments.delete(args.investment_id):
        logger.error(f"Investment '{args.investment_id}' not found.")
        sys.exit(1)

    logger.info(f"✓ Deleted investment {args.investment_id}")


def _log_summary(ledger):
    logger.info("\nPortfolio Summary")
    logger.info("=" * 80)
    logger.info(f"Value:     {money(ledger.total_portfolio_value())}")
    logger.info(f"Invested:  {money(ledger.total_invested())}")
    logger.info(
        f"Gain/Loss: {money(ledger.total_gain_loss())} "
        f"({percent(ledger.portfolio_gain_loss_percentage())})"
    )

    top = ledger.top_performer()
    worst = ledger.worst_performer()
    if top is not None:
        logger.info(f"Top performer:   {top.symbol} ({percent(top.gain_loss_percentage)})")
    if worst is not None:
        logger.info(f"Worst performer: {worst.symbol} ({percent(worst.gain_loss_percentage)})")

    allocation = ledger.allocation_by_type()
    if allocation:
        logger.info("\nAllocation:")
        for investment_type, value in allocation.items():
            logger.info(f"  {investment_type.value:<12} {money(value):>14}")


def cmd_summary(args, services):
    """Show portfolio totals and best/worst holdings."""
    _log_summary(services.investments)


def cmd_simulate(args, services):
    """Apply a number of price simulation ticks immediately."""
    for _ in range(args.ticks):
        services.investments.simulator.tick()

    logger.info(f"Applied {args.ticks} price simulation tick(s)")
    _log_summary(services.investments)


def cmd_watch(args, services):
    """Run the background price simulation until interrupted."""
    if not services.config.simulation_enabled:
        logger.info(
            "Price simulation is disabled. Set 'enabled = true' under "
            "[simulation] in the config file to watch prices."
        )
        return

    services.start()
    logger.info("Watching prices. Press Ctrl+C to stop.")
    try:
        while services.investments.simulator.running:
            time.sleep(services.config.simulation_interval)
            logger.info(
                f"Portfolio value: {money(services.investments.total_portfolio_value())}"
            )
    except KeyboardInterrupt:
        logger.info("\nStopping...")
    finally:
        services.close()


def setup_parser(subparsers):
    """Setup investments subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "investments",
        help="Manage the investment portfolio",
        description="Add holdings, review performance and simulate prices",
    )

    investments_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available investment commands",
        dest="subcommand",
        required=True,
    )

    # investments list
    list_parser = investments_subparsers.add_parser(
        "list", help="List all investments"
    )
    list_parser.set_defaults(func=cmd_list)

    # investments add
    add_parser = investments_subparsers.add_parser("add", help="Add an investment")
    add_parser.add_argument("symbol", help="Ticker symbol, e.g. AAPL")
    add_parser.add_argument("name", help="Display name")
    add_parser.add_argument("shares", type=parse_amount, help="Number of shares")
    add_parser.add_argument(
        "purchase_price", type=parse_amount, help="Price paid per share"
    )
    add_parser.add_argument(
        "--type",
        choices=[t.value for t in InvestmentType],
        default=InvestmentType.STOCK.value,
        help="Investment type (default: Stock)",
    )
    add_parser.add_argument(
        "--current-price",
        type=parse_amount,
        help="Current price per share (default: purchase price)",
    )
    add_parser.add_argument(
        "--purchase-date", type=parse_date, help="Purchase date (default: today)"
    )
    add_parser.set_defaults(func=cmd_add)

    # investments delete
    delete_parser = investments_subparsers.add_parser(
        "delete", help="Delete an investment by ID"
    )
    delete_parser.add_argument("investment_id", help="ID of the investment to delete")
    delete_parser.set_defaults(func=cmd_delete)

    # investments summary
    summary_parser = investments_subparsers.add_parser(
        "summary", help="Show portfolio performance"
    )
    summary_parser.set_defaults(func=cmd_summary)

    # investments simulate
    simulate_parser = investments_subparsers.add_parser(
        "simulate", help="Apply price simulation ticks now"
    )
    simulate_parser.add_argument(
        "--ticks", type=int, default=1, help="Number of ticks (default: 1)"
    )
    simulate_parser.set_defaults(func=cmd_simulate)

    # investments watch
    watch_parser = investments_subparsers.add_parser(
        "watch", help="Run the price simulation until Ctrl+C"
    )
    watch_parser.set_defaults(func=cmd_watch)
