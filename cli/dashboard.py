#!/usr/bin/env python3

from cli.inputs import money, percent
from logger import get_logger

logger = get_logger()


def cmd_show(args, services):
    """Print the financial overview and recent activity."""
    overview = services.dashboard.overview()

    logger.info("\nOverview")
    logger.info("=" * 80)
    logger.info(f"Net worth:        {money(overview.net_worth)}")
    logger.info(f"Monthly expenses: {money(overview.monthly_expenses)}")
    logger.info(f"Portfolio value:  {money(overview.portfolio_value)}")
    logger.info(f"Portfolio return: {percent(overview.portfolio_return)}")
    logger.info(
        f"Expenses: {overview.expense_count}  "
        f"Investments: {overview.investment_count}  "
        f"Budgets: {overview.budget_count}"
    )

    logger.info("\nRecent Activity")
    logger.info("-" * 80)
    recent = services.dashboard.recent_expenses()
    if not recent:
        logger.info("No recent activity")
    for expense in recent:
        logger.info(
            f"{expense.date.isoformat()}  {expense.description:<40} {money(expense.amount):>12}"
        )


def setup_parser(subparsers):
    """Setup dashboard command parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "dashboard",
        help="Show the financial overview",
        description="Net worth, monthly spending, portfolio return and recent activity",
    )
    parser.set_defaults(func=cmd_show)
