#!/usr/bin/env python3

import sys
from dataclasses import replace
from datetime import date
from cli.inputs import money, parse_amount, parse_date, percent
from models.budget import Budget
from logger import get_logger

logger = get_logger()


def _sync(services):
    services.budgets.sync_with_expenses(services.expenses.expenses)


def cmd_list(args, services):
    """List budgets after reconciling them with recorded expenses."""
    _sync(services)
    budgets = services.budgets.budgets

    if not budgets:
        logger.info("No budgets found.")
        return

    logger.info("\nBudgets:")
    logger.info("=" * 80)
    for budget in budgets:
        flag = "  OVER BUDGET" if budget.is_over_budget else ""
        logger.info(f"{budget.category} ({budget.month:%Y-%m}){flag}")
        logger.info(f"  ID: {budget.id}")
        logger.info(
            f"  Spent {money(budget.spent)} of {money(budget.limit)} "
            f"({percent(budget.percentage_used)}), "
            f"remaining {money(budget.remaining)}"
        )
        logger.info("-" * 80)


def cmd_add(args, services):
    """Create a budget for a category and month."""
    budget = Budget(
        category=args.category,
        limit=args.limit,
        month=args.month or date.today(),
    )
    services.budgets.add(budget)
    _sync(services)

    logger.info(f"\n✓ Budget created with ID: {budget.id}")
    logger.info(f"  {budget.category}: {money(budget.limit)} for {budget.month:%Y-%m}")


def cmd_update(args, services):
    """Change a budget's category, limit or month."""
    existing = services.budgets.find(args.budget_id)
    if existing is None:
        logger.error(f"Budget '{args.budget_id}' not found.")
        sys.exit(1)

    changes = {}
    if args.category is not None:
        changes["category"] = args.category
    if args.limit is not None:
        changes["limit"] = args.limit
    if args.month is not None:
        changes["month"] = args.month

    if not changes:
        logger.info("Nothing to update.")
        return

    services.budgets.update(replace(existing, **changes))
    _sync(services)
    logger.info(f"✓ Updated budget {args.budget_id}")


def cmd_delete(args, services):
    """Delete a budget by ID."""
    if not services.budgets.delete(args.budget_id):
        logger.error(f"Budget '{args.budget_id}' not found.")
        sys.exit(1)

    logger.info(f"✓ Deleted budget {args.budget_id}")


def cmd_sync(args, services):
    """Recompute spending for every budget."""
    _sync(services)
    logger.info(f"✓ Synced {len(services.budgets)} budget(s) with expenses")


def cmd_summary(args, services):
    """Show budget totals."""
    _sync(services)
    planner = services.budgets

    logger.info("\nBudget Summary")
    logger.info("=" * 80)
    logger.info(f"Budgeted:  {money(planner.total_budget())}")
    logger.info(f"Spent:     {money(planner.total_spent())}")
    logger.info(f"Remaining: {money(planner.total_remaining())}")

    over = planner.over_budget_count()
    if over:
        logger.warning(f"{over} budget(s) over limit")


def setup_parser(subparsers):
    """Setup budgets subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "budgets",
        help="Plan budgets",
        description="Create monthly category budgets and track spending",
    )

    budgets_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available budget commands",
        dest="subcommand",
        required=True,
    )

    # budgets list
    list_parser = budgets_subparsers.add_parser("list", help="List all budgets")
    list_parser.set_defaults(func=cmd_list)

    # budgets add
    add_parser = budgets_subparsers.add_parser("add", help="Create a budget")
    add_parser.add_argument("category", help="Category name, e.g. Food")
    add_parser.add_argument("limit", type=parse_amount, help="Monthly limit")
    add_parser.add_argument(
        "--month", type=parse_date, help="Any date in the month (default: today)"
    )
    add_parser.set_defaults(func=cmd_add)

    # budgets update
    update_parser = budgets_subparsers.add_parser("update", help="Update a budget")
    update_parser.add_argument("budget_id", help="ID of the budget to update")
    update_parser.add_argument("--category", help="New category name")
    update_parser.add_argument("--limit", type=parse_amount, help="New limit")
    update_parser.add_argument("--month", type=parse_date, help="New month")
    update_parser.set_defaults(func=cmd_update)

    # budgets delete
    delete_parser = budgets_subparsers.add_parser(
        "delete", help="Delete a budget by ID"
    )
    delete_parser.add_argument("budget_id", help="ID of the budget to delete")
    delete_parser.set_defaults(func=cmd_delete)

    # budgets sync
    sync_parser = budgets_subparsers.add_parser(
        "sync", help="Recompute spending from expenses"
    )
    sync_parser.set_defaults(func=cmd_sync)

    # budgets summary
    summary_parser = budgets_subparsers.add_parser(
        "summary", help="Show budget totals"
    )
    summary_parser.set_defaults(func=cmd_summary)
