#!/usr/bin/env python3

import sys
from datetime import date
from cli.inputs import money, parse_amount, parse_date
from models.expense import Expense, ExpenseCategory
from logger import get_logger

logger = get_logger()


def cmd_list(args, services):
    """List expenses, newest first."""
    expenses = services.expenses.sorted_by_date()

    if not expenses:
        logger.info("No expenses found.")
        return

    logger.info("\nExpenses:")
    logger.info("=" * 80)
    for expense in expenses:
        recurring = " (recurring)" if expense.is_recurring else ""
        logger.info(
            f"{expense.date.isoformat()}  {money(expense.amount):>12}  "
            f"{expense.category.value:<14} {expense.description}{recurring}"
        )
        logger.info(f"  ID: {expense.id}")

    logger.info(f"\nTotal expenses: {len(expenses)}")


def cmd_add(args, services):
    """Record a new expense, categorizing it from its description if needed."""
    if args.category:
        category = ExpenseCategory(args.category)
    else:
        category = services.expenses.categorize(args.description, args.amount)
        logger.info(f"Category suggested from description: {category.value}")

    expense = Expense(
        amount=args.amount,
        category=category,
        date=args.date or date.today(),
        description=args.description,
        is_recurring=args.recurring,
    )
    services.expenses.add(expense)

    logger.info(f"\n✓ Expense recorded with ID: {expense.id}")
    logger.info(f"  Amount: {money(expense.amount)}")
    logger.info(f"  Category: {expense.category.value}")
    logger.info(f"  Date: {expense.date.isoformat()}")


def cmd_delete(args, services):
    """Delete an expense by ID."""
    if not services.expenses.delete(args.expense_id):
        logger.error(f"Expense '{args.expense_id}' not found.")
        sys.exit(1)

    logger.info(f"✓ Deleted expense {args.expense_id}")


def cmd_summary(args, services):
    """Show totals overall, for this month and per category."""
    ledger = services.expenses

    logger.info("\nExpense Summary")
    logger.info("=" * 80)
    logger.info(f"This month: {money(ledger.monthly_total())}")
    logger.info(f"All time:   {money(ledger.total_expenses())}")
    logger.info("\nBy category:")
    for category in ExpenseCategory:
        total = ledger.total_for_category(category)
        if total:
            logger.info(f"  {category.value:<14} {money(total):>12}")


def cmd_categorize(args, services):
    """Show the category a description would be filed under."""
    category = services.expenses.categorize(args.description)
    logger.info(category.value)


def setup_parser(subparsers):
    """Setup expenses subcommand parser.

    Args:
        subparsers: The subparsers object from the main CLI
    """
    parser = subparsers.add_parser(
        "expenses",
        help="Track expenses",
        description="Record, list and summarize expenses",
    )

    expenses_subparsers = parser.add_subparsers(
        title="subcommands",
        description="Available expense commands",
        dest="subcommand",
        required=True,
    )

    # expenses list
    list_parser = expenses_subparsers.add_parser("list", help="List all expenses")
    list_parser.set_defaults(func=cmd_list)

    # expenses add
    add_parser = expenses_subparsers.add_parser("add", help="Record an expense")
    add_parser.add_argument("amount", type=parse_amount, help="Amount spent")
    add_parser.add_argument("description", help="What the money was spent on")
    add_parser.add_argument(
        "--category",
        choices=[c.value for c in ExpenseCategory],
        help="Category (suggested from the description if omitted)",
    )
    add_parser.add_argument(
        "--date", type=parse_date, help="Date of the expense (default: today)"
    )
    add_parser.add_argument(
        "--recurring", action="store_true", help="Mark as a recurring expense"
    )
    add_parser.set_defaults(func=cmd_add)

    # expenses delete
    delete_parser = expenses_subparsers.add_parser(
        "delete", help="Delete an expense by ID"
    )
    delete_parser.add_argument("expense_id", help="ID of the expense to delete")
    delete_parser.set_defaults(func=cmd_delete)

    # expenses summary
    summary_parser = expenses_subparsers.add_parser(
        "summary", help="Show expense totals"
    )
    summary_parser.set_defaults(func=cmd_summary)

    # expenses categorize
    categorize_parser = expenses_subparsers.add_parser(
        "categorize", help="Suggest a category for a description"
    )
    categorize_parser.add_argument("description", help="Expense description")
    categorize_parser.set_defaults(func=cmd_categorize)
