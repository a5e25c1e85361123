#!/usr/bin/env python3
"""
Vaultix CLI - Track expenses, a simulated portfolio and monthly budgets.

Usage:
    python -m cli <command> <subcommand> [options]

Commands:
    expenses     Record and summarize expenses
    investments  Manage the simulated investment portfolio
    budgets      Plan budgets and reconcile them with expenses
    dashboard    Show the financial overview
    migrate      Database migrations

Examples:
    python -m cli expenses add 45.00 "grocery run" --date 2026-03-15
    python -m cli expenses categorize "uber to airport"
    python -m cli investments add AAPL "Apple Inc." 10 150.00
    python -m cli investments simulate --ticks 5
    python -m cli budgets list
    python -m cli dashboard
"""

import sys
import argparse
from cli import budgets, dashboard, expenses, investments, migrate
from config import load_config
from services.base import Services
from db.manager import DatabaseManager
from logger import setup_logging


def main():
    """Main CLI entry point with subcommands."""
    parser = argparse.ArgumentParser(
        prog="cli",
        description="Vaultix - Personal finance tracking",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
        required=True,
    )

    expenses.setup_parser(subparsers)
    investments.setup_parser(subparsers)
    budgets.setup_parser(subparsers)
    dashboard.setup_parser(subparsers)
    migrate.setup_parser(subparsers)

    args = parser.parse_args()

    if hasattr(args, "func"):
        try:
            config = load_config()
            setup_logging(config)
            db_manager = DatabaseManager(config)

            # Migrate commands work on the raw database
            if args.command == "migrate":
                args.func(args, db_manager)
                return

            migrate.ensure_schema(db_manager)
            with Services(config, db_manager=db_manager) as services:
                args.func(args, services)
        except Exception as e:
            print(f"Error: {e}")
            sys.exit(1)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
