#!/usr/bin/env python3
"""Reset script for Vaultix.

Clears the stored expenses, investments and budgets. The next run starts
from an empty ledger and re-seeds the default budgets.
"""

import sys

from config import load_config
from db.manager import DatabaseManager
from cli.migrate import ensure_schema
from services.records import RecordStore
from logger import setup_logging


def reset():
    """Reset all stored data after confirmation."""
    print("Vaultix Reset Script")
    print("=" * 50)

    config = load_config()
    setup_logging(config, console=False)

    print(f"\nDatabase: {config.db_path}")

    response = input("\nThis will delete ALL expenses, investments and budgets. Continue? (yes/no): ")
    if response.lower() != "yes":
        print("Reset cancelled.")
        sys.exit(0)

    db_manager = DatabaseManager(config)
    ensure_schema(db_manager)
    RecordStore(db_manager).reset_all_data()

    print("\n" + "=" * 50)
    print("Reset complete! All data has been cleared.")


if __name__ == "__main__":
    reset()
