"""
Shared database schema definitions.
Used by the test fixtures and to bootstrap a local database from the command line.
"""

import logging

from app.database import get_database_path, get_db

logger = logging.getLogger(__name__)

# Sample rows for a local database
PRODUCTS_SEED_DATA = [
    ("Widget", 9.99),
    ("Gadget", 24.50),
    ("Sprocket", 3.75),
    ("Flux Capacitor", 1210.00),
]


def create_tables(cursor):
    """
    Create the products table.
    This function is idempotent - safe to call multiple times.
    """
    cursor.execute("""
        CREATE TABLE IF NOT EXISTS products (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL,
            price REAL NOT NULL
        )
    """)


def drop_tables(cursor):
    cursor.execute("DROP TABLE IF EXISTS products")


def seed_data(cursor):
    """
    Insert sample products.
    """
    cursor.executemany(
        "INSERT INTO products (name, price) VALUES (?, ?)",
        PRODUCTS_SEED_DATA
    )


ACTIONS = {
    "create": create_tables,
    "drop": drop_tables,
    "seed": seed_data,
}


def run(action: str):
    """Apply one schema action to the configured database."""
    with get_db() as conn:
        ACTIONS[action](conn.cursor())
    logger.info("Schema action '%s' applied to %s", action, get_database_path())


if __name__ == "__main__":
    import argparse

    logging.basicConfig(level=logging.INFO)

    parser = argparse.ArgumentParser(description="Manage the products table")
    parser.add_argument(
        "action",
        choices=sorted(ACTIONS),
        help="Schema action to perform"
    )

    args = parser.parse_args()
    run(args.action)
