"""Order management database CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load demo users and products
"""

import argparse
import sys


def setup_database():
    from oms.domain import oms
    from oms.utils.db import setup_db

    print("Initializing oms domain...")
    oms.init()
    print("Creating oms database schema...")
    setup_db(oms)
    print("Done.")


def drop_database():
    from oms.domain import oms
    from oms.utils.db import drop_db

    print("Initializing oms domain...")
    oms.init()
    print("Dropping oms database schema...")
    drop_db(oms)
    print("Done.")


def seed_database():
    from oms.domain import oms
    from oms.utils.seed import seed_demo_data

    oms.init()
    with oms.domain_context():
        seeded = seed_demo_data()
    print("Demo data loaded." if seeded else "Database already seeded, nothing to do.")


def main():
    parser = argparse.ArgumentParser(description="Order management database tools")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load demo users and products into an empty database")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
