"""Shop database management CLI.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Insert demo customers, catalogue and orders
"""

import argparse
import sys


def _shop():
    from shop.domain import shop

    print("Initializing shop domain...")
    shop.init()
    return shop


def setup_database():
    """Create the relational schema for the configured provider."""
    from shop.utils.db import setup_db

    domain = _shop()
    print("Creating shop database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop the relational schema for the configured provider."""
    from shop.utils.db import drop_db

    domain = _shop()
    print("Dropping shop database schema...")
    drop_db(domain)
    print("Done.")


def seed_database():
    from shop.seed import seed_demo_data

    domain = _shop()
    print("Seeding demo data...")
    with domain.domain_context():
        counts = seed_demo_data()
    for name, count in counts.items():
        print(f"  {name}: {count}")
    print("Done.")


def main():
    parser = argparse.ArgumentParser(description="Shop database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Insert demo data")

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
