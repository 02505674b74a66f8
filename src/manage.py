"""Marketplace management CLI.

Creates and drops the database schema and seeds a fresh installation with a
demo buyer, a demo seller and two root categories.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Insert default accounts and categories
"""

import argparse
import sys

DEFAULT_ACCOUNTS = [
    {"username": "buyer", "email": "buyer@example.com", "password": "Buyer123!", "role": "Buyer"},
    {"username": "seller", "email": "seller@example.com", "password": "Seller123!", "role": "Seller"},
]

DEFAULT_CATEGORIES = [
    {"name": "Electronics", "description": "Phones, computers and accessories"},
    {"name": "Clothing", "description": "Apparel for every season"},
]


def _domain():
    from marketplace.domain import marketplace

    print("Initializing marketplace domain...")
    marketplace.init()
    return marketplace


def setup_database():
    from marketplace.utils.db import setup_db

    domain = _domain()
    print("Creating marketplace database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    from marketplace.utils.db import drop_db

    domain = _domain()
    print("Dropping marketplace database schema...")
    drop_db(domain)
    print("Done.")


def seed(domain=None):
    """Insert the default accounts and categories. Existing data is left alone."""
    from protean.utils.globals import current_domain

    from marketplace.catalogue.browsing import all_categories
    from marketplace.catalogue.category.management import CreateCategory
    from marketplace.identity.account import Account
    from marketplace.identity.registration import RegisterAccount

    domain = domain or _domain()
    with domain.domain_context():
        dao = current_domain.repository_for(Account)._dao
        ids = {}
        for account in DEFAULT_ACCOUNTS:
            existing = dao.query.filter(username=account["username"]).all().items
            if existing:
                ids[account["role"]] = str(existing[0].id)
                print(f"  account {account['username']!r} already exists.")
                continue
            ids[account["role"]] = current_domain.process(RegisterAccount(**account), asynchronous=False)
            print(f"  account {account['username']!r} created.")

        if all_categories():
            print("  categories already present.")
        else:
            for category in DEFAULT_CATEGORIES:
                current_domain.process(CreateCategory(seller_id=ids["Seller"], **category), asynchronous=False)
                print(f"  category {category['name']!r} created.")

    print("Done.")
    return ids


def main():
    parser = argparse.ArgumentParser(description="Marketplace management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Insert default accounts and categories")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed":
        seed()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
