"""Storefront management CLI.

Creates and drops database schemas for SQL providers, and loads the sample
catalogue into whichever provider is configured.

Usage:
    python src/manage.py setup-db   # Create all tables
    python src/manage.py drop-db    # Drop all tables
    python src/manage.py seed       # Load sample categories, stores and products
"""

import argparse
import sys


def setup_database():
    """Create database tables for the storefront domain."""
    from storefront.domain import storefront
    from storefront.utils.db import setup_db

    print("Initializing storefront domain...")
    storefront.init()
    providers = setup_db(storefront)
    if providers:
        print(f"  Schema ready for: {', '.join(providers)}")
    else:
        print("  No SQL providers configured; nothing to create.")
    print("Done.")


def drop_database():
    """Drop database tables for the storefront domain."""
    from storefront.domain import storefront
    from storefront.utils.db import drop_db

    print("Initializing storefront domain...")
    storefront.init()
    providers = drop_db(storefront)
    if providers:
        print(f"  Schema dropped for: {', '.join(providers)}")
    else:
        print("  No SQL providers configured; nothing to drop.")
    print("Done.")


def seed_database():
    """Load the sample catalogue and demo order."""
    from storefront.domain import storefront
    from storefront.seed import load_sample_data

    print("Initializing storefront domain...")
    storefront.init()
    with storefront.domain_context():
        loaded = load_sample_data()
    print("  Sample data loaded." if loaded else "  Catalogue already populated; skipped.")
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Storefront management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")
    subparsers.add_parser("seed", help="Load the sample catalogue")

    args = parser.parse_args(argv)

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
