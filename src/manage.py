"""Payment Factory database management CLI.

Creates and drops the schema backing the production overlay. With the
default memory providers both commands are no-ops.

Usage:
    PROTEAN_ENV=production python src/manage.py setup-db
    PROTEAN_ENV=production python src/manage.py drop-db
"""

import argparse
import sys


def _domain():
    from payment_factory.domain import payment_factory

    payment_factory.init()
    return payment_factory


def setup_database():
    from payment_factory.utils.db import setup_db

    print("Creating payment_factory database schema...")
    setup_db(_domain())
    print("Done.")


def drop_database():
    from payment_factory.utils.db import drop_db

    print("Dropping payment_factory database schema...")
    drop_db(_domain())
    print("Done.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Payment Factory database management")
    subparsers = parser.add_subparsers(dest="command", required=True)
    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    args = parser.parse_args(argv)

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
