"""Storefront database management CLI.

Creates and drops the database schemas of the ordering and catalogue
domains. Domains on the memory provider are skipped.

Usage:
    python src/manage.py setup-db                      # Create all tables
    python src/manage.py drop-db --domain ordering     # Drop one domain's tables
"""

import argparse
import sys

import structlog

logger = structlog.get_logger(__name__)

DOMAIN_NAMES = ["ordering", "catalogue"]


def _domains(names=None):
    from catalogue.domain import catalogue
    from ordering.domain import ordering

    all_domains = {"ordering": ordering, "catalogue": catalogue}
    return {name: all_domains[name] for name in names} if names else all_domains


def setup_databases(domains=None):
    """Create database schemas for the specified (or all) domains."""
    from shared.db import setup_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        providers = setup_db(domain)
        if providers:
            print(f"  {name} schema ready ({', '.join(providers)}).")
        else:
            print(f"  {name} uses no SQL provider, nothing to create.")

    print("Done.")


def drop_databases(domains=None):
    """Drop database schemas for the specified (or all) domains."""
    from shared.db import drop_db

    for name, domain in _domains(domains).items():
        print(f"Initializing {name} domain...")
        domain.init()
        providers = drop_db(domain)
        if providers:
            print(f"  {name} schema dropped ({', '.join(providers)}).")
        else:
            print(f"  {name} uses no SQL provider, nothing to drop.")

    print("Done.")


def main(argv=None):
    from shared.logging import configure_logging

    parser = argparse.ArgumentParser(description="Storefront database management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    setup_parser = subparsers.add_parser("setup-db", help="Create all database tables")
    setup_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to set up (default: all)",
    )

    drop_parser = subparsers.add_parser("drop-db", help="Drop all database tables")
    drop_parser.add_argument(
        "--domain",
        choices=DOMAIN_NAMES,
        nargs="*",
        help="Specific domain(s) to drop (default: all)",
    )

    args = parser.parse_args(argv)
    configure_logging()

    if args.command == "setup-db":
        setup_databases(args.domain)
    elif args.command == "drop-db":
        drop_databases(args.domain)
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
