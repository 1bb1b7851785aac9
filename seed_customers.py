#!/usr/bin/env python3
"""
Insert random sample customers into the customer SQLite database.

The schema is created if the database does not exist yet.  Customers
go through the same uniqueness check as API registrations, so running
the script twice never produces duplicate email addresses.

Usage:
    python seed_customers.py --count 10
    python seed_customers.py --db ./customer_manager_api/customers.db --count 5
"""

import argparse
import sys

from customer_manager_api.app.core.db import init_db
from customer_manager_api.app.core.logging_config import setup_logging
from customer_manager_api.app.core.seed import seed_customers
from customer_manager_api.app.repositories.customer_dao import CustomerSQLiteDataAccessService
from customer_manager_api.app.services.customer_service import CustomerService


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Seed random customers (SQLite).")
    ap.add_argument("--db", help="Path to SQLite DB file. Defaults to DATABASE_URL.")
    ap.add_argument("--count", type=int, default=1, help="Number of customers to create.")
    args = ap.parse_args(argv)

    if args.count < 1:
        print("[!] --count must be at least 1.", file=sys.stderr)
        return 1

    setup_logging()
    init_db(args.db)
    service = CustomerService(CustomerSQLiteDataAccessService(args.db))
    created = seed_customers(service, args.count)
    print(f"[+] Created {created} of {args.count} customers")
    return 0


if __name__ == "__main__":
    sys.exit(main())
