# scripts/setup/init_db.py
"""
Initialize database for the SQL storage backend: creates all tables.
Run once before first launch with STORAGE_BACKEND=sql.
Usage: python scripts/setup/init_db.py [--seed]
"""

import argparse
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from sqlalchemy import inspect, text

from rentaldesk.database import SessionLocal, create_tables, engine
from rentaldesk.config import settings
from rentaldesk.repository import RentalRepository
from rentaldesk.seed import seed_demo_data
from rentaldesk.storage.sql import SqlStore


def main():
    parser = argparse.ArgumentParser(description="Create RentalDesk tables")
    parser.add_argument("--seed", action="store_true", help="load the demo fleet if the tables are empty")
    args = parser.parse_args()

    print("RentalDesk DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except Exception as e:
        print(f"Cannot connect to database: {e}")
        sys.exit(1)

    print("\nCreating tables...")
    create_tables()

    tables = sorted(inspect(engine).get_table_names())
    print(f"\nTables in database ({len(tables)} total):")
    for t in tables:
        print(f"   - {t}")

    if args.seed:
        seeded = seed_demo_data(RentalRepository(SqlStore(SessionLocal)))
        print("\nDemo data loaded" if seeded else "\nTables not empty, demo data skipped")

    print("\nDatabase ready! Start the backend with:")
    print("   STORAGE_BACKEND=sql uvicorn rentaldesk.main:app --port 5000 --reload")


if __name__ == "__main__":
    main()
