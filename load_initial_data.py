#!/usr/bin/env python3
"""
Script for loading the Country, City and Airport sheets into the database
Run from project root: python load_initial_data.py [path/to/Database.xlsx]
"""
import sys

from airport_lookup.config import settings
from airport_lookup.database import Database
from airport_lookup.services.data_loader import WorkbookError, run_initial_load


def main():
    """Main function"""
    print("🚀 Starting initial data load...")

    data_file = sys.argv[1] if len(sys.argv) > 1 else settings.data_file

    database = Database(settings.db_url)

    try:
        print("Creating database tables...")
        database.create_tables()
        print("✅ Tables created successfully")

        print(f"📊 Loading {data_file}...")
        result = run_initial_load(database, data_file, reset=settings.reset_on_load)

    except WorkbookError as e:
        print(f"❌ {e}")
        return 1

    finally:
        database.dispose()

    for sheet in result.sheets:
        print(
            f"   {sheet.sheet}: {sheet.records_inserted} inserted, "
            f"{sheet.records_skipped_error} skipped ({sheet.success_rate:.1f}% inserted)"
        )
        for error in sheet.errors[:10]:
            print(f"     - {error}")

    print(f"\n🎉 Loading completed! Total records: {result.records_inserted}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
