#!/usr/bin/env python3
"""
Export the saved student roster to an Excel workbook.
"""
import logging

from config import DATA_FILE, LOG_LEVEL, LOG_FORMAT
from excel_handler import ExcelHandler
from roster_manager import RosterManager


def main():
    logging.basicConfig(level=LOG_LEVEL, format=LOG_FORMAT)

    manager = RosterManager()
    if not manager.load(DATA_FILE):
        print(f"❌ Could not read '{DATA_FILE}'")
        return 1

    filepath = ExcelHandler().export_roster(manager.get_students())
    if filepath is None:
        print("❌ Export failed, see log for details")
        return 1

    print(f"✅ Exported {len(manager)} students to '{filepath}'")
    if manager.skipped_lines:
        print(f"⚠️  Skipped {len(manager.skipped_lines)} malformed lines in '{DATA_FILE}'")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
