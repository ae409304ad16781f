#!/usr/bin/env python3
"""
Connection Check Script

Run this to verify MongoDB and the upload directory before starting the API.
Usage: python scripts/check_connections.py
"""
import os
import sys
sys.path.insert(0, '.')

from app.db.mongodb import test_mongo_connection, init_mongo_indexes
from app.core.config import get_settings


def main() -> int:
    settings = get_settings()
    print("=" * 50)
    print("EDUGUIDE - CONNECTION CHECK")
    print("=" * 50)

    ok = True

    print("\n[1] Checking MongoDB...")
    print(f"    Database: {settings.mongodb_db}")
    if test_mongo_connection():
        init_mongo_indexes()
        print("    ✅ MongoDB: CONNECTED (indexes ensured)")
    else:
        print("    ❌ MongoDB: FAILED")
        ok = False

    print("\n[2] Checking upload directory...")
    upload_dir = os.path.abspath(settings.upload_dir)
    os.makedirs(upload_dir, exist_ok=True)
    if os.access(upload_dir, os.W_OK):
        print(f"    ✅ Writable: {upload_dir}")
    else:
        print(f"    ❌ Not writable: {upload_dir}")
        ok = False

    print("\n" + "=" * 50)
    print("Connection check complete!")
    print("=" * 50)
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
