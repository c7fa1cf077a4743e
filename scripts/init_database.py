#!/usr/bin/env python3
"""
Database Initialization Script

Run this script to create the tracker database and take a first backup.
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.append(str(Path(__file__).parent.parent))

from config.database import configure_database, init_database, backup_database


def main():
    """Initialize the database and create a backup."""
    print("🚀 Initializing Deadline Tracker Database...")
    print("=" * 50)

    try:
        configure_database()
        init_database()
        print("✅ Database initialized successfully!")

        backup_path = backup_database()
        if backup_path:
            print(f"✅ Initial backup created: {backup_path}")
        else:
            print("⚠️  Could not create initial backup")

        print("\n📊 Database Structure:")
        print("   - users: Accounts with hashed passwords")
        print("   - reminders: Dated reminders, one owner each")
        print("   - reminder_notified_days: Days the nudge sweep has recorded")

    except Exception as e:
        print(f"❌ Error initializing database: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
