#!/usr/bin/env python3
"""
Initialize the taxonomy tree database.

Creates the tables for storing built trees and their nodes.
"""
import argparse
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent))

from data.database import DatabaseManager


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Initialize taxonomy tree database'
    )
    parser.add_argument(
        '--database-url',
        type=str,
        default=None,
        help='Database URL (default: configured URL or sqlite:///taxonomy_tree.db)'
    )
    parser.add_argument(
        '--drop-existing',
        action='store_true',
        help='Drop existing tables before creating new ones (WARNING: destroys data!)'
    )

    args = parser.parse_args(argv)

    db_manager = DatabaseManager(args.database_url)

    print("=" * 60)
    print("Taxonomy Tree Database Initialization")
    print("=" * 60)
    print(f"Database URL: {db_manager.database_url}")
    print()

    if args.drop_existing:
        confirm = input("⚠️  Drop existing tables? This will DELETE ALL DATA! (yes/no): ")
        if confirm.lower() == 'yes':
            db_manager.drop_tables()
            print()
        else:
            print("Aborted.")
            return

    db_manager.create_tables()

    print("✓ Database initialized successfully!")
    print()
    print("Tables created:")
    print("  - hierarchy_trees")
    print("  - hierarchy_nodes")
    print()
    print("Store a tree with: python cli_workflow.py input.xlsx output.json --database-url <url>")
    print()


if __name__ == '__main__':
    main()
