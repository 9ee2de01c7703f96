#!/usr/bin/env python
"""
Create (or upgrade) the supplier directory database.

Creates every table, seeds categories and feature flags from
config/directory.yaml and, with --demo, loads a handful of demo suppliers.

Usage:
    python scripts/init_database.py [options]

Options:
    --db PATH           Custom database path
    --demo              Load demo suppliers
    --log-level LEVEL   Logging level
    --log-file          Also write a dated log file under logs/
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from config import config
from config.logging_config import daily_log_file, get_logger, setup_logging
from src.database import get_connection, get_table_counts, load_demo_suppliers


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for database initialization."""
    parser = argparse.ArgumentParser(
        description="Initialize the supplier directory database",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--db",
        type=Path,
        default=config.database.path,
        help="Custom database path",
    )
    parser.add_argument(
        "--demo",
        action="store_true",
        help="Load demo suppliers",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="Logging level",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write a dated log file under logs/",
    )
    args = parser.parse_args(argv)

    setup_logging(
        log_level=args.log_level,
        log_file=daily_log_file("init_database") if args.log_file else None,
    )
    logger = get_logger("init_database")

    logger.info(f"Database path: {args.db}")

    try:
        with get_connection(args.db, initialize=True) as conn:
            if args.demo:
                load_demo_suppliers(conn)

            logger.info("Table counts:")
            for table, count in get_table_counts(conn).items():
                logger.info(f"  {table}: {count:,}")
    except Exception as e:
        logger.error(f"Database initialization failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
