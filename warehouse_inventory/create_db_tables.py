#!/usr/bin/env python
# create_db_tables.py - Script to create the warehouse inventory tables

import sys
import logging
import argparse

from warehouse_inventory.db import db
from warehouse_inventory.models import Base
from warehouse_inventory.logging_setup import get_logger

def create_tables(drop_existing=False, connection_string=None):
    """Create database tables.

    Args:
        drop_existing: If True, drop existing tables before creating new ones
        connection_string: Optional database URL overriding the configuration

    Returns:
        True if tables were created successfully
    """
    logger = get_logger('create_tables')
    logger.info("Initializing database connection...")

    try:
        db.initialize(connection_string)

        if drop_existing:
            logger.info("Dropping existing tables...")
            db.drop_all_tables()
            logger.info("Existing tables dropped successfully.")

        logger.info("Creating database tables...")
        db.create_all_tables()
        logger.info(f"Created tables: {', '.join(sorted(Base.metadata.tables))}")

        return True

    except Exception as e:
        logger.exception(f"Error creating database tables: {str(e)}")
        return False

def main(argv=None):
    """Create database tables."""
    parser = argparse.ArgumentParser(description='Create warehouse inventory database tables')
    parser.add_argument('--drop', '-d', action='store_true', help='Drop existing tables before creating new ones')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable verbose logging')
    parser.add_argument('--url', help='Database URL (defaults to the configured DATABASE url)')

    args = parser.parse_args(argv)

    logger = get_logger('create_tables')
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    logger.info("Starting database table creation...")
    logger.info(f"Drop existing tables: {args.drop}")

    if create_tables(args.drop, args.url):
        logger.info("Database tables created successfully.")
        return 0

    logger.error("Failed to create database tables.")
    return 1

if __name__ == "__main__":
    sys.exit(main())
