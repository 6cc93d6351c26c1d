#!/usr/bin/env python3
"""
Database initialization script.
Run this to create all database tables and, optionally, an admin account:

    python -m task_manager.init_db --admin-username root --admin-email root@example.com
"""

import argparse
import logging
import os
import sys
from getpass import getpass
from pathlib import Path

# Ensure we can find the local.env file
if not os.getenv("ENV_FILE"):
    env_file = Path(__file__).parent.parent / "local.env"
    if env_file.exists():
        os.environ["ENV_FILE"] = str(env_file)

logger = logging.getLogger("task_manager.init_db")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Create the task manager schema")
    parser.add_argument("--admin-username", help="create an admin account with this username")
    parser.add_argument("--admin-email", help="email for the admin account")
    return parser.parse_args(argv)


def create_admin(username: str, email: str, password: str):
    from sqlmodel import Session

    from task_manager.configs.database import engine
    from task_manager.models import UserRole
    from task_manager.services.user_service import create_user

    with Session(engine) as session:
        return create_user(session, username, email, password, role=UserRole.admin)


def main(argv=None):
    """Initialize the database schema."""
    args = parse_args(argv)
    if bool(args.admin_username) != bool(args.admin_email):
        raise SystemExit("--admin-username and --admin-email must be given together")

    from task_manager.configs.logging_config import setup_logging
    setup_logging("INFO")

    try:
        from sqlmodel import text
        from task_manager.configs.database import engine, init_db

        logger.info("Environment file: %s", os.getenv("ENV_FILE", "Not set"))
        logger.info("Testing database connection...")
        with engine.connect() as connection:
            connection.execute(text("SELECT 1"))
        logger.info("Database connection successful")

        init_db()
        logger.info("Database schema created successfully")
    except Exception:
        logger.exception("Error initializing database")
        sys.exit(1)

    if args.admin_username:
        password = getpass("Admin password: ")
        if len(password) < 6:
            raise SystemExit("Password must be at least 6 characters")
        if password != getpass("Repeat password: "):
            raise SystemExit("Passwords do not match")
        from task_manager.errors import DuplicateUser
        try:
            user = create_admin(args.admin_username, args.admin_email, password)
        except DuplicateUser:
            raise SystemExit("User already exists")
        logger.info("Admin %s created (id=%s)", user.username, user.id)


if __name__ == "__main__":
    main()
