#!/usr/bin/env python3
"""
Management CLI commands for the signup API.

Usage:
    python -m src.commands.management <command> [args...]

Commands:
    init-db                 - Create the signups table if it does not exist
    stats                   - Show the total number of signups
    list-signups [limit]    - Show the latest signups (default 10)
    help                    - Show this help message

Examples:
    python -m src.commands.management init-db
    python -m src.commands.management list-signups 25
"""

import asyncio
import sys
import logging

from src.core.config import settings
from src.core.database import AsyncSessionLocal, create_schema, database_host, engine
from src.repositories.unit_of_work import SqlAlchemyUnitOfWork
from src.services.signup_service import SignupService

# Configure logging for CLI
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)


async def main(argv=None) -> int:
    """Main entry point for management commands. Returns the exit status."""
    argv = sys.argv[1:] if argv is None else argv
    if not argv:
        print_help()
        return 1

    command = argv[0].lower()

    try:
        if command in ("help", "--help", "-h"):
            print_help()
            return 0
        elif command == "init-db":
            return await handle_init_db()
        elif command == "stats":
            return await handle_stats()
        elif command == "list-signups":
            return await handle_list_signups(argv[1:])
        else:
            print(f"Unknown command: {command}")
            print_help()
            return 1
    finally:
        await engine.dispose()


async def handle_init_db() -> int:
    """Handle the init-db command."""
    print(f"Creating schema on {database_host(settings.DATABASE_URL)}...")
    try:
        await create_schema()
    except Exception as e:
        print(f"Error: could not create schema: {e}")
        return 1
    print("Schema ready.")
    return 0


async def handle_stats() -> int:
    """Handle the stats command."""
    async with AsyncSessionLocal() as session:
        service = SignupService(SqlAlchemyUnitOfWork(session))
        total = await service.count_signups()
    print(f"Total signups: {total}")
    return 0


async def handle_list_signups(args) -> int:
    """Handle the list-signups command."""
    limit = 10
    if args:
        try:
            limit = int(args[0])
        except ValueError:
            print(f"Error: '{args[0]}' is not a valid limit (must be an integer)")
            return 1
        if limit < 1:
            print("Error: limit must be at least 1")
            return 1

    async with AsyncSessionLocal() as session:
        service = SignupService(SqlAlchemyUnitOfWork(session))
        signups = await service.get_latest_signups(limit)

    if not signups:
        print("No signups yet.")
        return 0

    for signup in signups:
        created = signup.created_at.isoformat() if signup.created_at else "-"
        print(f"{signup.id:>6}  {created:<32}  {signup.name}  <{signup.email}>")
    return 0


def print_help():
    """Print help message."""
    print(__doc__)


if __name__ == "__main__":
    sys.exit(asyncio.run(main()))
