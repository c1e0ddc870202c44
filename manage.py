#!/usr/bin/env python3
"""
Management commands for the car marketplace.
Creates and drops tables, seeds demo data and issues tokens.
"""

import asyncio
import sys
import argparse
import logging
from datetime import timedelta

from carmarket.config import settings
from carmarket.database import AsyncSessionLocal, create_tables, drop_tables, close_db_connection
from carmarket.services.data_client import DataClient
from carmarket.services.seeding import SeedBootstrap, SessionFlag
from carmarket.utils.auth import Identity, create_access_token, create_api_key

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


class ManagementCommands:
    """Database and token management."""

    async def create_tables(self) -> None:
        await create_tables()
        await close_db_connection()

    async def drop_tables(self) -> None:
        await drop_tables()
        await close_db_connection()

    async def seed_database(self) -> None:
        """Seed an empty database with the demo sellers and cars."""
        await create_tables()
        async with AsyncSessionLocal() as session:
            client = DataClient(session, Identity.owner(settings.seed_owner))
            state = await SeedBootstrap(client, SessionFlag({})).run()
        await close_db_connection()

        if state.error:
            raise RuntimeError(state.error)
        if state.seeded:
            logger.info(f"Seeded {state.sellers_created} sellers and {state.cars_created} cars")
        else:
            logger.info("Database already has cars, nothing to seed")

    def issue_api_key(self, days: int) -> str:
        return create_api_key(expires_days=days)

    def issue_token(self, subject: str, email: str, minutes: int) -> str:
        return create_access_token(subject, email=email, expires_delta=timedelta(minutes=minutes))


def main():
    """Main CLI interface."""
    parser = argparse.ArgumentParser(description="Car marketplace management")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create-tables", help="Create all database tables")

    drop_parser = subparsers.add_parser("drop-tables", help="Drop all database tables (development only)")
    drop_parser.add_argument("--confirm", action="store_true", help="Confirm dropping tables")

    subparsers.add_parser("seed", help="Seed an empty database with demo data")

    api_key_parser = subparsers.add_parser("issue-api-key", help="Issue a guest API key")
    api_key_parser.add_argument(
        "--days", type=int, default=settings.api_key_expire_days, help="Lifetime in days"
    )

    token_parser = subparsers.add_parser("issue-token", help="Issue an owner access token")
    token_parser.add_argument("subject", help="Owner identifier")
    token_parser.add_argument("--email", default=None, help="Owner email")
    token_parser.add_argument(
        "--minutes", type=int, default=settings.access_token_expire_minutes, help="Lifetime in minutes"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    commands = ManagementCommands()

    try:
        if args.command == "create-tables":
            asyncio.run(commands.create_tables())

        elif args.command == "drop-tables":
            if not args.confirm:
                print("Dropping tables requires --confirm flag")
                return
            asyncio.run(commands.drop_tables())

        elif args.command == "seed":
            asyncio.run(commands.seed_database())

        elif args.command == "issue-api-key":
            print(commands.issue_api_key(args.days))

        elif args.command == "issue-token":
            print(commands.issue_token(args.subject, args.email, args.minutes))

    except Exception as e:
        logger.error(f"Command failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
