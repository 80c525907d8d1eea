"""Create the database tables."""

import asyncio

from eventreg.config import settings
from eventreg.database import create_tables, dispose_engine
from eventreg.models import Submission  # noqa: F401  registers the table


async def init():
    """Create tables for all ORM models."""
    print(f"  Database: {settings.database_url.rsplit('@', 1)[-1]}")
    await create_tables()
    await dispose_engine()
    print("\nTables created!")


if __name__ == "__main__":
    asyncio.run(init())
