#!/usr/bin/env python3
"""
Seed sample users into the configured datastore.

Writes users named "Pedro <i>" with email "pedro@pedrocelso.com.br<i>"
through UserService, then reports how many users the datastore lists.

Usage:
    cd backend && python -m scripts.seed_users --count 5
"""

import argparse
import asyncio
import sys
from pathlib import Path
from typing import List, Optional

import structlog
from dotenv import load_dotenv

from application.request_context import RequestContext
from application.user.consistency import wait_for_users
from application.user.user_service import UserService
from domain.user.core.entities.user import User
from infrastructure.logging_config import configure_logging
from infrastructure.user.datastore_factory import create_datastore
from infrastructure.user.mongo_datastore import MongoDatastore

logger = structlog.get_logger(__name__)

SAMPLE_EMAIL = "pedro@pedrocelso.com.br"


def sample_users(count: int) -> List[User]:
    """Build ``count`` sample users with distinct emails."""
    return [User(name=f"Pedro {i}", email=f"{SAMPLE_EMAIL}{i}") for i in range(count)]


async def seed(ctx: RequestContext, count: int) -> int:
    """Write sample users and return how many users are visible afterwards."""
    service = UserService()
    for user in sample_users(count):
        await service.create(ctx, user)

    users = await wait_for_users(service, ctx, expected=count)
    logger.info("Seeded users", written=count, visible=len(users))
    return len(users)


async def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("--count", type=int, default=5, help="number of users to write")
    args = parser.parse_args(argv)

    datastore = create_datastore()
    try:
        await seed(RequestContext(datastore=datastore), args.count)
    except Exception as e:
        logger.error("Seeding failed", error=str(e))
        return 1
    finally:
        if isinstance(datastore, MongoDatastore):
            await datastore.close()

    return 0


if __name__ == "__main__":
    env_path = Path(__file__).parent.parent / ".env"
    if env_path.exists():
        load_dotenv(env_path)
    configure_logging()

    exit_code = asyncio.run(main())
    sys.exit(exit_code)
