"""Polling helper for eventually consistent user listings."""

import asyncio
import time
from typing import List

import structlog

from application.request_context import RequestContext
from application.user.user_service import UserService
from domain.user.core.entities.user import User

logger = structlog.get_logger(__name__)


async def wait_for_users(
    service: UserService,
    ctx: RequestContext,
    expected: int,
    timeout_s: float = 5.0,
    interval_s: float = 0.1,
) -> List[User]:
    """Poll get_users until at least ``expected`` users are visible.

    Managed datastores index writes asynchronously, so a list query issued
    right after a write can miss it. This retries the query instead of
    sleeping a fixed amount.

    Args:
        service: User service to query through
        ctx: Request context
        expected: Minimum number of users to wait for
        timeout_s: Give up after this many seconds
        interval_s: Delay between queries

    Returns:
        Result of the last query. May hold fewer than ``expected`` users
        if the timeout elapsed; callers assert on it.

    Examples:
        >>> users = await wait_for_users(service, ctx, expected=5)
        >>> len(users)
        5
    """
    deadline = time.monotonic() + timeout_s
    attempts = 0

    while True:
        users = await service.get_users(ctx)
        attempts += 1
        if len(users) >= expected or time.monotonic() >= deadline:
            break
        await asyncio.sleep(interval_s)

    if len(users) < expected:
        logger.warning(
            "Users not visible before timeout",
            expected=expected,
            visible=len(users),
            attempts=attempts,
        )
    return users
