"""User service.

CRUD operations on User records over the IDatastore port. The service is
stateless: the datastore and execution scope arrive with each call in a
RequestContext.
"""

from typing import Any, Dict, List, Optional

import structlog

from application.request_context import RequestContext
from domain.user.core.entities.user import User
from domain.user.core.exceptions.user_errors import (
    InvalidUserDataError,
    UserNotFoundError,
)
from domain.user.core.value_objects.entity_key import EntityKey

logger = structlog.get_logger(__name__)


class UserService:
    """Create, read, list, update and delete users.

    Users are stored under kind ``"User"`` keyed by email, with ``Name`` and
    ``Email`` properties. Writes are upserts: create and update both
    overwrite whatever is stored under the key.

    Datastore errors are not caught; they reach the caller unchanged.

    Examples:
        >>> service = UserService()
        >>> ctx = RequestContext(datastore=InMemoryDatastore())
        >>> await service.create(ctx, User("Pedro Costa", "pedro@pedrocelso.com.br"))
        User(name='Pedro Costa', email='pedro@pedrocelso.com.br')
        >>> await service.get_by_email(ctx, "pedro@pedrocelso.com.br")
        User(name='Pedro Costa', email='pedro@pedrocelso.com.br')
    """

    KIND = "User"

    async def create(self, ctx: RequestContext, user: Optional[User]) -> User:
        """Persist a new user.

        Args:
            ctx: Request context
            user: User to store

        Returns:
            Persisted user

        Raises:
            InvalidUserDataError: If user is None or has no email
        """
        return await self._save(ctx, user, operation="create")

    async def get_by_email(self, ctx: RequestContext, email: str) -> User:
        """Load a user by email.

        Args:
            ctx: Request context
            email: User key

        Returns:
            Stored user

        Raises:
            InvalidUserDataError: If email is empty
            UserNotFoundError: If no user is stored under email
        """
        self._require_email(email, operation="get_by_email")

        properties = await ctx.datastore.get(self.key_for(email), session=ctx.session)
        if properties is None:
            logger.info("User not found", email=email)
            raise UserNotFoundError(email)

        return self.from_properties(properties)

    async def get_users(self, ctx: RequestContext) -> List[User]:
        """List every stored user.

        Order is whatever the datastore query returns. Recently written
        users may be missing until the datastore has indexed them.
        """
        records = await ctx.datastore.query_all(self.KIND, session=ctx.session)
        users = [self.from_properties(properties) for properties in records]
        logger.debug("Listed users", count=len(users))
        return users

    async def update(self, ctx: RequestContext, user: Optional[User]) -> User:
        """Overwrite the user stored under user.email.

        No existence check is made, so updating a missing user creates it.

        Raises:
            InvalidUserDataError: If user is None or has no email
        """
        return await self._save(ctx, user, operation="update")

    async def delete(self, ctx: RequestContext, email: str) -> None:
        """Remove the user stored under email.

        Deleting a user that does not exist succeeds.

        Raises:
            InvalidUserDataError: If email is empty
        """
        self._require_email(email, operation="delete")

        await ctx.datastore.delete(self.key_for(email), session=ctx.session)
        logger.info("Deleted user", email=email)

    async def _save(self, ctx: RequestContext, user: Optional[User], operation: str) -> User:
        if user is None or not user.has_email():
            logger.warning("Rejected invalid user data", operation=operation)
            raise InvalidUserDataError()

        await ctx.datastore.put(
            self.key_for(user.email),
            self.to_properties(user),
            session=ctx.session,
        )
        logger.info("Saved user", operation=operation, email=user.email)

        return User(name=user.name, email=user.email)

    def _require_email(self, email: str, operation: str) -> None:
        if not email:
            logger.warning("Rejected invalid user data", operation=operation)
            raise InvalidUserDataError()

    @classmethod
    def key_for(cls, email: str) -> EntityKey:
        """Datastore key of the user with the given email."""
        return EntityKey(cls.KIND, email)

    @staticmethod
    def to_properties(user: User) -> Dict[str, Any]:
        """Encode a user as datastore properties."""
        return {"Name": user.name, "Email": user.email}

    @staticmethod
    def from_properties(properties: Dict[str, Any]) -> User:
        """Decode datastore properties into a user."""
        return User(
            name=properties.get("Name", ""),
            email=properties.get("Email", ""),
        )
