"""User domain exceptions."""


class UserDomainError(Exception):
    """Base exception for User domain errors."""

    pass


class InvalidUserDataError(UserDomainError):
    """User is missing or has no email."""

    MESSAGE = "error: invalid User data"

    def __init__(self) -> None:
        super().__init__(self.MESSAGE)


class UserNotFoundError(UserDomainError):
    """User was not found in the datastore."""

    def __init__(self, email: str):
        """Initialize with the email that was looked up.

        Args:
            email: Key of the missing user
        """
        self.email = email
        super().__init__(f"user '{email}' not found")
