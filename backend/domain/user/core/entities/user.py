"""User entity."""

from dataclasses import dataclass


@dataclass
class User:
    """User record.

    Email is the natural key of the record: it addresses the stored entity
    and must be non-empty for the user to be persisted. Name is a free-form
    display string.

    Examples:
        >>> user = User(name="Pedro Costa", email="pedro@pedrocelso.com.br")
        >>> user.has_email()
        True
        >>> User(name="Pedro Costa").has_email()
        False
    """

    name: str = ""
    email: str = ""

    def has_email(self) -> bool:
        """Check that the user carries a usable key."""
        return bool(self.email)
