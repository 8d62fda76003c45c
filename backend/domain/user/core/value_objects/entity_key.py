"""EntityKey value object."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EntityKey:
    """Address of a single stored record.

    A key is a (kind, name) pair: kind groups records of the same entity
    type, name identifies one record within the kind.

    Examples:
        >>> key = EntityKey("User", "pedro@pedrocelso.com.br")
        >>> str(key)
        "User('pedro@pedrocelso.com.br')"
    """

    kind: str
    name: str

    def __post_init__(self) -> None:
        """Validate key parts."""
        if not self.kind:
            raise ValueError("EntityKey kind cannot be empty")
        if not self.name:
            raise ValueError("EntityKey name cannot be empty")

    def __str__(self) -> str:
        return f"{self.kind}('{self.name}')"
