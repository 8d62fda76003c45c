"""Datastore port (interface)."""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from domain.user.core.value_objects.entity_key import EntityKey


class IDatastore(ABC):
    """Datastore interface for keyed records.

    Minimal capability set the user service needs from a managed NoSQL
    store: keyed get/put/delete and an unfiltered query by kind. Records are
    flat property dicts.

    Every method takes an optional ``session``: the caller's execution
    scope, passed through untouched to the underlying driver. Implementations
    must not translate driver errors; they reach the caller unchanged.

    Examples:
        >>> # Implementation example (not actual usage)
        >>> class MongoDatastore(IDatastore):
        ...     async def get(self, key, session=None):
        ...         # Read from MongoDB
        ...         pass
    """

    @abstractmethod
    async def get(self, key: EntityKey, session: Optional[Any] = None) -> Optional[Dict[str, Any]]:
        """Load the record stored under key.

        Args:
            key: Record address
            session: Execution scope forwarded to the driver

        Returns:
            Record properties if found, None otherwise
        """
        pass

    @abstractmethod
    async def put(
        self,
        key: EntityKey,
        properties: Dict[str, Any],
        session: Optional[Any] = None,
    ) -> EntityKey:
        """Store properties under key.

        Args:
            key: Record address
            properties: Record properties
            session: Execution scope forwarded to the driver

        Returns:
            Key the record was stored under

        Note:
            Overwrites any existing record (upsert).
        """
        pass

    @abstractmethod
    async def delete(self, key: EntityKey, session: Optional[Any] = None) -> None:
        """Remove the record stored under key.

        Args:
            key: Record address
            session: Execution scope forwarded to the driver

        Note:
            Deleting a missing key is not an error.
        """
        pass

    @abstractmethod
    async def query_all(self, kind: str, session: Optional[Any] = None) -> List[Dict[str, Any]]:
        """Return every record of a kind.

        Args:
            kind: Entity kind to scan
            session: Execution scope forwarded to the driver

        Returns:
            Record properties, in datastore-defined order

        Note:
            Managed stores may index writes lazily, so a record written just
            before the query is not guaranteed to be part of the result.
        """
        pass
