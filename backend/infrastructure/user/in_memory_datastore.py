"""In-memory datastore for testing."""

from typing import Any, Dict, List, Optional

from domain.user.core.ports.datastore import IDatastore
from domain.user.core.value_objects.entity_key import EntityKey


class InMemoryDatastore(IDatastore):
    """In-memory implementation of the datastore port for testing.

    Stores copies of property dicts keyed by EntityKey, so callers cannot
    alter stored records through references they hold. Queries return
    records in insertion order and are immediately consistent. The session
    argument is accepted and ignored.

    Examples:
        >>> store = InMemoryDatastore()
        >>> key = await store.put(EntityKey("User", "a@b.c"), {"Name": "A", "Email": "a@b.c"})
        >>> await store.get(EntityKey("User", "a@b.c"))
        {'Name': 'A', 'Email': 'a@b.c'}
    """

    def __init__(self) -> None:
        """Initialize empty in-memory storage."""
        self._records: Dict[EntityKey, Dict[str, Any]] = {}

    async def get(self, key: EntityKey, session: Optional[Any] = None) -> Optional[Dict[str, Any]]:
        properties = self._records.get(key)
        if properties is None:
            return None
        return dict(properties)

    async def put(
        self,
        key: EntityKey,
        properties: Dict[str, Any],
        session: Optional[Any] = None,
    ) -> EntityKey:
        self._records[key] = dict(properties)
        return key

    async def delete(self, key: EntityKey, session: Optional[Any] = None) -> None:
        self._records.pop(key, None)

    async def query_all(self, kind: str, session: Optional[Any] = None) -> List[Dict[str, Any]]:
        return [dict(properties) for key, properties in self._records.items() if key.kind == kind]

    def clear(self) -> None:
        """Clear all records from memory.

        Useful for test cleanup.
        """
        self._records.clear()

    def count(self, kind: Optional[str] = None) -> int:
        """Get number of records stored, optionally for one kind only."""
        if kind is None:
            return len(self._records)
        return sum(1 for key in self._records if key.kind == kind)
