"""MongoDB datastore implementation."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from motor.motor_asyncio import (
    AsyncIOMotorClient,
    AsyncIOMotorCollection,
    AsyncIOMotorDatabase,
)

from domain.user.core.ports.datastore import IDatastore
from domain.user.core.value_objects.entity_key import EntityKey

logger = logging.getLogger(__name__)


class MongoDatastore(IDatastore):
    """MongoDB implementation of the datastore port.

    Storage design:
    - One collection per kind (kind "User" -> collection "User")
    - Document _id is the key name; the other fields are the properties
    - put is a full-document upsert, so stored fields never linger after
      being dropped from a record

    The session argument is forwarded to every driver call, so callers can
    run operations inside a Motor ClientSession. Driver errors are logged
    and re-raised unchanged.

    Example:
        >>> from motor.motor_asyncio import AsyncIOMotorClient
        >>> client = AsyncIOMotorClient("mongodb://localhost:27017")
        >>> datastore = MongoDatastore(client.user_records, client=client)
        >>> await datastore.put(EntityKey("User", "a@b.c"), {"Name": "A", "Email": "a@b.c"})
    """

    def __init__(
        self,
        db: AsyncIOMotorDatabase[Dict[str, Any]],
        client: Optional[AsyncIOMotorClient[Dict[str, Any]]] = None,
    ):
        """
        Initialize datastore with MongoDB database.

        Args:
            db: Motor database holding one collection per kind
            client: Owning client, closed by close(). Leave None when the
                caller manages the client lifecycle.
        """
        self.db = db
        self._client = client

        logger.info(f"Initialized {self.__class__.__name__} for database '{db.name}'")

    def collection(self, kind: str) -> AsyncIOMotorCollection[Dict[str, Any]]:
        """Get the collection storing records of kind."""
        return self.db[kind]

    async def get(self, key: EntityKey, session: Optional[Any] = None) -> Optional[Dict[str, Any]]:
        try:
            document = await self.collection(key.kind).find_one({"_id": key.name}, session=session)
        except Exception as e:
            logger.error(f"Error in get: key={key}, error={e}")
            raise

        if document is None:
            return None
        return self._to_properties(document)

    async def put(
        self,
        key: EntityKey,
        properties: Dict[str, Any],
        session: Optional[Any] = None,
    ) -> EntityKey:
        document = dict(properties)
        document["_id"] = key.name

        try:
            await self.collection(key.kind).replace_one(
                {"_id": key.name}, document, upsert=True, session=session
            )
        except Exception as e:
            logger.error(f"Error in put: key={key}, error={e}")
            raise

        return key

    async def delete(self, key: EntityKey, session: Optional[Any] = None) -> None:
        try:
            result = await self.collection(key.kind).delete_one({"_id": key.name}, session=session)
        except Exception as e:
            logger.error(f"Error in delete: key={key}, error={e}")
            raise

        if result.deleted_count == 0:
            logger.debug(f"Delete matched no record: key={key}")

    async def query_all(self, kind: str, session: Optional[Any] = None) -> List[Dict[str, Any]]:
        try:
            cursor = self.collection(kind).find({}, session=session)
            documents = await cursor.to_list(length=None)
        except Exception as e:
            logger.error(f"Error in query_all: kind={kind}, error={e}")
            raise

        return [self._to_properties(document) for document in documents]

    async def close(self) -> None:
        """Close MongoDB connection if this datastore owns the client."""
        if self._client is not None:
            self._client.close()
            logger.info(f"Closed connection for {self.__class__.__name__}")

    @staticmethod
    def _to_properties(document: Dict[str, Any]) -> Dict[str, Any]:
        """Strip the MongoDB _id from a document."""
        return {field: value for field, value in document.items() if field != "_id"}
