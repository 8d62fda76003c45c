"""Datastore factory for environment-based selection.

This factory creates the appropriate datastore implementation based on
the USER_DATASTORE environment variable:
- "inmemory": InMemoryDatastore (for testing)
- "mongodb": MongoDatastore (for production)

Default: inmemory

No instance is cached here. Callers own the datastore they create and put
it in each RequestContext.
"""

from typing import Any, Dict

from motor.motor_asyncio import AsyncIOMotorClient

from domain.user.core.ports.datastore import IDatastore
from infrastructure.config import (
    get_datastore_backend,
    get_mongodb_database,
    get_mongodb_uri,
)
from infrastructure.user.in_memory_datastore import InMemoryDatastore
from infrastructure.user.mongo_datastore import MongoDatastore


def create_datastore() -> IDatastore:
    """Create datastore based on environment configuration.

    Returns:
        IDatastore: The configured datastore implementation

    Raises:
        ValueError: If the backend is unknown, or mongodb is selected
            without MONGODB_URI

    Environment Variables:
        USER_DATASTORE: "inmemory" | "mongodb" (default: inmemory)
        MONGODB_URI: MongoDB connection string (required for mongodb)
        MONGODB_DATABASE: Database name (default: user_records)
    """
    backend = get_datastore_backend()

    if backend == "mongodb":
        mongo_uri = get_mongodb_uri()
        if not mongo_uri:
            raise ValueError(
                "MONGODB_URI environment variable is required " "when USER_DATASTORE=mongodb"
            )

        client: AsyncIOMotorClient[Dict[str, Any]] = AsyncIOMotorClient(mongo_uri)
        return MongoDatastore(client[get_mongodb_database()], client=client)

    elif backend == "inmemory":
        return InMemoryDatastore()

    else:
        raise ValueError(
            f"Invalid USER_DATASTORE value: {backend}. " "Expected 'inmemory' or 'mongodb'"
        )
