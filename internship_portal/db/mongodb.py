"""
MongoDB Connection Utility

MongoDB stores:
- Registered users
- Insurance records
- Saved internship preferences (one per user)
- The internship catalog used for recommendations

MongoDocumentStore adapts a pymongo Database to the DocumentStore port
and translates driver failures into domain errors.
"""
import logging
from typing import List, Optional

from pymongo import ASCENDING, MongoClient, ReturnDocument
from pymongo.database import Database
from pymongo.errors import ConnectionFailure, DuplicateKeyError, PyMongoError

from internship_portal.core.config import get_settings
from internship_portal.core.errors import ConflictError, StorageUnavailableError
from internship_portal.db.store import Document, DocumentStore, SortSpec

log = logging.getLogger(__name__)

settings = get_settings()

# Global client (connection pooling handled internally by pymongo)
_client: MongoClient = None
_db: Database = None
_store: "MongoDocumentStore" = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(
            settings.mongodb_uri,
            serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
        )
    return _client


def get_mongo_db() -> Database:
    """Get the portal database"""
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "insurance": "insurances",
    "preferences": "internship_preferences",
    "internships": "internships",
}


class MongoDocumentStore(DocumentStore):
    """DocumentStore backed by a pymongo Database."""

    def __init__(self, db: Database):
        self.db = db

    def _run(self, operation, *args, **kwargs):
        try:
            return operation(*args, **kwargs)
        except DuplicateKeyError as e:
            raise ConflictError("Duplicate key") from e
        except ConnectionFailure as e:
            log.error("MongoDB unreachable: %s", e)
            raise StorageUnavailableError() from e

    def find_one(self, collection: str, query: Document) -> Optional[Document]:
        return self._run(self.db[collection].find_one, query)

    def find(self, collection: str, query: Document, sort: Optional[SortSpec] = None) -> List[Document]:
        def _find():
            cursor = self.db[collection].find(query)
            if sort:
                cursor = cursor.sort(list(sort))
            return list(cursor)
        return self._run(_find)

    def insert_one(self, collection: str, document: Document) -> str:
        result = self._run(self.db[collection].insert_one, document)
        return str(result.inserted_id)

    def update_one(self, collection, query, values, upsert=False, insert_defaults=None):
        update = {"$set": values}
        if insert_defaults:
            update["$setOnInsert"] = insert_defaults
        return self._run(
            self.db[collection].find_one_and_update,
            query,
            update,
            upsert=upsert,
            return_document=ReturnDocument.AFTER,
        )

    def delete_one(self, collection: str, query: Document) -> bool:
        result = self._run(self.db[collection].delete_one, query)
        return result.deleted_count > 0

    def delete_many(self, collection: str, query: Document) -> int:
        result = self._run(self.db[collection].delete_many, query)
        return result.deleted_count

    def count(self, collection: str, query: Document) -> int:
        return self._run(self.db[collection].count_documents, query)

    def ping(self) -> bool:
        try:
            self.db.client.admin.command("ping")
            return True
        except PyMongoError as e:
            log.warning("MongoDB ping failed: %s", e)
            return False


def get_document_store() -> MongoDocumentStore:
    """Process-wide store over the shared client."""
    global _store
    if _store is None:
        _store = MongoDocumentStore(get_mongo_db())
    return _store


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    return get_document_store().ping()


def init_mongo_indexes():
    """
    Create indexes. Call this once during app startup.
    """
    db = get_mongo_db()

    # Email is the login key; unique index also catches racing registrations
    db[COLLECTIONS["users"]].create_index("email", unique=True)

    db[COLLECTIONS["insurance"]].create_index("user_id")

    # One saved preference record per user
    db[COLLECTIONS["preferences"]].create_index("user_id", unique=True)

    db[COLLECTIONS["internships"]].create_index([
        ("is_active", ASCENDING),
        ("sequence", ASCENDING)
    ])

    log.info("MongoDB indexes created successfully")
