"""
Database module - storage port and MongoDB adapter.
"""
from internship_portal.db.store import DocumentStore
from internship_portal.db.mongodb import get_document_store, get_mongo_db, test_mongo_connection

__all__ = [
    "DocumentStore",
    "get_document_store",
    "get_mongo_db",
    "test_mongo_connection"
]
