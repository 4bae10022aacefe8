"""
Storage port.

Every collection service talks to a DocumentStore instead of a global
database handle, so the backing store can be swapped (MongoDB in
production, an in-memory fake in tests).

Queries are plain equality filters: {"field": value, ...}.
Documents carry a string "_id".
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Sequence, Tuple

Document = Dict[str, Any]
SortSpec = Sequence[Tuple[str, int]]


class DocumentStore(ABC):

    @abstractmethod
    def find_one(self, collection: str, query: Document) -> Optional[Document]:
        """Return the first document matching query, or None."""

    @abstractmethod
    def find(self, collection: str, query: Document, sort: Optional[SortSpec] = None) -> List[Document]:
        """Return all documents matching query. sort uses (field, 1 | -1) pairs."""

    @abstractmethod
    def insert_one(self, collection: str, document: Document) -> str:
        """Insert a document and return its _id. Raises ConflictError on duplicate keys."""

    @abstractmethod
    def update_one(
        self,
        collection: str,
        query: Document,
        values: Document,
        upsert: bool = False,
        insert_defaults: Optional[Document] = None,
    ) -> Optional[Document]:
        """
        Set `values` on the first document matching query.

        With upsert=True a missing document is created from query + values
        (+ insert_defaults, applied only on insert). Returns the document
        after the update, or None when nothing matched and upsert is off.
        """

    @abstractmethod
    def delete_one(self, collection: str, query: Document) -> bool:
        """Delete the first matching document. True if one was deleted."""

    @abstractmethod
    def delete_many(self, collection: str, query: Document) -> int:
        """Delete all matching documents, return how many."""

    @abstractmethod
    def count(self, collection: str, query: Document) -> int:
        pass

    @abstractmethod
    def ping(self) -> bool:
        """True if the store is reachable."""
