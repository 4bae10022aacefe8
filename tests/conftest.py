"""
Shared fixtures: an in-memory DocumentStore and a TestClient wired to it.
"""
import copy
import os

# Cheap hashing and no real MongoDB during tests; must precede app imports.
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("SEED_CATALOG", "false")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from internship_portal.api.deps import get_store
from internship_portal.core.errors import ConflictError
from internship_portal.db.mongodb import COLLECTIONS
from internship_portal.db.store import DocumentStore
from internship_portal.main import app
from internship_portal.services.catalog import DEFAULT_INTERNSHIPS
from internship_portal.services.mongo_service import InternshipService, new_id


class InMemoryDocumentStore(DocumentStore):
    """DocumentStore over plain dicts. Equality queries only."""

    def __init__(self):
        self.collections = {}

    def _docs(self, collection):
        return self.collections.setdefault(collection, [])

    @staticmethod
    def _matches(doc, query):
        return all(doc.get(key) == value for key, value in query.items())

    def find_one(self, collection, query):
        for doc in self._docs(collection):
            if self._matches(doc, query):
                return copy.deepcopy(doc)
        return None

    def find(self, collection, query, sort=None):
        docs = [copy.deepcopy(d) for d in self._docs(collection) if self._matches(d, query)]
        for field, direction in reversed(list(sort or [])):
            docs.sort(key=lambda d: d.get(field), reverse=direction < 0)
        return docs

    def insert_one(self, collection, document):
        doc = copy.deepcopy(document)
        doc.setdefault("_id", new_id())
        if any(d["_id"] == doc["_id"] for d in self._docs(collection)):
            raise ConflictError("Duplicate key")
        if collection == COLLECTIONS["users"] and any(
            d.get("email") == doc.get("email") for d in self._docs(collection)
        ):
            raise ConflictError("Duplicate key")
        self._docs(collection).append(doc)
        return doc["_id"]

    def update_one(self, collection, query, values, upsert=False, insert_defaults=None):
        for doc in self._docs(collection):
            if self._matches(doc, query):
                doc.update(copy.deepcopy(values))
                return copy.deepcopy(doc)
        if not upsert:
            return None
        doc = {**query, **copy.deepcopy(values), **copy.deepcopy(insert_defaults or {})}
        self.insert_one(collection, doc)
        return copy.deepcopy(self.find_one(collection, {"_id": doc["_id"]}))

    def delete_one(self, collection, query):
        docs = self._docs(collection)
        for i, doc in enumerate(docs):
            if self._matches(doc, query):
                del docs[i]
                return True
        return False

    def delete_many(self, collection, query):
        docs = self._docs(collection)
        kept = [d for d in docs if not self._matches(d, query)]
        removed = len(docs) - len(kept)
        self.collections[collection] = kept
        return removed

    def count(self, collection, query):
        return sum(1 for d in self._docs(collection) if self._matches(d, query))

    def ping(self):
        return True


@pytest.fixture
def store():
    store = InMemoryDocumentStore()
    InternshipService(store).seed(DEFAULT_INTERNSHIPS)
    return store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    # no context manager: startup (real MongoDB indexes) is not run
    yield TestClient(app)
    app.dependency_overrides.clear()


REGISTRATION = {
    "firstName": "Asha",
    "lastName": "Verma",
    "email": "asha@example.com",
    "phone": "9876543210",
    "aadhaarNumber": "123412341234",
    "password": "secret123",
}


@pytest.fixture
def registered(client):
    """Register a user; returns (user_id, auth headers)."""
    response = client.post("/api/register", json=REGISTRATION)
    assert response.status_code == 201
    body = response.json()
    return body["user"]["id"], {"Authorization": f"Bearer {body['token']}"}
