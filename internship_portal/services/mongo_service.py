"""
Document Services - CRUD operations for each collection.

Collections in this database:
1. users                  - Registered portal users
2. insurances             - Insurance records created on completion
3. internship_preferences - Last submitted preferences, one per user
4. internships            - Catalog scored by the recommendation engine

Each service receives the DocumentStore it works against, so routes get
them through dependencies and tests hand them an in-memory store.
"""

import logging
from datetime import datetime
from typing import Optional, List, Iterable
from bson import ObjectId

from internship_portal.core.errors import ConflictError
from internship_portal.db.mongodb import COLLECTIONS
from internship_portal.db.store import Document, DocumentStore
from internship_portal.schemas.schemas import (
    BankAccountStatus, InsuranceStatus, Internship, InternshipPreferences
)

log = logging.getLogger(__name__)


def new_id() -> str:
    """Fresh document id (ObjectId hex, stored as string)."""
    return str(ObjectId())


# ============================================================
# USERS COLLECTION
# ============================================================

class UserService:
    """
    Handles registered user documents.
    Passwords are stored already hashed.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.collection = COLLECTIONS["users"]

    def insert(
        self,
        first_name: str,
        last_name: str,
        email: str,
        phone: str,
        aadhaar_number: str,
        password_hash: str,
    ) -> Document:
        """Insert a new user with pending bank / incomplete insurance status."""
        doc = {
            "_id": new_id(),
            "first_name": first_name,
            "last_name": last_name,
            "email": email,
            "phone": phone,
            "aadhaar_number": aadhaar_number,
            "password": password_hash,
            "bank_account_status": BankAccountStatus.pending.value,
            "insurance_status": InsuranceStatus.incomplete.value,
            "created_at": datetime.utcnow(),
        }
        self.store.insert_one(self.collection, doc)
        return doc

    def get_by_id(self, user_id: str) -> Optional[Document]:
        return self.store.find_one(self.collection, {"_id": user_id})

    def get_by_email(self, email: str) -> Optional[Document]:
        return self.store.find_one(self.collection, {"email": email})

    def set_fields(self, user_id: str, **fields) -> Optional[Document]:
        """Update the given fields, return the updated user (None if missing)."""
        return self.store.update_one(self.collection, {"_id": user_id}, fields)

    def delete(self, user_id: str) -> bool:
        return self.store.delete_one(self.collection, {"_id": user_id})


# ============================================================
# INSURANCE COLLECTION
# ============================================================

class InsuranceService:

    def __init__(self, store: DocumentStore):
        self.store = store
        self.collection = COLLECTIONS["insurance"]

    def insert(self, user_id: str, policy_number: str, status: str = "active") -> Document:
        doc = {
            "_id": new_id(),
            "user_id": user_id,
            "policy_number": policy_number,
            "status": status,
            "documents": [],
            "created_at": datetime.utcnow(),
        }
        self.store.insert_one(self.collection, doc)
        return doc

    def get_latest_by_user(self, user_id: str) -> Optional[Document]:
        """Most recent insurance record for a user."""
        docs = self.store.find(self.collection, {"user_id": user_id}, sort=[("created_at", -1)])
        return docs[0] if docs else None

    def delete_by_user(self, user_id: str) -> int:
        return self.store.delete_many(self.collection, {"user_id": user_id})


# ============================================================
# INTERNSHIP PREFERENCES COLLECTION
# ============================================================

class PreferenceService:
    """
    Stores the last preference record a logged-in user submitted.
    Upsert keyed by user id, last write wins.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.collection = COLLECTIONS["preferences"]

    def upsert(self, user_id: str, preferences: InternshipPreferences) -> Document:
        now = datetime.utcnow()
        values = preferences.model_dump()
        values["updated_at"] = now
        return self.store.update_one(
            self.collection,
            {"user_id": user_id},
            values,
            upsert=True,
            insert_defaults={"_id": new_id(), "created_at": now},
        )

    def get_by_user(self, user_id: str) -> Optional[Document]:
        return self.store.find_one(self.collection, {"user_id": user_id})

    def delete_by_user(self, user_id: str) -> int:
        return self.store.delete_many(self.collection, {"user_id": user_id})


# ============================================================
# INTERNSHIPS COLLECTION
# ============================================================

class InternshipService:
    """
    The posting catalog. `sequence` fixes catalog order, which is the
    tie-break order for equal recommendation scores.
    """

    def __init__(self, store: DocumentStore):
        self.store = store
        self.collection = COLLECTIONS["internships"]

    def insert(self, internship: Internship, sequence: int) -> Document:
        """Add a posting at the given catalog position."""
        doc = internship.model_dump(exclude={"id"})
        doc["_id"] = internship.id
        doc["is_active"] = True
        doc["sequence"] = sequence
        doc["created_at"] = datetime.utcnow()
        self.store.insert_one(self.collection, doc)
        return doc

    def list_active(self) -> List[Internship]:
        docs = self.store.find(self.collection, {"is_active": True}, sort=[("sequence", 1)])
        return [to_internship(doc) for doc in docs]

    def seed(self, internships: Iterable[Internship]) -> int:
        """
        Insert the given postings if the catalog is empty. Returns how many were added.

        Sequence comes from the position in `internships`, so a concurrent
        seeder writes identical documents; postings it already inserted are
        skipped instead of aborting the seed.
        """
        if self.store.count(self.collection, {}) > 0:
            return 0
        added = 0
        for position, internship in enumerate(internships, start=1):
            try:
                self.insert(internship, sequence=position)
            except ConflictError:
                log.info("Internship %s already seeded", internship.id)
                continue
            added += 1
        return added


def to_internship(doc: Document) -> Internship:
    return Internship(
        id=str(doc["_id"]),
        title=doc["title"],
        company=doc["company"],
        location=doc["location"],
        duration=doc["duration"],
        stipend=doc["stipend"],
        description=doc.get("description", ""),
        required_skills=doc.get("required_skills", []),
        sector=doc["sector"],
        work_mode=doc["work_mode"],
        education_level=doc["education_level"],
    )
