#!/usr/bin/env python3
"""
Seed the internship catalog with the default postings.

Does nothing if the catalog already has internships.
Usage: python scripts/seed_internships.py
"""
import sys
sys.path.insert(0, '.')

from internship_portal.db.mongodb import get_document_store, init_mongo_indexes
from internship_portal.services.catalog import DEFAULT_INTERNSHIPS
from internship_portal.services.mongo_service import InternshipService


def main():
    init_mongo_indexes()
    service = InternshipService(get_document_store())
    added = service.seed(DEFAULT_INTERNSHIPS)
    if added:
        print(f"✅ Seeded {added} internships")
    else:
        print("⚠️  Catalog already populated, nothing to do")
    for internship in service.list_active():
        print(f"    [{internship.id}] {internship.title} - {internship.company} ({internship.location})")


if __name__ == "__main__":
    main()
