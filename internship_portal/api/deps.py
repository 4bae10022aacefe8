"""
Route dependencies - wire services to the DocumentStore.

Tests override get_store to run routes against an in-memory store.
"""
from fastapi import Depends

from internship_portal.db.mongodb import get_document_store
from internship_portal.db.store import DocumentStore
from internship_portal.services.account_service import AccountService
from internship_portal.services.matching_service import RecommendationService
from internship_portal.services.mongo_service import (
    InsuranceService, InternshipService, PreferenceService, UserService
)


def get_store() -> DocumentStore:
    return get_document_store()


def get_user_service(store: DocumentStore = Depends(get_store)) -> UserService:
    return UserService(store)


def get_insurance_service(store: DocumentStore = Depends(get_store)) -> InsuranceService:
    return InsuranceService(store)


def get_preference_service(store: DocumentStore = Depends(get_store)) -> PreferenceService:
    return PreferenceService(store)


def get_internship_service(store: DocumentStore = Depends(get_store)) -> InternshipService:
    return InternshipService(store)


def get_account_service(
    users: UserService = Depends(get_user_service),
    insurance: InsuranceService = Depends(get_insurance_service),
    preferences: PreferenceService = Depends(get_preference_service),
) -> AccountService:
    return AccountService(users=users, insurance=insurance, preferences=preferences)


def get_recommendation_service(
    internships: InternshipService = Depends(get_internship_service),
    preferences: PreferenceService = Depends(get_preference_service),
) -> RecommendationService:
    return RecommendationService(internships=internships, preferences=preferences)
