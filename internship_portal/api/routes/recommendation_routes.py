"""
Recommendation Routes

POST /internship-recommendations - Score the catalog against preferences
GET /internships - List the active internship catalog
GET /preferences - Get the caller's saved preferences
"""

from typing import Optional
from fastapi import APIRouter, Depends

from internship_portal.api.deps import get_recommendation_service
from internship_portal.core.auth import get_current_user_id, get_optional_user_id
from internship_portal.core.errors import NotFoundError
from internship_portal.services.matching_service import RecommendationService
from internship_portal.schemas.schemas import (
    InternshipListResponse, InternshipPreferences, RecommendationResponse, StoredPreferences
)

router = APIRouter(tags=["Recommendations"])


@router.post("/internship-recommendations", response_model=RecommendationResponse)
async def internship_recommendations(
    preferences: InternshipPreferences,
    user_id: Optional[str] = Depends(get_optional_user_id),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """
    Get up to 5 internships ranked by match score.

    Works without login. With a bearer token the preferences are also
    saved for that user; an invalid token is rejected with 401.
    """
    recommendations = service.recommend(preferences, user_id=user_id)
    return RecommendationResponse(
        message="Recommendations generated successfully",
        recommendations=recommendations,
    )


@router.get("/internships", response_model=InternshipListResponse)
async def list_internships(service: RecommendationService = Depends(get_recommendation_service)):
    """Active internships, in catalog order."""
    internships = service.list_internships()
    return InternshipListResponse(internships=internships, total=len(internships))


@router.get("/preferences", response_model=StoredPreferences)
async def saved_preferences(
    user_id: str = Depends(get_current_user_id),
    service: RecommendationService = Depends(get_recommendation_service),
):
    """Preferences last submitted by the logged-in user."""
    doc = service.get_saved_preferences(user_id)
    if not doc:
        raise NotFoundError("No saved preferences")
    return StoredPreferences(**{k: v for k, v in doc.items() if k != "_id"})
