"""
Internship Matching Service

PURPOSE:
Score each internship in the catalog against a requester's preferences
and return the best matches.

HOW IT WORKS (fixed weights, additive):
- +10 per required skill found in technical + soft skills
- +5  if the internship city is a preferred city (or "any" is preferred)
- +3  if the work mode matches (or the requester accepts "any")
- +5  if the sector is one of the requester's sector interests
- +2  if the education level matches exactly

Internships scoring 0 are dropped. The rest are sorted by score, highest
first, keeping catalog order for ties, and cut to the top `limit`.
"""

import logging
from typing import List, Optional, Sequence

from internship_portal.core.config import get_settings
from internship_portal.schemas.schemas import Internship, InternshipPreferences, ScoredInternship
from internship_portal.services.mongo_service import InternshipService, PreferenceService

log = logging.getLogger(__name__)

SKILL_POINTS = 10
LOCATION_POINTS = 5
WORK_MODE_POINTS = 3
SECTOR_POINTS = 5
EDUCATION_POINTS = 2

ANY = "any"
DEFAULT_LIMIT = 5


# ============================================================
# SCORING
# ============================================================

def score_internship(preferences: InternshipPreferences, internship: Internship) -> ScoredInternship:
    """Score a single internship. Pure function."""
    score = 0
    user_skills = set(preferences.technical_skills) | set(preferences.soft_skills)

    matching_skills = [skill for skill in internship.required_skills if skill in user_skills]
    score += SKILL_POINTS * len(matching_skills)

    cities = preferences.preferred_cities
    if internship.location.lower() in cities or ANY in cities:
        score += LOCATION_POINTS

    if preferences.work_mode == internship.work_mode or preferences.work_mode == ANY:
        score += WORK_MODE_POINTS

    if internship.sector in preferences.sector_interest:
        score += SECTOR_POINTS

    if preferences.education_level == internship.education_level:
        score += EDUCATION_POINTS

    return ScoredInternship(
        **internship.model_dump(),
        score=score,
        matching_skills=matching_skills,
    )


def score_internships(
    preferences: InternshipPreferences,
    catalog: Sequence[Internship],
    limit: int = DEFAULT_LIMIT,
) -> List[ScoredInternship]:
    """
    Rank the catalog for the given preferences.

    Returns at most `limit` internships with a positive score, highest
    first. sorted() is stable, so equal scores keep catalog order.
    """
    scored = [score_internship(preferences, internship) for internship in catalog]
    eligible = [item for item in scored if item.score > 0]
    ranked = sorted(eligible, key=lambda item: item.score, reverse=True)
    return ranked[:limit]


# ============================================================
# RECOMMENDATION SERVICE
# ============================================================

class RecommendationService:
    """
    Generates recommendations from the stored catalog and remembers
    the preferences of logged-in requesters.
    """

    def __init__(self, internships: InternshipService, preferences: PreferenceService, limit: int = None):
        self.internships = internships
        self.preferences = preferences
        self.limit = limit if limit is not None else get_settings().recommendation_limit

    def recommend(self, preferences: InternshipPreferences, user_id: Optional[str] = None) -> List[ScoredInternship]:
        """
        Score the active catalog.

        If user_id is given (caller sent a valid token) the preferences
        are saved for that user first.
        """
        if user_id:
            self.preferences.upsert(user_id, preferences)
            log.debug("Saved internship preferences for user %s", user_id)

        catalog = self.internships.list_active()
        recommendations = score_internships(preferences, catalog, self.limit)
        log.info(
            "Generated %d recommendations from %d internships",
            len(recommendations), len(catalog)
        )
        return recommendations

    def list_internships(self) -> List[Internship]:
        return self.internships.list_active()

    def get_saved_preferences(self, user_id: str) -> Optional[dict]:
        return self.preferences.get_by_user(user_id)
