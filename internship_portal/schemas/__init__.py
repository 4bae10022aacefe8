"""
Schemas module - Request/Response schemas for API endpoints.
"""
from internship_portal.schemas.schemas import (
    InternshipPreferences,
    Internship,
    ScoredInternship,
)

__all__ = ["InternshipPreferences", "Internship", "ScoredInternship"]
