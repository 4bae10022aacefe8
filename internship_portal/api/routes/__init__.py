"""
API Routes - Combines all route modules into single router.
"""

from fastapi import APIRouter

from internship_portal.api.routes.auth_routes import router as auth_router
from internship_portal.api.routes.account_routes import router as account_router
from internship_portal.api.routes.recommendation_routes import router as recommendation_router

# Main API router
api_router = APIRouter()

# Include all sub-routers
api_router.include_router(auth_router)
api_router.include_router(account_router)
api_router.include_router(recommendation_router)
