"""
PM Internship Portal - Main Application

FastAPI backend with:
- MongoDB for users, insurance, preferences and the internship catalog
- JWT authentication
- Rule-based internship recommendations
- Frontend served from /frontend/public when present

Run: uvicorn internship_portal.main:app --reload
"""

import logging
import os

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from internship_portal.api.routes import api_router
from internship_portal.core.config import get_settings
from internship_portal.core.errors import PortalError
from internship_portal.core.logging_config import configure_logging
from internship_portal.db.mongodb import get_document_store, init_mongo_indexes
from internship_portal.services.catalog import DEFAULT_INTERNSHIPS
from internship_portal.services.mongo_service import InternshipService

settings = get_settings()
configure_logging()
log = logging.getLogger(__name__)

# Get the project root directory
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FRONTEND_DIR = os.path.join(PROJECT_ROOT, "frontend", "public")

# Create FastAPI app
app = FastAPI(
    title=settings.app_name,
    description="""
    Backend for the PM internship portal.

    ## Features
    - **Authentication**: Registration and login with JWT tokens
    - **Insurance**: Completion tracking per user
    - **Bank account**: Simulated verification against the registered Aadhaar number
    - **Dashboard**: User status and insurance record
    - **Recommendations**: Rule-based internship matching
    """,
    version="1.0.0",
    debug=settings.debug,
    docs_url="/docs",
    redoc_url="/redoc"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")

# Serve static files (for any additional assets)
if os.path.exists(FRONTEND_DIR):
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")


@app.exception_handler(PortalError)
async def portal_error_handler(request: Request, exc: PortalError):
    """Domain errors -> HTTP status with {"detail": message}."""
    if exc.status_code >= 500:
        log.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.message},
        headers=exc.headers,
    )


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    log.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(status_code=500, content={"detail": "Server error"})


# Startup event
@app.on_event("startup")
async def startup_event():
    """Create MongoDB indexes and seed the internship catalog."""
    try:
        init_mongo_indexes()
        if settings.seed_catalog:
            added = InternshipService(get_document_store()).seed(DEFAULT_INTERNSHIPS)
            if added:
                log.info("Seeded %d internships", added)
    except Exception as e:
        log.warning("MongoDB startup initialization failed: %s", e)


# Serve frontend for root path
@app.get("/", tags=["Frontend"])
async def serve_frontend():
    """Serve the frontend."""
    index_path = os.path.join(FRONTEND_DIR, "index.html")
    if os.path.exists(index_path):
        return FileResponse(index_path)
    return {"status": "healthy", "app": settings.app_name, "message": "Frontend not found. API is running."}


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    from internship_portal.db.mongodb import test_mongo_connection

    return {
        "status": "healthy",
        "mongodb": "connected" if test_mongo_connection() else "disconnected"
    }
