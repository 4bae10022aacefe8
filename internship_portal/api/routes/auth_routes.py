"""
Authentication Routes

POST /register - Register new user, returns JWT token
POST /login - Login and get JWT token
"""

from fastapi import APIRouter, Depends

from internship_portal.api.deps import get_account_service
from internship_portal.core.auth import create_access_token
from internship_portal.db.store import Document
from internship_portal.services.account_service import AccountService
from internship_portal.schemas.schemas import AuthResponse, LoginRequest, RegisterRequest, UserSummary

router = APIRouter(tags=["Authentication"])


def _summary(user: Document) -> UserSummary:
    return UserSummary(
        id=user["_id"],
        first_name=user["first_name"],
        last_name=user["last_name"],
        email=user["email"],
        insurance_status=user["insurance_status"],
        bank_account_status=user["bank_account_status"],
    )


@router.post("/register", response_model=AuthResponse, status_code=201)
async def register(request: RegisterRequest, accounts: AccountService = Depends(get_account_service)):
    """
    Register a new user account.

    Returns a token right away, no separate login needed.
    """
    user = accounts.register(request)
    return AuthResponse(
        message="User registered successfully",
        token=create_access_token(user["_id"]),
        user=_summary(user),
    )


@router.post("/login", response_model=AuthResponse)
async def login(request: LoginRequest, accounts: AccountService = Depends(get_account_service)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    user = accounts.login(request.email, request.password)
    return AuthResponse(
        message="Login successful",
        token=create_access_token(user["_id"]),
        user=_summary(user),
    )
