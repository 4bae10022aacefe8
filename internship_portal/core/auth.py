"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for protected routes
"""

from datetime import datetime, timedelta
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from fastapi.security.utils import get_authorization_scheme_param

from internship_portal.core.config import get_settings
from internship_portal.core.errors import AuthenticationError, PermissionDeniedError

settings = get_settings()

# Password hashing
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)

# Bearer token extractor. A missing header is turned into a 401 by
# get_current_user_id rather than by HTTPBearer itself.
bearer_scheme = HTTPBearer(auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(subject: str, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token with `sub` set to the user id."""
    expire = datetime.utcnow() + (expires_delta or timedelta(minutes=settings.jwt_expire_minutes))
    to_encode = {"sub": subject, "exp": expire}
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def subject_from_token(token: str) -> str:
    """Subject identifier of a token, or AuthenticationError."""
    payload = decode_token(token)
    if not payload or not payload.get("sub"):
        raise AuthenticationError()
    return payload["sub"]


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
) -> str:
    """
    FastAPI dependency - id of the authenticated caller.

    Usage:
        @router.get("/protected")
        async def route(user_id: str = Depends(get_current_user_id)):
            ...
    """
    if credentials is None:
        raise AuthenticationError("Not authenticated")
    return subject_from_token(credentials.credentials)


async def get_optional_user_id(request: Request) -> Optional[str]:
    """
    Like get_current_user_id, but callers without an Authorization header
    get None. Any header that is present must be `Bearer <valid token>`,
    otherwise 401.
    """
    authorization = request.headers.get("Authorization")
    if authorization is None:
        return None

    scheme, token = get_authorization_scheme_param(authorization)
    if scheme.lower() != "bearer" or not token:
        raise AuthenticationError()
    return subject_from_token(token)


def ensure_same_user(caller_id: str, user_id: str) -> None:
    """Callers may only act on their own account."""
    if caller_id != user_id:
        raise PermissionDeniedError()
