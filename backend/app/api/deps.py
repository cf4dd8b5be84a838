"""API dependencies for dependency injection and authentication."""

from typing import Optional
from uuid import UUID
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.exceptions import AppError, AuthenticationError, AuthorizationError, InvalidTokenError
from app.models.user import User
from app.security import decode_access_token

bearer = HTTPBearer(auto_error=False)


# =============================================================================
# Authentication
# =============================================================================

async def _load_user(token: str, db: AsyncSession) -> User:
    user_id = decode_access_token(token)
    try:
        user_uuid = UUID(user_id)
    except ValueError:
        raise InvalidTokenError()

    user = await db.get(User, user_uuid)
    if user is None:
        raise AuthenticationError("The user belonging to this token no longer exists.")
    return user


async def get_current_user(
    request: Request,
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """
    Resolve the bearer token to a user.

    Account state is not re-checked here: a token issued before a suspension
    or ban keeps working until it expires. Preflight requests pass through
    without a user.
    """
    if request.method == "OPTIONS":
        return None

    if not credentials or not credentials.credentials:
        raise AuthenticationError()

    return await _load_user(credentials.credentials, db)


# =============================================================================
# Authorization
# =============================================================================

async def require_admin(
    user: Optional[User] = Depends(get_current_user),
) -> Optional[User]:
    """Require the current user to be an admin."""
    if user is not None and not user.is_admin:
        raise AuthorizationError()
    return user


# =============================================================================
# Optional Auth Dependencies
# =============================================================================

async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer),
    db: AsyncSession = Depends(get_db),
) -> Optional[User]:
    """Get user if a valid token was sent, None otherwise."""
    if not credentials:
        return None

    try:
        return await _load_user(credentials.credentials, db)
    except AppError:
        return None
