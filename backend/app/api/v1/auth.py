"""Authentication endpoints: registration, login, email verification, password reset."""

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.api.deps import get_current_user
from app.models.user import User
from app.schemas.auth import (
    AuthSession,
    EmailRequest,
    LoginRequest,
    RegisterRequest,
    ResetPasswordRequest,
    UserEnvelope,
)
from app.schemas.common import ApiResponse
from app.schemas.user import UserResponse
from app.services.auth_service import AuthService
from app.services.notification_service import Notifier, get_notifier

router = APIRouter()

FORGOT_PASSWORD_MESSAGE = "If the email exists, a password reset link has been sent"


def _session(user: User, token: str) -> AuthSession:
    return AuthSession(user=UserResponse.model_validate(user), token=token)


# =============================================================================
# Registration & Login
# =============================================================================

@router.post(
    "/register",
    response_model=ApiResponse[UserEnvelope],
    status_code=status.HTTP_201_CREATED,
)
async def register(
    data: RegisterRequest,
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """
    Register a new account.
    The account cannot log in until the emailed verification link is used.
    """
    user = await AuthService(db, notifier).register(data)
    return ApiResponse(
        message="Registration successful. Please check your email to verify your account.",
        data=UserEnvelope(user=UserResponse.model_validate(user)),
    )


@router.post("/login", response_model=ApiResponse[AuthSession])
async def login(
    data: LoginRequest,
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Login with email and password."""
    user, token = await AuthService(db, notifier).login(data.email, data.password)
    return ApiResponse(message="Login successful", data=_session(user, token))


@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_me(user: User = Depends(get_current_user)):
    """Get the logged-in user's profile."""
    return ApiResponse(
        message="User profile retrieved successfully",
        data=UserResponse.model_validate(user),
    )


@router.post("/logout", response_model=ApiResponse)
async def logout(user: User = Depends(get_current_user)):
    """Tokens are stateless; the client discards its copy."""
    return ApiResponse(message="Logged out successfully")


# =============================================================================
# Email Verification
# =============================================================================

@router.get("/verify-email", response_model=ApiResponse[UserEnvelope])
async def verify_email(
    token: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    user = await AuthService(db, notifier).verify_email(token)
    return ApiResponse(
        message="Email verified successfully",
        data=UserEnvelope(user=UserResponse.model_validate(user)),
    )


@router.post("/resend-verification", response_model=ApiResponse)
async def resend_verification(
    data: EmailRequest,
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    await AuthService(db, notifier).resend_verification(data.email)
    return ApiResponse(message="Verification email sent successfully")


# =============================================================================
# Password Reset
# =============================================================================

@router.post("/forgot-password", response_model=ApiResponse)
async def forgot_password(
    data: EmailRequest,
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Same response whether or not the email is registered."""
    await AuthService(db, notifier).forgot_password(data.email)
    return ApiResponse(message=FORGOT_PASSWORD_MESSAGE)


@router.post("/reset-password", response_model=ApiResponse[AuthSession])
async def reset_password(
    data: ResetPasswordRequest,
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Set a new password and log the user straight in."""
    user, token = await AuthService(db, notifier).reset_password(data.token, data.password)
    return ApiResponse(message="Password reset successfully", data=_session(user, token))
