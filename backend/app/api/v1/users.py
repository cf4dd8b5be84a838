"""User endpoints: self-service profile and admin account management."""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.api.deps import get_current_user, require_admin
from app.models.user import User
from app.schemas.common import ApiResponse
from app.schemas.user import SuspendRequest, UserProfileUpdate, UserResponse
from app.services.account_lifecycle import LifecycleAction
from app.services.notification_service import Notifier, get_notifier
from app.services.user_service import UserService

router = APIRouter()

TRANSITION_MESSAGES = {
    LifecycleAction.APPROVE: "User approved successfully",
    LifecycleAction.SUSPEND: "User suspended successfully",
    LifecycleAction.UNSUSPEND: "User unsuspended successfully",
    LifecycleAction.BAN: "User banned successfully",
    LifecycleAction.ACTIVATE: "User activated successfully",
    LifecycleAction.DEACTIVATE: "User deactivated successfully",
}


# =============================================================================
# Self-service (declared before /{user_id} so "me" is not parsed as an id)
# =============================================================================

@router.get("/me", response_model=ApiResponse[UserResponse])
async def get_my_profile(user: User = Depends(get_current_user)):
    return ApiResponse(
        message="User profile retrieved successfully",
        data=UserResponse.model_validate(user),
    )


@router.patch("/me", response_model=ApiResponse[UserResponse])
async def update_my_profile(
    data: UserProfileUpdate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Update name, email or phone."""
    updated = await UserService(db).update_profile(user.id, data)
    return ApiResponse(
        message="User profile updated successfully",
        data=UserResponse.model_validate(updated),
    )


# =============================================================================
# Admin: listing & lookup
# =============================================================================

@router.get("", response_model=ApiResponse[List[UserResponse]])
async def list_users(
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    users = await UserService(db).list_users()
    return ApiResponse(
        message="Users retrieved successfully",
        data=[UserResponse.model_validate(u) for u in users],
    )


@router.get("/pending", response_model=ApiResponse[List[UserResponse]])
async def list_pending_users(
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Accounts that have not verified their email yet."""
    users = await UserService(db).list_pending()
    return ApiResponse(
        message="Pending users retrieved successfully",
        data=[UserResponse.model_validate(u) for u in users],
    )


@router.get("/{user_id}", response_model=ApiResponse[UserResponse])
async def get_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    user = await UserService(db).get_by_id(user_id)
    return ApiResponse(message="User retrieved successfully", data=UserResponse.model_validate(user))


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await UserService(db).delete(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# =============================================================================
# Admin: lifecycle
# =============================================================================

async def _transition(
    db: AsyncSession,
    notifier: Notifier,
    user_id: UUID,
    action: LifecycleAction,
    reason: Optional[str] = None,
) -> ApiResponse[UserResponse]:
    user = await UserService(db, notifier).transition(user_id, action, reason)
    return ApiResponse(
        message=TRANSITION_MESSAGES[action],
        data=UserResponse.model_validate(user),
    )


@router.patch("/{user_id}/approve", response_model=ApiResponse[UserResponse])
async def approve_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Mark the email verified and the account active."""
    return await _transition(db, notifier, user_id, LifecycleAction.APPROVE)


@router.patch("/{user_id}/suspend", response_model=ApiResponse[UserResponse])
async def suspend_user(
    user_id: UUID,
    data: Optional[SuspendRequest] = None,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    return await _transition(db, notifier, user_id, LifecycleAction.SUSPEND, data and data.reason)


@router.patch("/{user_id}/unsuspend", response_model=ApiResponse[UserResponse])
async def unsuspend_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    return await _transition(db, notifier, user_id, LifecycleAction.UNSUSPEND)


@router.patch("/{user_id}/ban", response_model=ApiResponse[UserResponse])
async def ban_user(
    user_id: UUID,
    data: Optional[SuspendRequest] = None,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    """Soft-delete the account. The record is kept."""
    return await _transition(db, notifier, user_id, LifecycleAction.BAN, data and data.reason)


@router.patch("/{user_id}/activate", response_model=ApiResponse[UserResponse])
async def activate_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    return await _transition(db, notifier, user_id, LifecycleAction.ACTIVATE)


@router.patch("/{user_id}/deactivate", response_model=ApiResponse[UserResponse])
async def deactivate_user(
    user_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
    notifier: Notifier = Depends(get_notifier),
):
    return await _transition(db, notifier, user_id, LifecycleAction.DEACTIVATE)
