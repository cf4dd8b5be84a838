"""Staff roster endpoints (admin only)."""

from typing import List
from uuid import UUID
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.api.deps import require_admin
from app.schemas.common import ApiResponse
from app.schemas.staff import StaffActiveUpdate, StaffCreate, StaffResponse, StaffUpdate
from app.services.staff_service import StaffService

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("", response_model=ApiResponse[List[StaffResponse]])
async def list_staff(db: AsyncSession = Depends(get_db)):
    """Active members first, then by name."""
    staff = await StaffService(db).list_staff()
    return ApiResponse(
        message="Staff list retrieved",
        data=[StaffResponse.model_validate(s) for s in staff],
    )


@router.post("", response_model=ApiResponse[StaffResponse], status_code=status.HTTP_201_CREATED)
async def create_staff(data: StaffCreate, db: AsyncSession = Depends(get_db)):
    staff = await StaffService(db).create(data)
    return ApiResponse(message="Staff member created", data=StaffResponse.model_validate(staff))


@router.patch("/{staff_id}/active", response_model=ApiResponse[StaffResponse])
async def set_staff_active(
    staff_id: UUID,
    data: StaffActiveUpdate,
    db: AsyncSession = Depends(get_db),
):
    staff = await StaffService(db).set_active(staff_id, data.active)
    return ApiResponse(message="Staff member updated", data=StaffResponse.model_validate(staff))


@router.patch("/{staff_id}", response_model=ApiResponse[StaffResponse])
async def update_staff(
    staff_id: UUID,
    data: StaffUpdate,
    db: AsyncSession = Depends(get_db),
):
    staff = await StaffService(db).update(staff_id, data)
    return ApiResponse(message="Staff member updated", data=StaffResponse.model_validate(staff))


@router.delete("/{staff_id}", response_model=ApiResponse[StaffResponse])
async def delete_staff(staff_id: UUID, db: AsyncSession = Depends(get_db)):
    """Delete a staff member and return the removed record."""
    staff = await StaffService(db).delete(staff_id)
    return ApiResponse(message="Staff member deleted", data=StaffResponse.model_validate(staff))
