"""Booking endpoints. Creation is public; everything else is for admins."""

from typing import List, Optional
from uuid import UUID
from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.api.deps import get_optional_user, require_admin
from app.models.user import User
from app.schemas.booking import (
    BookingCreate,
    BookingResponse,
    BookingStatusUpdate,
    BookingUpdate,
    PaymentUpdate,
    StaffAssignment,
)
from app.schemas.common import ApiResponse
from app.services.booking_service import BookingService

router = APIRouter()


@router.post("", response_model=ApiResponse[BookingResponse], status_code=status.HTTP_201_CREATED)
async def create_booking(
    data: BookingCreate,
    db: AsyncSession = Depends(get_db),
    user: Optional[User] = Depends(get_optional_user),
):
    """
    Create a booking from the public booking form.
    When the caller is logged in the booking is linked to their account.
    """
    booking = await BookingService(db).create(data, user=user)
    return ApiResponse(
        message="Booking created successfully",
        data=BookingResponse.model_validate(booking),
    )


@router.get("", response_model=ApiResponse[List[BookingResponse]])
async def list_bookings(
    status_filter: Optional[str] = Query(None, alias="status"),
    payment: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """List bookings, newest first. ``all`` disables a filter."""
    bookings = await BookingService(db).list_bookings(
        status=status_filter, payment=payment, search=search
    )
    return ApiResponse(
        message="Bookings retrieved successfully",
        data=[BookingResponse.model_validate(b) for b in bookings],
    )


@router.get("/{booking_id}", response_model=ApiResponse[BookingResponse])
async def get_booking(
    booking_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    booking = await BookingService(db).get_by_id(booking_id)
    return ApiResponse(
        message="Booking retrieved successfully",
        data=BookingResponse.model_validate(booking),
    )


@router.patch("/{booking_id}/status", response_model=ApiResponse[BookingResponse])
async def update_booking_status(
    booking_id: UUID,
    data: BookingStatusUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    booking = await BookingService(db).update_status(booking_id, data)
    return ApiResponse(
        message="Booking status updated successfully",
        data=BookingResponse.model_validate(booking),
    )


@router.patch("/{booking_id}/payment", response_model=ApiResponse[BookingResponse])
async def update_booking_payment(
    booking_id: UUID,
    data: PaymentUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    booking = await BookingService(db).update_payment(booking_id, data)
    return ApiResponse(
        message="Payment status updated successfully",
        data=BookingResponse.model_validate(booking),
    )


@router.patch("/{booking_id}/staff", response_model=ApiResponse[BookingResponse])
async def assign_booking_staff(
    booking_id: UUID,
    data: StaffAssignment,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    booking = await BookingService(db).assign_staff(booking_id, data.staff_ids)
    return ApiResponse(
        message="Staff assigned successfully",
        data=BookingResponse.model_validate(booking),
    )


@router.patch("/{booking_id}", response_model=ApiResponse[BookingResponse])
async def update_booking(
    booking_id: UUID,
    data: BookingUpdate,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    booking = await BookingService(db).update(booking_id, data)
    return ApiResponse(
        message="Booking updated successfully",
        data=BookingResponse.model_validate(booking),
    )


@router.delete("/{booking_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_booking(
    booking_id: UUID,
    admin: User = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    await BookingService(db).delete(booking_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
