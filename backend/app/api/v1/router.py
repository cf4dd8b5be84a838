"""Main router for API v1."""

from fastapi import APIRouter

from app.api.v1 import auth, bookings, clients, staff, users

api_router = APIRouter()

# =============================================================================
# Authentication (public + self)
# =============================================================================
api_router.include_router(
    auth.router,
    prefix="/auth",
    tags=["Authentication"]
)

# =============================================================================
# Accounts
# =============================================================================
api_router.include_router(
    users.router,
    prefix="/users",
    tags=["Users"]
)

# =============================================================================
# Operations (admin dashboard)
# =============================================================================
api_router.include_router(
    bookings.router,
    prefix="/bookings",
    tags=["Bookings"]
)
api_router.include_router(
    clients.router,
    prefix="/clients",
    tags=["Clients"]
)
api_router.include_router(
    staff.router,
    prefix="/staff",
    tags=["Staff"]
)
