"""Client reporting endpoints (admin only)."""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.api.deps import require_admin
from app.schemas.client import ClientSummaryResponse
from app.schemas.common import ApiResponse
from app.services.client_service import ClientService

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/summary", response_model=ApiResponse[List[ClientSummaryResponse]])
async def get_client_summary(db: AsyncSession = Depends(get_db)):
    """
    Per-client rollup of all bookings, highest lifetime value first.
    Computed from the full booking set on every call.
    """
    clients = await ClientService(db).get_summaries()
    return ApiResponse(
        message="Clients retrieved successfully",
        data=[ClientSummaryResponse.model_validate(c) for c in clients],
    )
