"""Staff service - roster management."""

import logging
from typing import List
from uuid import UUID
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import ConflictError, NotFoundError
from app.models.staff import Staff
from app.schemas.staff import StaffCreate, StaffUpdate

logger = logging.getLogger(__name__)


class StaffService:
    """Service for staff operations."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, staff_id: UUID) -> Staff:
        staff = await self.db.get(Staff, staff_id)
        if not staff:
            raise NotFoundError("Staff member not found")
        return staff

    async def _ensure_phone_free(self, phone: str, exclude_id: UUID = None) -> None:
        query = select(Staff.id).where(Staff.phone == phone)
        if exclude_id:
            query = query.where(Staff.id != exclude_id)
        if (await self.db.execute(query)).first():
            raise ConflictError("phone already exists")

    async def list_staff(self) -> List[Staff]:
        """Active members first, then alphabetical."""
        result = await self.db.execute(
            select(Staff).order_by(Staff.active.desc(), Staff.name)
        )
        return list(result.scalars())

    async def create(self, data: StaffCreate) -> Staff:
        phone = data.phone.strip()
        await self._ensure_phone_free(phone)
        staff = Staff(name=data.name.strip(), phone=phone, role=data.role, active=True)
        self.db.add(staff)
        await self.db.commit()
        logger.info("Staff member %s added", staff.id)
        return staff

    async def update(self, staff_id: UUID, data: StaffUpdate) -> Staff:
        staff = await self.get_by_id(staff_id)
        update_data = data.model_dump(exclude_unset=True, exclude_none=True)
        if "phone" in update_data:
            update_data["phone"] = update_data["phone"].strip()
            await self._ensure_phone_free(update_data["phone"], exclude_id=staff.id)
        if "name" in update_data:
            update_data["name"] = update_data["name"].strip()

        for field, value in update_data.items():
            setattr(staff, field, value)

        await self.db.commit()
        return staff

    async def set_active(self, staff_id: UUID, active: bool) -> Staff:
        staff = await self.get_by_id(staff_id)
        staff.active = bool(active)
        await self.db.commit()
        return staff

    async def delete(self, staff_id: UUID) -> Staff:
        """Delete and return the removed member."""
        staff = await self.get_by_id(staff_id)
        await self.db.delete(staff)
        await self.db.commit()
        logger.info("Staff member %s deleted", staff_id)
        return staff
