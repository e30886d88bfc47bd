from fastapi import Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.db import get_session
from app.models.service import Service
from app.services.slot_service import get_active_service


async def get_bookable_service(
    service_id: int,
    session: AsyncSession = Depends(get_session),
) -> Service:
    service = await get_active_service(session, service_id)
    if not service:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Service not found or not active",
        )
    return service
