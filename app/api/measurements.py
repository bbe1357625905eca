"""신체 치수 라우터 — 내 치수 조회, 저장, 삭제.

Measurements Router — Read, upsert and delete the caller's measurements.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.database import get_db
from app.schemas.auth import AuthContext
from app.schemas.common import MessageResponse
from app.schemas.measurement import MeasurementResponse, MeasurementSave
from app.services.measurement_service import measurement_service

router: APIRouter = APIRouter()


@router.get("/retrieve", response_model=MeasurementResponse)
async def get_measurements(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> MeasurementResponse:
    """내 치수 조회 — Get my measurements (404 if none)."""
    return await measurement_service.get_mine(db, auth)


@router.post("/save", response_model=MeasurementResponse)
async def save_measurements(
    data: MeasurementSave,
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> MeasurementResponse:
    """내 치수 저장 — Create or replace my measurements."""
    result: MeasurementResponse = await measurement_service.save(db, auth, data)
    await db.commit()
    return result


@router.delete("/remove", response_model=MessageResponse)
async def delete_measurements(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> MessageResponse:
    """내 치수 삭제 — Delete my measurements."""
    await measurement_service.delete_mine(db, auth)
    await db.commit()
    return MessageResponse(message="Measurements deleted successfully")
