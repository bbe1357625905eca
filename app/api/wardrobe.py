"""옷장 라우터 — 옷장 아이템 목록, 생성, 수정, 삭제.

Wardrobe Router — List, create, update and delete the caller's outfits,
and seed an empty wardrobe with samples.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user
from app.database import get_db
from app.schemas.auth import AuthContext
from app.schemas.common import MessageResponse
from app.schemas.outfit import OutfitResponse, OutfitSave, SeedSampleResponse
from app.services.outfit_service import outfit_service

router: APIRouter = APIRouter()


@router.get("", response_model=list[OutfitResponse])
async def list_outfits(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> list[OutfitResponse]:
    """내 옷장 목록 조회 — List my outfits, newest first."""
    return await outfit_service.list_outfits(db, auth)


@router.post("", response_model=OutfitResponse)
async def create_outfit(
    data: OutfitSave,
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> OutfitResponse:
    """옷장 아이템 생성 — Create an outfit."""
    result: OutfitResponse = await outfit_service.create_outfit(db, auth, data)
    await db.commit()
    return result


@router.put("/{outfit_id}", response_model=OutfitResponse)
async def update_outfit(
    outfit_id: int,
    data: OutfitSave,
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> OutfitResponse:
    """옷장 아이템 수정 — Update one of my outfits."""
    result: OutfitResponse = await outfit_service.update_outfit(db, auth, outfit_id, data)
    await db.commit()
    return result


@router.delete("/{outfit_id}", response_model=MessageResponse)
async def delete_outfit(
    outfit_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> MessageResponse:
    """옷장 아이템 삭제 — Delete one of my outfits."""
    await outfit_service.delete_outfit(db, auth, outfit_id)
    await db.commit()
    return MessageResponse(message="Outfit deleted successfully")


@router.post("/seed-sample-data", response_model=SeedSampleResponse)
async def seed_sample_data(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> SeedSampleResponse:
    """샘플 옷장 생성 — Fill an empty wardrobe with sample outfits. 400 if not empty."""
    count: int = await outfit_service.seed_sample_data(db, auth)
    await db.commit()
    return SeedSampleResponse(message="Sample clothes data added successfully!", count=count)
