"""대시보드 라우터 — 프로필 요약, 통계, 관리자용 사용자 목록.

Dashboard Router — Profile summary, stats and the admin user overview.
"""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, require_admin
from app.database import get_db
from app.schemas.auth import AuthContext
from app.schemas.dashboard import (
    AdminUserResponse,
    DashboardProfileResponse,
    DashboardStatsResponse,
)
from app.services.dashboard_service import dashboard_service

router: APIRouter = APIRouter()


@router.get("/user-profile", response_model=DashboardProfileResponse)
async def get_user_profile(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> DashboardProfileResponse:
    """내 프로필 + 신체 치수 조회 — Profile with measurements."""
    return await dashboard_service.get_profile(db, auth)


@router.get("/stats", response_model=DashboardStatsResponse)
async def get_stats(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> DashboardStatsResponse:
    """프로필 완성도 통계 — Profile completeness stats."""
    return await dashboard_service.get_stats(db, auth)


@router.get("/admin/users", response_model=list[AdminUserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(require_admin)],
) -> list[AdminUserResponse]:
    """사용자 목록 조회 — 관리자 전용.

    List all users with their measurement flag. Administrators only.
    """
    return await dashboard_service.list_users(db)
