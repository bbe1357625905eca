"""대시보드 서비스 — 사용자 프로필 요약, 통계, 관리자용 사용자 목록.

Dashboard Service — Profile summary, completeness stats and the
administrator user overview.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.measurement import Measurement
from app.models.user import User
from app.repositories.measurement_repository import measurement_repository
from app.repositories.user_repository import user_repository
from app.schemas.auth import AuthContext
from app.schemas.dashboard import (
    AdminUserResponse,
    DashboardProfileResponse,
    DashboardStatsResponse,
)
from app.services.measurement_service import measurement_service
from app.utils.exceptions import NotFoundError


class DashboardService:
    """대시보드 조회 로직 — Read-only dashboard queries."""

    async def get_profile(
        self,
        db: AsyncSession,
        auth: AuthContext,
    ) -> DashboardProfileResponse:
        """내 프로필과 신체 치수를 조회합니다.

        Return the caller's profile with their measurement row.

        Raises:
            NotFoundError: 사용자가 존재하지 않을 때 (Subject no longer exists)
        """
        user: User | None = await user_repository.get_by_id(db, auth.user_id)
        if user is None:
            raise NotFoundError("User not found")

        measurement: Measurement | None = await measurement_repository.get_by_user(db, user.id)
        return DashboardProfileResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            is_admin=user.is_admin,
            measurements=(
                measurement_service.to_response(measurement) if measurement is not None else None
            ),
        )

    async def get_stats(self, db: AsyncSession, auth: AuthContext) -> DashboardStatsResponse:
        """프로필 완성도 통계 — Completeness flags for the caller.

        A missing user is reported as a non-admin without measurements.
        """
        has_measurements: bool = await measurement_service.has_measurements(db, auth.user_id)
        user: User | None = await user_repository.get_by_id(db, auth.user_id)
        return DashboardStatsResponse(
            has_measurements=has_measurements,
            is_admin=user.is_admin if user is not None else False,
            profile_complete=has_measurements,
        )

    async def list_users(self, db: AsyncSession) -> list[AdminUserResponse]:
        """전체 사용자 목록 (관리자용) — All users with their measurement flag."""
        rows = await user_repository.list_users_with_measurement_flag(db)
        return [
            AdminUserResponse(
                id=user.id,
                username=user.username,
                email=user.email,
                is_admin=user.is_admin,
                has_measurements=has_measurements,
            )
            for user, has_measurements in rows
        ]


# 싱글턴 인스턴스 — Singleton instance
dashboard_service: DashboardService = DashboardService()
