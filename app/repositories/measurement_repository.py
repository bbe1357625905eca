"""신체 치수 레포지토리 — Measurement Repository.

One measurement row per user; lookups are always by owner.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.measurement import Measurement
from app.repositories.base import BaseRepository


class MeasurementRepository(BaseRepository[Measurement]):
    """신체 치수 테이블 레포지토리 — Repository for the measurements table."""

    def __init__(self) -> None:
        super().__init__(Measurement)

    async def get_by_user(self, db: AsyncSession, user_id: int) -> Measurement | None:
        """사용자의 치수 레코드를 조회합니다 — The caller's measurement row, if any."""
        result = await db.execute(select(Measurement).where(Measurement.user_id == user_id))
        return result.scalar_one_or_none()


# 싱글턴 인스턴스 — Singleton instance
measurement_repository: MeasurementRepository = MeasurementRepository()
