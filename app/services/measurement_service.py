"""신체 치수 서비스 — Measurement Service.

Upsert/read/delete of the caller's single measurement row.
The owner is always ``auth.user_id``.
"""

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.measurement import Measurement
from app.repositories.measurement_repository import measurement_repository
from app.schemas.auth import AuthContext
from app.schemas.measurement import MeasurementResponse, MeasurementSave
from app.utils.exceptions import NotFoundError


class MeasurementService:
    """신체 치수 비즈니스 로직 — Measurement business logic."""

    def to_response(self, m: Measurement) -> MeasurementResponse:
        """모델을 응답 스키마로 변환 — Also used by the dashboard profile."""
        return MeasurementResponse(
            id=m.id,
            user_id=m.user_id,
            height=m.height,
            weight=m.weight,
            chest=m.chest,
            waist=m.waist,
            hips=m.hips,
            inseam=m.inseam,
            shoulders=m.shoulders,
            neck_circumference=m.neck_circumference,
            sleeve_length=m.sleeve_length,
            thigh=m.thigh,
            skin_color=m.skin_color,
            description=m.description,
            created_at=m.created_at,
            updated_at=m.updated_at,
        )

    async def get_mine(self, db: AsyncSession, auth: AuthContext) -> MeasurementResponse:
        """내 치수를 조회합니다.

        Raises:
            NotFoundError: 저장된 치수가 없을 때 (No measurement saved yet)
        """
        m: Measurement | None = await measurement_repository.get_by_user(db, auth.user_id)
        if m is None:
            raise NotFoundError("No measurements found for this user")
        return self.to_response(m)

    async def has_measurements(self, db: AsyncSession, user_id: int) -> bool:
        """치수 저장 여부 — Whether the user has saved measurements."""
        return await measurement_repository.count(db, user_id=user_id) > 0

    async def _update(
        self,
        db: AsyncSession,
        auth: AuthContext,
        existing: Measurement,
        data: MeasurementSave,
    ) -> MeasurementResponse:
        updated: Measurement | None = await measurement_repository.update(
            db, existing.id, data.model_dump(), user_id=auth.user_id
        )
        if updated is None:
            raise NotFoundError("No measurements found for this user")
        return self.to_response(updated)

    async def save(
        self,
        db: AsyncSession,
        auth: AuthContext,
        data: MeasurementSave,
    ) -> MeasurementResponse:
        """내 치수를 저장합니다 — 있으면 갱신, 없으면 생성.

        Upsert the caller's measurement row. When a concurrent first save
        wins the unique ``user_id`` race, the row it created is updated.
        """
        existing: Measurement | None = await measurement_repository.get_by_user(db, auth.user_id)
        if existing is not None:
            return await self._update(db, auth, existing, data)

        try:
            created: Measurement = await measurement_repository.create(
                db, {"user_id": auth.user_id, **data.model_dump()}
            )
            return self.to_response(created)
        except IntegrityError:
            # 동시 저장 경합 — Lost the insert race, fall back to update
            await db.rollback()

        existing = await measurement_repository.get_by_user(db, auth.user_id)
        if existing is None:
            raise NotFoundError("No measurements found for this user")
        return await self._update(db, auth, existing, data)

    async def delete_mine(self, db: AsyncSession, auth: AuthContext) -> None:
        """내 치수를 삭제합니다.

        Raises:
            NotFoundError: 삭제할 치수가 없을 때 (Nothing to delete)
        """
        m: Measurement | None = await measurement_repository.get_by_user(db, auth.user_id)
        if m is None or not await measurement_repository.delete(db, m.id, user_id=auth.user_id):
            raise NotFoundError("No measurements to delete")


# 싱글턴 인스턴스 — Singleton instance
measurement_service: MeasurementService = MeasurementService()
