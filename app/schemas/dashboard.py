"""대시보드 Pydantic 응답 스키마 정의.

Dashboard response schemas: the caller's profile with measurements,
profile completeness stats, and the administrator user overview.
"""

from pydantic import BaseModel

from app.schemas.measurement import MeasurementResponse


class DashboardProfileResponse(BaseModel):
    """대시보드 프로필 응답 — 사용자 정보 + 신체 치수.

    Profile of the caller together with their measurement row, or
    ``None`` when nothing has been saved yet.
    """

    id: int
    username: str
    email: str
    is_admin: bool
    measurements: MeasurementResponse | None = None


class DashboardStatsResponse(BaseModel):
    """대시보드 통계 응답.

    Attributes:
        has_measurements: 치수 저장 여부 (Measurements saved)
        is_admin: 관리자 여부 (Administrator flag)
        profile_complete: 프로필 완성 여부 (Currently equal to has_measurements)
    """

    has_measurements: bool
    is_admin: bool
    profile_complete: bool


class AdminUserResponse(BaseModel):
    """관리자용 사용자 목록 항목 — User row for the administrator overview."""

    id: int
    username: str
    email: str
    is_admin: bool
    has_measurements: bool
