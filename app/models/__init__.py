"""SQLAlchemy ORM 모델 패키지 — 모든 도메인 모델의 중앙 임포트 지점.

SQLAlchemy ORM models package — Central import point for all domain models.
Importing from this package ensures all models are registered with the
SQLAlchemy metadata, which is required for table creation and
relationship resolution.

Modules:
    user: 사용자 (User accounts)
    token: 리프레시 토큰 (Refresh tokens)
    measurement: 신체 치수 (Body measurements)
    outfit: 옷장 아이템 (Wardrobe outfits)
"""

from app.models.user import User
from app.models.token import RefreshToken
from app.models.measurement import Measurement
from app.models.outfit import Outfit

__all__ = [
    "User",
    "RefreshToken",
    "Measurement",
    "Outfit",
]
