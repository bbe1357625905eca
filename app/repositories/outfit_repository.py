"""옷장 아이템 레포지토리 — Outfit Repository.

All reads and writes go through BaseRepository with the owner's user_id.
"""

from app.models.outfit import Outfit
from app.repositories.base import BaseRepository


class OutfitRepository(BaseRepository[Outfit]):
    """옷장 아이템 테이블 레포지토리 — Repository for the outfits table."""

    def __init__(self) -> None:
        super().__init__(Outfit)


# 싱글턴 인스턴스 — Singleton instance
outfit_repository: OutfitRepository = OutfitRepository()
