"""옷장 아이템 모델 — 사용자가 등록한 의류.

Outfit model — Clothing items cataloged in a user's wardrobe.
"""

from datetime import datetime, timezone

from sqlalchemy import ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, UTCDateTime


class Outfit(Base):
    """옷장 아이템 테이블.

    Wardrobe outfit table. Every row is owned by exactly one user.

    Attributes:
        id: 고유 식별자 (Primary key)
        user_id: 소유 사용자 ID (Owner user id)
        name: 이름 (Display name, required)
        description: 설명 (Free text description)
        category: 분류 (e.g. "Casual", "Formal")
        brand: 브랜드 (Brand name)
        size: 사이즈 (Size label)
        color: 색상 (Color name)
        type: 종류 (e.g. "Shirt", "Pants")
        image_url: 이미지 URL (Image location)
    """

    __tablename__ = "outfits"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str] = mapped_column(String(500), default="", nullable=False)
    category: Mapped[str] = mapped_column(String(50), default="Casual", nullable=False)
    brand: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    size: Mapped[str] = mapped_column(String(20), default="", nullable=False)
    color: Mapped[str] = mapped_column(String(50), default="", nullable=False)
    type: Mapped[str] = mapped_column(String(50), default="Shirt", nullable=False)
    image_url: Mapped[str] = mapped_column(Text, default="", nullable=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="outfits")
