"""신체 치수 모델 — 사용자당 하나의 측정값 레코드.

Measurement model — A single body-measurement record per user,
used for avatar generation and outfit fitting.
"""

from datetime import datetime, timezone

from sqlalchemy import Float, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, UTCDateTime


class Measurement(Base):
    """신체 치수 테이블.

    Body measurement table. ``user_id`` is unique: one row per user.
    Lengths are in centimetres, weight in kilograms.
    """

    __tablename__ = "measurements"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False
    )
    height: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    weight: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    chest: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    waist: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    hips: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    inseam: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    shoulders: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    neck_circumference: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    sleeve_length: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    thigh: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    # 아바타 생성 참고용 — Free-form hints for avatar generation
    skin_color: Mapped[str] = mapped_column(String(50), nullable=False, default="")
    description: Mapped[str] = mapped_column(String(500), nullable=False, default="")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(timezone.utc))
    updated_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(timezone.utc), onupdate=lambda: datetime.now(timezone.utc))

    user = relationship("User", back_populates="measurement")
