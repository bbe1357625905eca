"""리프레시 토큰 모델 — 쿠키로 전달되는 세션 토큰 저장.

Refresh Token model — Stores opaque refresh tokens for session management.
Each token is bound to a specific user, has an absolute expiration timestamp,
and can be revoked on logout without being deleted.
"""

from datetime import datetime, timezone

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, UTCDateTime


class RefreshToken(Base):
    """리프레시 토큰 테이블.

    Refresh token table for managing long-lived authentication sessions.

    Attributes:
        id: 고유 식별자 (Primary key)
        user_id: 소유 사용자 ID (Owner user id)
        token: 불투명 토큰 문자열 (Opaque random token string, unique)
        expires_at: 만료 일시 (Expiration timestamp)
        is_revoked: 폐기 여부 (Set on logout)
        created_at: 생성 일시 (Creation timestamp)
    """

    __tablename__ = "refresh_tokens"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    token: Mapped[str] = mapped_column(String(512), unique=True, nullable=False)
    expires_at: Mapped[datetime] = mapped_column(UTCDateTime, nullable=False)
    is_revoked: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime, default=lambda: datetime.now(timezone.utc)
    )

    # Relationships
    user = relationship("User", back_populates="refresh_tokens")
