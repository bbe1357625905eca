"""사용자 관련 SQLAlchemy ORM 모델 정의.

User SQLAlchemy ORM model definition.
Usernames and emails are globally unique; users log in with their email.

Tables:
    - users: 사용자 계정 (User accounts, optional administrator flag)
"""

from datetime import datetime, timezone
from sqlalchemy import String, Boolean, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base, UTCDateTime


class User(Base):
    """사용자 모델 — 시스템 사용자 계정 정보.

    User model — System user account information.
    Created at registration, never hard-deleted by the auth flows.

    Attributes:
        id: 고유 식별자 (Auto-increment integer primary key)
        username: 로그인 표시 이름 (Unique username)
        email: 이메일 (Unique email, used as login identifier)
        password_hash: bcrypt 해시된 비밀번호 (bcrypt-hashed password)
        is_admin: 관리자 여부 (Administrator flag)
        created_at: 생성 일시 UTC (Creation timestamp)

    Relationships:
        refresh_tokens: 리프레시 토큰 목록 (Refresh tokens, cascade delete)
        measurement: 신체 치수 (Body measurement, one per user)
        outfits: 옷장 아이템 (Wardrobe outfits)
    """

    __tablename__ = "users"

    # 사용자 고유 식별자 — User unique identifier (auto-increment)
    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    # 사용자명 — Username (전역 고유, globally unique)
    username: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    # 이메일 — Email address (로그인 식별자, login identifier)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    # 비밀번호 해시 — bcrypt hashed password (평문 저장 금지, never store plaintext)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)
    # 관리자 여부 — Administrator flag
    is_admin: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # 생성 일시 — Record creation timestamp (UTC)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime, default=lambda: datetime.now(timezone.utc))

    # 관계 — Relationships
    refresh_tokens = relationship("RefreshToken", back_populates="user", cascade="all, delete-orphan")
    measurement = relationship("Measurement", back_populates="user", uselist=False, cascade="all, delete-orphan")
    outfits = relationship("Outfit", back_populates="user", cascade="all, delete-orphan")
