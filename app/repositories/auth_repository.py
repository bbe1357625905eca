"""인증 레포지토리 — 리프레시 토큰 CRUD.

Auth Repository — Handles refresh token persistence.
Provides database operations for the session lifecycle: create,
lookup by value, revoke, and lazy purge of expired rows.
"""

from datetime import datetime

from sqlalchemy import Select, delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.token import RefreshToken


class AuthRepository:
    """인증 관련 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling authentication-related database queries.
    Manages the refresh token lifecycle.
    """

    async def create_refresh_token(
        self,
        db: AsyncSession,
        user_id: int,
        token: str,
        expires_at: datetime,
    ) -> RefreshToken:
        """새 리프레시 토큰을 생성합니다.

        Create a new refresh token record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 토큰 소유자 사용자 ID (Token owner user id)
            token: 불투명 리프레시 토큰 문자열 (Opaque refresh token string)
            expires_at: 토큰 만료 일시 (Token expiration timestamp)

        Returns:
            RefreshToken: 생성된 리프레시 토큰 레코드 (Created refresh token record)
        """
        db_token: RefreshToken = RefreshToken(
            user_id=user_id,
            token=token,
            expires_at=expires_at,
            is_revoked=False,
        )
        db.add(db_token)
        await db.flush()
        return db_token

    async def get_refresh_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> RefreshToken | None:
        """리프레시 토큰 문자열로 토큰 레코드를 조회합니다.

        Retrieve a refresh token record by its token string,
        regardless of its revoked or expired state.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            token: 조회할 리프레시 토큰 문자열 (Refresh token string to look up)

        Returns:
            RefreshToken | None: 조회된 토큰 레코드 또는 None (Found token record or None)
        """
        query: Select = select(RefreshToken).where(RefreshToken.token == token)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def revoke_refresh_token(
        self,
        db: AsyncSession,
        token: str,
    ) -> bool:
        """리프레시 토큰을 폐기 상태로 표시합니다.

        Mark a refresh token as revoked. The row is kept until it expires
        and is purged.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            token: 폐기할 리프레시 토큰 문자열 (Refresh token string to revoke)

        Returns:
            bool: 일치하는 토큰이 있었는지 여부 (Whether a matching row existed)
        """
        db_token: RefreshToken | None = await self.get_refresh_token(db, token)
        if db_token is None:
            return False

        db_token.is_revoked = True
        await db.flush()
        return True

    async def delete_expired_refresh_tokens(
        self,
        db: AsyncSession,
        user_id: int,
        now: datetime,
    ) -> None:
        """특정 사용자의 만료된 리프레시 토큰을 삭제합니다.

        Delete every refresh token of a user whose expiry is strictly
        before ``now``, revoked or not.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 대상 사용자 ID (Target user id)
            now: 기준 시각 (Reference time)
        """
        stmt = delete(RefreshToken).where(
            RefreshToken.user_id == user_id,
            RefreshToken.expires_at < now,
        )
        await db.execute(stmt)
        await db.flush()

    async def list_user_refresh_tokens(
        self,
        db: AsyncSession,
        user_id: int,
    ) -> list[RefreshToken]:
        """사용자의 모든 리프레시 토큰을 조회합니다 — All refresh rows of a user."""
        result = await db.execute(
            select(RefreshToken)
            .where(RefreshToken.user_id == user_id)
            .order_by(RefreshToken.id)
        )
        return list(result.scalars().all())


# 싱글턴 인스턴스 — Singleton instance
auth_repository: AuthRepository = AuthRepository()
