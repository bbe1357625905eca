"""사용자 레포지토리 — 사용자 조회 및 생성 쿼리.

User Repository — Lookup and creation queries for users.
Extends BaseRepository with email/username lookups used by the auth flows.
"""

from sqlalchemy import Select, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.measurement import Measurement
from app.models.user import User
from app.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    """사용자 테이블에 대한 데이터베이스 쿼리를 담당하는 레포지토리.

    Repository handling database queries for the users table.
    """

    def __init__(self) -> None:
        """UserRepository를 초기화합니다.

        Initialize the UserRepository with the User model.
        """
        super().__init__(User)

    async def get_by_email(self, db: AsyncSession, email: str) -> User | None:
        """이메일로 사용자를 조회합니다.

        Retrieve a user by email (the login identifier).

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            email: 조회할 이메일 (Email to look up)

        Returns:
            User | None: 조회된 사용자 또는 None (Found user or None)
        """
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def exists_by_username_or_email(
        self,
        db: AsyncSession,
        username: str,
        email: str,
    ) -> bool:
        """사용자명 또는 이메일이 이미 사용 중인지 확인합니다.

        Check whether either the username or the email is already taken.
        """
        query: Select = (
            select(User.id)
            .where(or_(User.username == username, User.email == email))
            .limit(1)
        )
        result = await db.execute(query)
        return result.scalar_one_or_none() is not None

    async def list_users_with_measurement_flag(
        self,
        db: AsyncSession,
    ) -> list[tuple[User, bool]]:
        """전체 사용자와 치수 저장 여부를 ID 순으로 조회합니다.

        All users ordered by id, each paired with whether a measurement
        row exists for them.
        """
        query: Select = (
            select(User, Measurement.id.is_not(None))
            .outerjoin(Measurement, Measurement.user_id == User.id)
            .order_by(User.id)
        )
        result = await db.execute(query)
        return [(user, bool(has_measurement)) for user, has_measurement in result.all()]


# 싱글턴 인스턴스 — Singleton instance
user_repository: UserRepository = UserRepository()
