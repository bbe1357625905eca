"""기본 CRUD 레포지토리 — 모든 레포지토리의 부모 클래스.

Base CRUD Repository — Parent class for all domain repositories.
Provides generic Create, Read, Update, Delete operations with owner scoping.

Usage:
    class OutfitRepository(BaseRepository[Outfit]):
        def __init__(self) -> None:
            super().__init__(Outfit)
"""

from typing import Any, Generic, Sequence, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import Base

# 제네릭 타입 변수 — SQLAlchemy 모델을 나타냄
# Generic type variable representing a SQLAlchemy model
ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """제네릭 CRUD 레포지토리.

    Generic CRUD repository providing common database operations.
    All queries are scoped by user_id when an owner is given and the
    model carries a user_id column.

    Attributes:
        model: SQLAlchemy 모델 클래스 (The SQLAlchemy model class)
    """

    def __init__(self, model: type[ModelType]) -> None:
        """레포지토리를 초기화합니다.

        Initialize the repository with a model class.

        Args:
            model: 이 레포지토리가 관리할 SQLAlchemy 모델 클래스
                   (SQLAlchemy model class this repository manages)
        """
        self.model: type[ModelType] = model

    def _scoped(self, query: Select, user_id: int | None) -> Select:
        # 소유자 범위 적용 — Apply owner scope if the model supports it
        if user_id is not None and hasattr(self.model, "user_id"):
            query = query.where(self.model.user_id == user_id)
        return query

    async def get_by_id(
        self,
        db: AsyncSession,
        record_id: int,
        user_id: int | None = None,
    ) -> ModelType | None:
        """ID로 단일 레코드를 조회합니다.

        Retrieve a single record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 조회할 레코드 ID (Primary key of the record)
            user_id: 소유자 범위 필터, None이면 필터 미적용
                     (Owner scope filter; None skips owner filtering)

        Returns:
            ModelType | None: 조회된 레코드 또는 None (Found record or None)
        """
        query: Select = self._scoped(select(self.model).where(self.model.id == record_id), user_id)
        result = await db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        db: AsyncSession,
        user_id: int | None = None,
        order_by: Any | None = None,
    ) -> Sequence[ModelType]:
        """조건에 맞는 모든 레코드를 조회합니다.

        Retrieve all records, optionally scoped to an owner.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user_id: 소유자 범위 필터 (Owner scope filter)
            order_by: 정렬 기준 컬럼 또는 컬럼 튜플 (Column or tuple of columns to order by)

        Returns:
            Sequence[ModelType]: 조회된 레코드 목록 (List of matching records)
        """
        query: Select = self._scoped(select(self.model), user_id)
        if isinstance(order_by, (list, tuple)):
            query = query.order_by(*order_by)
        elif order_by is not None:
            query = query.order_by(order_by)

        result = await db.execute(query)
        return result.scalars().all()

    async def create(
        self,
        db: AsyncSession,
        obj_data: dict[str, Any],
    ) -> ModelType:
        """새 레코드를 생성합니다.

        Create a new record in the database.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            obj_data: 생성할 레코드의 데이터 딕셔너리
                      (Dictionary of data for the new record)

        Returns:
            ModelType: 생성된 레코드 (The created record)
        """
        db_obj: ModelType = self.model(**obj_data)
        db.add(db_obj)
        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def update(
        self,
        db: AsyncSession,
        record_id: int,
        update_data: dict[str, Any],
        user_id: int | None = None,
    ) -> ModelType | None:
        """기존 레코드를 업데이트합니다.

        Update an existing record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 업데이트할 레코드 ID (Primary key of the record)
            update_data: 업데이트할 필드와 값의 딕셔너리
                         (Dictionary of fields and values to update)
            user_id: 소유자 범위 필터 (Owner scope filter)

        Returns:
            ModelType | None: 업데이트된 레코드 또는 None (Updated record or None)
        """
        # 먼저 레코드 존재 여부 확인 — First verify record exists
        db_obj: ModelType | None = await self.get_by_id(db, record_id, user_id)
        if db_obj is None:
            return None

        for field, value in update_data.items():
            if hasattr(db_obj, field):
                setattr(db_obj, field, value)

        await db.flush()
        await db.refresh(db_obj)
        return db_obj

    async def delete(
        self,
        db: AsyncSession,
        record_id: int,
        user_id: int | None = None,
    ) -> bool:
        """레코드를 삭제합니다.

        Delete a record by its primary key.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            record_id: 삭제할 레코드 ID (Primary key of the record)
            user_id: 소유자 범위 필터 (Owner scope filter)

        Returns:
            bool: 삭제 성공 여부 (Whether the deletion was successful)
        """
        db_obj: ModelType | None = await self.get_by_id(db, record_id, user_id)
        if db_obj is None:
            return False

        await db.delete(db_obj)
        await db.flush()
        return True

    async def count(
        self,
        db: AsyncSession,
        user_id: int | None = None,
    ) -> int:
        """레코드 개수를 반환합니다 — Count records, optionally per owner."""
        query: Select = self._scoped(select(func.count()).select_from(self.model), user_id)
        return (await db.execute(query)).scalar() or 0
