"""초기 데이터 시드 스크립트 — 관리자 및 데모 계정 생성.

Seed script — Creates the initial admin and demo users.
Run this script once to bootstrap the database with required initial data.

Usage:
    python -m app.seed

Creates:
    - 관리자 계정: admin / admin@example.com / Admin123! (administrator)
    - 데모 계정: demo / demo@example.com / Demo123! (regular user)
"""

import asyncio

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import async_session, engine, Base
from app.models import User
from app.utils.password import hash_password

# 시드 계정 목록 — (username, email, password, is_admin)
SEED_USERS: list[tuple[str, str, str, bool]] = [
    ("admin", "admin@example.com", "Admin123!", True),
    ("demo", "demo@example.com", "Demo123!", False),
]


async def seed_users(db: AsyncSession) -> bool:
    """사용자가 없을 때만 시드 계정을 추가합니다.

    Insert the seed accounts unless any user already exists.

    Returns:
        bool: 시드 수행 여부 (Whether users were inserted)
    """
    result = await db.execute(select(User.id).limit(1))
    if result.scalar_one_or_none() is not None:
        return False

    for username, email, password, is_admin in SEED_USERS:
        db.add(
            User(
                username=username,
                email=email,
                password_hash=hash_password(password),
                is_admin=is_admin,
            )
        )
    await db.flush()
    return True


async def seed() -> None:
    """데이터베이스를 초기 데이터로 시드합니다.

    Seed the database with initial data.
    Creates tables if they don't exist, then inserts the seed users.

    Idempotent: 이미 시드된 경우 건너뜁니다 (Skips if already seeded).
    """
    # 테이블 생성 — DDL 실행 (Create all tables from ORM metadata)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with async_session() as db:
        if not await seed_users(db):
            print("Already seeded. Skipping.")
            return
        await db.commit()
        print("Seeded: admin/Admin123!, demo/Demo123!")


if __name__ == "__main__":
    asyncio.run(seed())
