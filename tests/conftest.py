"""테스트 인프라 — 인메모리 SQLite DB, 세션, httpx 클라이언트 픽스처.

Test infrastructure — In-memory SQLite DB, session, and httpx client fixtures.
Schema is created for every test on a fresh aiosqlite engine, so no
database server is required.
"""

from collections.abc import AsyncGenerator
from datetime import datetime

import httpx
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from app.config import settings
from app.database import Base, get_db
from app.main import app
from app.models import *  # noqa: F401,F403 — register all models with metadata
from app.models.token import RefreshToken
from app.models.user import User
from app.utils.jwt import create_access_token
from app.utils.password import hash_password

# ---------------------------------------------------------------------------
# 테스트 DB 설정
# ---------------------------------------------------------------------------
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

COOKIE_NAME = settings.REFRESH_TOKEN_COOKIE_NAME


# ---------------------------------------------------------------------------
# Function-scoped: 엔진, 세션, 클라이언트
# ---------------------------------------------------------------------------
@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """테스트용 async 엔진. 매 테스트마다 스키마를 새로 생성합니다."""
    eng = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield eng

    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine: AsyncEngine) -> AsyncGenerator[AsyncSession, None]:
    """각 테스트에 격리된 DB 세션을 제공합니다."""
    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """FastAPI 테스트 클라이언트 — DB 세션을 오버라이드합니다."""
    async def _override_get_db() -> AsyncGenerator[AsyncSession, None]:
        yield db

    app.dependency_overrides[get_db] = _override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


# ---------------------------------------------------------------------------
# 헬퍼 픽스처: 테스트용 데이터 생성
# ---------------------------------------------------------------------------
async def _create_user(
    db: AsyncSession, username: str, email: str, password: str, is_admin: bool = False
) -> User:
    user = User(
        username=username,
        email=email,
        password_hash=hash_password(password),
        is_admin=is_admin,
    )
    db.add(user)
    await db.flush()
    await db.refresh(user)
    await db.commit()
    return user


@pytest_asyncio.fixture
async def demo_user(db: AsyncSession) -> User:
    """데모 사용자를 생성합니다."""
    return await _create_user(db, "demo", "demo@example.com", "Demo123!")


@pytest_asyncio.fixture
async def other_user(db: AsyncSession) -> User:
    """다른 테넌트 사용자를 생성합니다."""
    return await _create_user(db, "other", "other@example.com", "Other123!")


@pytest_asyncio.fixture
async def admin_user(db: AsyncSession) -> User:
    """관리자 사용자를 생성합니다."""
    return await _create_user(db, "admin", "admin@example.com", "Admin123!", is_admin=True)


async def add_refresh_token(
    db: AsyncSession,
    user_id: int,
    token: str,
    expires_at: datetime,
    is_revoked: bool = False,
) -> RefreshToken:
    """리프레시 토큰 레코드를 직접 삽입합니다."""
    row = RefreshToken(user_id=user_id, token=token, expires_at=expires_at, is_revoked=is_revoked)
    db.add(row)
    await db.flush()
    await db.commit()
    return row


def make_token(user: User) -> str:
    """테스트용 JWT 액세스 토큰을 생성합니다."""
    return create_access_token(settings.token_config, user.id, user.username, user.email)


@pytest.fixture
def demo_token(demo_user) -> str:
    return make_token(demo_user)


@pytest.fixture
def other_token(other_user) -> str:
    return make_token(other_user)


@pytest.fixture
def admin_token(admin_user) -> str:
    return make_token(admin_user)


def auth_header(token: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"}


def cookie_header(value: str) -> dict[str, str]:
    """리프레시 쿠키를 명시적으로 전송하는 헤더."""
    return {"Cookie": f"{COOKIE_NAME}={value}"}


def refresh_set_cookie(res: httpx.Response) -> str | None:
    """응답의 리프레시 토큰 Set-Cookie 헤더 원문을 반환합니다."""
    for header in res.headers.get_list("set-cookie"):
        if header.split("=", 1)[0].strip() == COOKIE_NAME:
            return header
    return None


def refresh_cookie_value(res: httpx.Response) -> str | None:
    """응답의 Set-Cookie에서 리프레시 토큰 값을 추출합니다."""
    header = refresh_set_cookie(res)
    if header is None:
        return None
    return header.split("=", 1)[1].split(";", 1)[0].strip('"')
