"""인증 서비스 — 회원가입, 로그인, 토큰 갱신, 로그아웃 비즈니스 로직.

Auth Service — Credential and session lifecycle.
Handles password verification, access token issuance, refresh token
issuance/revocation, and the logout/cleanup flow.

Session Model:
    리프레시 시 새 리프레시 토큰을 발급하지만 기존 토큰은 폐기하지 않습니다.
    A refresh mints a new refresh row and leaves the presented one usable
    until it expires or is revoked by logout. A user may therefore hold
    several active refresh tokens at once, and concurrent refreshes with the
    same cookie all succeed. Logout revokes only the presented token.
"""

import secrets
from datetime import datetime, timezone

import jwt
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import TokenConfig, settings
from app.models.token import RefreshToken
from app.models.user import User
from app.repositories.auth_repository import auth_repository
from app.repositories.user_repository import user_repository
from app.schemas.auth import (
    AuthContext,
    LoginRequest,
    RegisterRequest,
    SessionTokens,
    UserMeResponse,
)
from app.utils.exceptions import BadRequestError, DataIntegrityError, UnauthorizedError
from app.utils.jwt import create_access_token, decode_access_token, extract_subject_id
from app.utils.password import DUMMY_PASSWORD_HASH, hash_password, verify_password

# 리프레시 토큰 엔트로피 — 64 random bytes (~512 bits) per refresh token
REFRESH_TOKEN_BYTES: int = 64

# 로그인 실패 메시지 — 이메일 미존재/비밀번호 불일치를 구분하지 않음
# Same message for unknown email and wrong password (no user enumeration)
INVALID_CREDENTIALS: str = "Invalid credentials"
INVALID_REFRESH_TOKEN: str = "Invalid or expired refresh token"


class AuthService:
    """인증 관련 비즈니스 로직을 처리하는 서비스.

    Service handling authentication business logic.
    Token settings are injected at construction instead of being read
    from the environment per request.
    """

    def __init__(self, config: TokenConfig) -> None:
        self.config: TokenConfig = config

    def _to_me_response(self, user: User) -> UserMeResponse:
        return UserMeResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            is_admin=user.is_admin,
        )

    async def _issue_session(
        self,
        db: AsyncSession,
        user: User,
    ) -> SessionTokens:
        """액세스 토큰과 리프레시 토큰을 발급합니다.

        Issue a session for an authenticated user:
        purge the user's expired refresh rows, persist a new refresh row,
        then sign a new access token.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            user: 인증된 사용자 (Authenticated user)

        Returns:
            SessionTokens: 액세스 토큰 + 리프레시 토큰 (Access token and refresh token)
        """
        now: datetime = datetime.now(timezone.utc)

        # 만료 토큰 정리 — Lazy garbage collection of this user's expired rows
        await auth_repository.delete_expired_refresh_tokens(db, user.id, now)

        # 새 리프레시 토큰 저장 — Persist a fresh high-entropy refresh token
        expires_at: datetime = now + self.config.refresh_ttl
        db_token: RefreshToken = await auth_repository.create_refresh_token(
            db,
            user_id=user.id,
            token=secrets.token_urlsafe(REFRESH_TOKEN_BYTES),
            expires_at=expires_at,
        )

        access_token: str = create_access_token(
            self.config, user.id, user.username, user.email, now=now
        )
        return SessionTokens(
            access_token=access_token,
            refresh_token=db_token.token,
            refresh_expires_at=expires_at,
        )

    async def register(
        self,
        db: AsyncSession,
        data: RegisterRequest,
        is_admin: bool = False,
    ) -> User:
        """회원가입을 처리합니다.

        Create a user. Duplicates are rejected before any hashing work.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 회원가입 요청 데이터 (Registration request data)
            is_admin: 관리자 계정 여부 (Create an administrator)

        Returns:
            User: 생성된 사용자 (Created user)

        Raises:
            BadRequestError: 사용자명 또는 이메일이 이미 존재할 때
                             (Username or email already taken)
        """
        if await user_repository.exists_by_username_or_email(db, data.username, data.email):
            raise BadRequestError("Username or email already exists")

        try:
            return await user_repository.create(
                db,
                {
                    "username": data.username,
                    "email": data.email,
                    "password_hash": hash_password(data.password),
                    "is_admin": is_admin,
                },
            )
        except IntegrityError:
            # 동시 가입 경합 — Lost a race against a concurrent registration
            await db.rollback()
            raise BadRequestError("Username or email already exists")

    async def login(
        self,
        db: AsyncSession,
        data: LoginRequest,
        admin_only: bool = False,
    ) -> tuple[User, SessionTokens]:
        """로그인을 처리합니다.

        Verify credentials and issue a session. Unknown emails are still
        checked against a dummy hash so both failure branches cost one
        bcrypt verification.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            data: 로그인 요청 데이터 (Login request data)
            admin_only: 관리자만 허용 (Reject non-admin accounts)

        Returns:
            tuple[User, SessionTokens]: 사용자와 발급된 토큰 (User and issued tokens)

        Raises:
            UnauthorizedError: 잘못된 인증 정보일 때 (Invalid credentials)
        """
        user: User | None = await user_repository.get_by_email(db, data.email)
        if user is None:
            verify_password(data.password, DUMMY_PASSWORD_HASH)
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not verify_password(data.password, user.password_hash):
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if admin_only and not user.is_admin:
            raise UnauthorizedError(INVALID_CREDENTIALS)

        return user, await self._issue_session(db, user)

    async def refresh(
        self,
        db: AsyncSession,
        refresh_token: str | None,
    ) -> tuple[User, SessionTokens]:
        """리프레시 토큰으로 새 세션을 발급합니다.

        Validate the refresh token from the cookie and issue a new session.
        The presented token is not revoked.

        Args:
            db: 비동기 데이터베이스 세션 (Async database session)
            refresh_token: 쿠키의 리프레시 토큰 (Refresh token from the cookie)

        Returns:
            tuple[User, SessionTokens]: 사용자와 새 토큰 (User and new tokens)

        Raises:
            UnauthorizedError: 쿠키 없음, 토큰 없음, 폐기됨, 만료됨
                               (Missing, unknown, revoked or expired token)
            DataIntegrityError: 토큰 소유 사용자가 존재하지 않을 때
                                (Token references a missing user)
        """
        if not refresh_token:
            raise UnauthorizedError(INVALID_REFRESH_TOKEN)

        db_token: RefreshToken | None = await auth_repository.get_refresh_token(db, refresh_token)
        if db_token is None or db_token.is_revoked:
            raise UnauthorizedError(INVALID_REFRESH_TOKEN)

        # 만료 확인 — 물리 삭제 전이라도 만료 토큰은 무효 (Expired rows are invalid before purge)
        if db_token.expires_at < datetime.now(timezone.utc):
            raise UnauthorizedError(INVALID_REFRESH_TOKEN)

        user: User | None = await user_repository.get_by_id(db, db_token.user_id)
        if user is None:
            raise DataIntegrityError(
                f"Refresh token {db_token.id} references missing user {db_token.user_id}"
            )

        return user, await self._issue_session(db, user)

    async def logout(
        self,
        db: AsyncSession,
        refresh_token: str | None,
    ) -> None:
        """로그아웃 처리 — 제시된 리프레시 토큰을 폐기합니다.

        Revoke the presented refresh token if it exists. Idempotent.
        """
        if refresh_token:
            await auth_repository.revoke_refresh_token(db, refresh_token)

    def authenticate(self, access_token: str) -> AuthContext:
        """액세스 토큰을 검증하고 인증 컨텍스트를 반환합니다.

        Validate a bearer access token and normalize its subject.

        Raises:
            UnauthorizedError: 서명, 발급자, 대상, 유효 기간 검증 실패
                               (Signature, issuer, audience or lifetime check failed)
        """
        try:
            claims: dict = decode_access_token(self.config, access_token)
        except jwt.InvalidTokenError:
            raise UnauthorizedError("Invalid or expired token")
        return AuthContext(user_id=extract_subject_id(claims), claims=claims)

    async def get_me(
        self,
        db: AsyncSession,
        auth: AuthContext,
    ) -> UserMeResponse:
        """현재 로그인한 사용자 프로필을 반환합니다.

        Return the profile of the authenticated user.

        Raises:
            UnauthorizedError: 토큰의 사용자가 존재하지 않을 때 (Subject no longer exists)
        """
        user: User | None = await user_repository.get_by_id(db, auth.user_id)
        if user is None:
            raise UnauthorizedError("User not found")
        return self._to_me_response(user)

    async def get_user(self, db: AsyncSession, auth: AuthContext) -> User | None:
        return await user_repository.get_by_id(db, auth.user_id)


# 싱글턴 인스턴스 — Singleton instance
auth_service: AuthService = AuthService(settings.token_config)
