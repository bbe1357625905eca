"""인증 관련 Pydantic 요청/응답 스키마 정의.

Authentication-related Pydantic request/response schema definitions.
Covers registration, login, token refresh, logout, and current user info.
The refresh token itself never appears in a response body; it travels
only in the HttpOnly cookie.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.utils.password import MAX_PASSWORD_BYTES


class RegisterRequest(BaseModel):
    """회원가입 요청 스키마.

    Registration request schema. Used by both /register and /admin-register.

    Attributes:
        username: 사용자명 (Desired username, globally unique)
        email: 이메일 (Email, globally unique, used to log in)
        password: 비밀번호 (Plain text, will be bcrypt-hashed on server)
    """

    username: str = Field(min_length=1, max_length=100)  # 사용자명 — 전역 고유 (Globally unique)
    email: str = Field(min_length=3, max_length=255)  # 이메일 — 로그인 식별자 (Login identifier)
    password: str = Field(min_length=1)  # 비밀번호 — 평문, 서버에서 bcrypt 해싱 (Server hashes with bcrypt)

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        # bcrypt는 72바이트까지만 처리 — bcrypt rejects inputs longer than 72 bytes
        if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValueError(f"Password must be at most {MAX_PASSWORD_BYTES} bytes")
        return value


class LoginRequest(BaseModel):
    """로그인 요청 스키마.

    Login request schema for user and admin login.

    Attributes:
        email: 이메일 (Login identifier)
        password: 비밀번호 (Plain text password, verified against bcrypt hash)
    """

    email: str  # 이메일 (Login identifier)
    password: str  # 비밀번호 — 평문, 서버에서 bcrypt 해시와 비교 (Plain text, compared to bcrypt hash)


class LoginResponse(BaseModel):
    """로그인 응답 스키마.

    Login response schema. The refresh token is set as a cookie.

    Attributes:
        username: 사용자명 (Username)
        token: JWT 액세스 토큰 (Short-lived access token)
    """

    username: str
    token: str  # JWT 액세스 토큰 — 만료: 15분 기본 (Access token, default TTL: 15min)


class RefreshResponse(BaseModel):
    """토큰 갱신 응답 스키마.

    Refresh response schema. A new refresh cookie is set alongside.
    """

    id: int
    username: str
    email: str
    token: str  # 새 JWT 액세스 토큰 (New access token)


class UserMeResponse(BaseModel):
    """현재 사용자 정보 응답 스키마 (GET /me).

    Current user info response schema for the /me endpoint.

    Attributes:
        id: 사용자 ID (User identifier)
        username: 사용자명 (Username)
        email: 이메일 (Email)
        is_admin: 관리자 여부 (Administrator flag)
    """

    id: int
    username: str
    email: str
    is_admin: bool


class SessionTokens(BaseModel):
    """세션 발급 결과 — 라우터 내부 전달용 (응답 본문에 직접 사용하지 않음).

    Result of session issuance, passed from the service to the router.
    The router puts ``access_token`` in the body and ``refresh_token``
    in the cookie.
    """

    access_token: str
    refresh_token: str
    refresh_expires_at: datetime


class AuthContext(BaseModel):
    """인증된 요청 컨텍스트.

    Authenticated request context produced by the authorization gate.
    Passed explicitly into every service call as the tenant-isolation key.

    Attributes:
        user_id: 검증된 사용자 ID (Validated subject id)
        claims: 검증된 JWT 클레임 (Validated JWT claims)
    """

    user_id: int
    claims: dict[str, Any] = {}
