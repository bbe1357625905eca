"""JWT 액세스 토큰 생성 및 검증 유틸리티 모듈.

JWT access token creation and verification utility module.
Refresh tokens are opaque random strings stored in the database and are
not JWTs; only access tokens are signed here.

JWT Payload Structure:
    {
        "sub": "42",                    # 사용자 ID (User identifier, string)
        "unique_name": "demo",          # 사용자명 (Username)
        "email": "demo@example.com",    # 이메일 (Email)
        "jti": "3f2a...",               # 고유 토큰 ID (Unique token id)
        "iat": 1234567000,              # 발급 시간 (Issued at)
        "nbf": 1234567000,              # 유효 시작 시간 (Not before)
        "exp": 1234567900,              # 만료 시간 (Expiration)
        "iss": "fiton-server",          # 발급자 (Issuer)
        "aud": "fiton-client"           # 대상 (Audience)
    }

Signing Key:
    설정된 비밀키가 32바이트 미만이면 0x00으로 오른쪽 패딩합니다.
    A secret shorter than 256 bits is right-padded with zero bytes up to
    the HS256 minimum key size. This is a known weakening compared to a
    hash-based derivation and is kept for compatibility with issued tokens.
"""

import uuid
from datetime import datetime, timezone
from typing import Any

import jwt

from app.config import TokenConfig
from app.utils.exceptions import UnauthorizedError

# HS256 최소 키 크기 — Minimum HMAC-SHA256 key size in bytes
MIN_KEY_BYTES: int = 32

# 사용자 ID 클레임 별칭 — Claim names that may carry the user id, in priority order
SUBJECT_CLAIM_ALIASES: tuple[str, ...] = (
    "sub",
    "nameid",
    "http://schemas.xmlsoap.org/ws/2005/05/identity/claims/nameidentifier",
    "userid",
    "id",
)


def derive_signing_key(secret: str) -> bytes:
    """비밀키 문자열을 HMAC 서명 키 바이트로 변환합니다.

    Encode the secret as UTF-8 and right-pad with zero bytes to 32 bytes.

    Args:
        secret: 설정된 비밀키 (Configured secret)

    Returns:
        bytes: 서명 키 (Signing key bytes, at least 32 bytes long)
    """
    key: bytes = secret.encode("utf-8")
    if len(key) < MIN_KEY_BYTES:
        key = key.ljust(MIN_KEY_BYTES, b"\0")
    return key


def create_access_token(
    config: TokenConfig,
    user_id: int,
    username: str,
    email: str,
    now: datetime | None = None,
) -> str:
    """JWT 액세스 토큰을 생성합니다.

    Generate a signed access token for a user.
    Token expires after ``config.access_ttl`` (default: 15 min).

    Args:
        config: 토큰 설정 (Token configuration)
        user_id: 사용자 ID (Subject)
        username: 사용자명 (unique_name claim)
        email: 이메일 (email claim)
        now: 기준 시각, 테스트용 (Issue time override, defaults to current UTC)

    Returns:
        str: 인코딩된 JWT 문자열 (Encoded JWT token string)
    """
    issued_at: datetime = now or datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "sub": str(user_id),
        "unique_name": username,
        "email": email,
        "jti": uuid.uuid4().hex,
        "iat": issued_at,
        "nbf": issued_at,
        "exp": issued_at + config.access_ttl,
        "iss": config.issuer,
        "aud": config.audience,
    }
    return jwt.encode(payload, derive_signing_key(config.secret), algorithm=config.algorithm)


def decode_access_token(config: TokenConfig, token: str) -> dict[str, Any]:
    """JWT 액세스 토큰을 디코딩하고 검증합니다.

    Verify signature, issuer, audience and the [nbf, exp] window
    (no clock skew allowance).

    Raises:
        jwt.ExpiredSignatureError: 토큰 만료 시 (When token has expired)
        jwt.InvalidTokenError: 유효하지 않은 토큰 (Any other validation failure)
    """
    return jwt.decode(
        token,
        derive_signing_key(config.secret),
        algorithms=[config.algorithm],
        audience=config.audience,
        issuer=config.issuer,
        options={"require": ["exp", "nbf", "iss", "aud"]},
    )


def extract_subject_id(claims: dict[str, Any]) -> int:
    """클레임에서 사용자 ID를 정규화하여 추출합니다.

    Normalize the user id out of a claim set. The first alias present wins;
    the value must parse as an integer.

    Raises:
        UnauthorizedError: 사용자 ID가 없거나 정수가 아닐 때 (Missing or non-numeric subject)
    """
    for name in SUBJECT_CLAIM_ALIASES:
        value = claims.get(name)
        if value is None or value == "":
            continue
        try:
            return int(value)
        except (TypeError, ValueError):
            raise UnauthorizedError("Invalid token subject")
    raise UnauthorizedError("Invalid token subject")
