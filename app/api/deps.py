"""FastAPI 의존성 주입 모듈 — 인증 및 권한 검사.

FastAPI dependency injection module — Authentication and authorization.
Provides reusable dependencies that turn the bearer access token into an
explicit AuthContext and enforce the administrator flag.

Authentication Flow:
    1. 클라이언트가 Authorization: Bearer <token> 헤더를 전송
       (Client sends Authorization: Bearer <token> header)
    2. HTTPBearer가 토큰을 추출 (HTTPBearer extracts the token)
    3. auth_service.authenticate()가 서명, 발급자, 대상, 유효 기간을 검증
       (Signature, issuer, audience and lifetime are verified)
    4. 사용자 ID 클레임을 한 번만 정규화하여 AuthContext로 반환
       (The subject claim is normalized once into AuthContext.user_id)

AuthContext.user_id는 모든 하위 데이터 접근의 유일한 소유자 키입니다.
AuthContext.user_id is the only owner key used by downstream data access;
request bodies never supply an owner id.
"""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.ext.asyncio import AsyncSession

from app.database import get_db
from app.models.user import User
from app.schemas.auth import AuthContext
from app.services.auth_service import auth_service
from app.utils.exceptions import ForbiddenError, UnauthorizedError

# HTTP Bearer 토큰 추출기 — 누락 시 401을 직접 발생시키기 위해 auto_error=False
# (Extracts the bearer token; missing credentials are turned into 401 below)
security: HTTPBearer = HTTPBearer(auto_error=False)


async def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
) -> AuthContext:
    """Bearer 토큰에서 인증 컨텍스트를 추출합니다.

    Validate the access token from the Authorization header.
    Stateless: no database lookup is performed.

    Args:
        credentials: HTTP Bearer 토큰 자격 증명 (Bearer token credentials from header)

    Returns:
        AuthContext: 인증 컨텍스트 (Validated user id and claims)

    Raises:
        UnauthorizedError: 토큰 누락, 위조, 만료 (Missing, forged or expired token)
    """
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError("Authentication required")
    return auth_service.authenticate(credentials.credentials)


async def require_admin(
    auth: Annotated[AuthContext, Depends(get_current_user)],
    db: Annotated[AsyncSession, Depends(get_db)],
) -> AuthContext:
    """관리자 권한 검사 의존성.

    Require the authenticated user to carry the administrator flag.

    Raises:
        UnauthorizedError: 사용자가 존재하지 않을 때 (Subject no longer exists)
        ForbiddenError: 관리자가 아닐 때 (Not an administrator)
    """
    user: User | None = await auth_service.get_user(db, auth)
    if user is None:
        raise UnauthorizedError("User not found")
    if not user.is_admin:
        raise ForbiddenError()
    return auth
