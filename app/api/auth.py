"""인증 라우터 — 회원가입, 로그인, 토큰 갱신, 로그아웃, 프로필 조회.

Auth Router — Registration, login, token refresh, logout, and profile endpoints.
The refresh token travels only in the HttpOnly cookie; response bodies
carry the access token.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_current_user, require_admin
from app.database import get_db
from app.schemas.auth import (
    AuthContext,
    LoginRequest,
    LoginResponse,
    RefreshResponse,
    RegisterRequest,
    UserMeResponse,
)
from app.schemas.common import MessageResponse
from app.schemas.dashboard import AdminUserResponse
from app.services.auth_service import auth_service
from app.services.dashboard_service import dashboard_service
from app.utils.cookies import clear_refresh_cookie, set_refresh_cookie

router: APIRouter = APIRouter()


def _refresh_cookie(request: Request) -> str | None:
    return request.cookies.get(auth_service.config.cookie_name)


@router.post("/register", status_code=200, response_class=Response)
async def register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """회원가입 — 일반 사용자 계정 생성.

    Register a user. Returns 200 with an empty body, 400 on duplicates.
    """
    await auth_service.register(db, data)
    await db.commit()
    return Response(status_code=status.HTTP_200_OK)


@router.post("/admin-register", status_code=200, response_class=Response)
async def admin_register(
    data: RegisterRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> Response:
    """관리자 회원가입 — 관리자 계정 생성.

    Register an administrator account.
    """
    await auth_service.register(db, data, is_admin=True)
    await db.commit()
    return Response(status_code=status.HTTP_200_OK)


@router.post("/login", response_model=LoginResponse)
async def login(
    data: LoginRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LoginResponse:
    """로그인 — 액세스 토큰 반환 및 리프레시 쿠키 설정.

    Login endpoint. Returns the access token and sets the refresh cookie.
    """
    user, tokens = await auth_service.login(db, data)
    await db.commit()
    set_refresh_cookie(response, auth_service.config, tokens.refresh_token, tokens.refresh_expires_at)
    return LoginResponse(username=user.username, token=tokens.access_token)


@router.post("/admin-login", response_model=LoginResponse)
async def admin_login(
    data: LoginRequest,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> LoginResponse:
    """관리자 로그인 — 관리자가 아니면 401.

    Admin login endpoint. Non-admin accounts get the same 401 as bad credentials.
    """
    user, tokens = await auth_service.login(db, data, admin_only=True)
    await db.commit()
    set_refresh_cookie(response, auth_service.config, tokens.refresh_token, tokens.refresh_expires_at)
    return LoginResponse(username=user.username, token=tokens.access_token)


@router.post("/refresh", response_model=RefreshResponse)
async def refresh_token(
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> RefreshResponse:
    """토큰 갱신 — 리프레시 쿠키로 새 액세스 토큰 발급.

    Refresh endpoint. Issues a new access token and a new refresh cookie.
    """
    user, tokens = await auth_service.refresh(db, _refresh_cookie(request))
    await db.commit()
    set_refresh_cookie(response, auth_service.config, tokens.refresh_token, tokens.refresh_expires_at)
    return RefreshResponse(
        id=user.id,
        username=user.username,
        email=user.email,
        token=tokens.access_token,
    )


@router.post("/logout", response_model=MessageResponse)
async def logout(
    request: Request,
    response: Response,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> MessageResponse:
    """로그아웃 — 리프레시 토큰 폐기 및 쿠키 삭제.

    Logout endpoint. Revokes the cookie's refresh token (if any) and
    always clears the cookie.
    """
    await auth_service.logout(db, _refresh_cookie(request))
    await db.commit()
    clear_refresh_cookie(response, auth_service.config)
    return MessageResponse(message="Logged out")


@router.get("/me", response_model=UserMeResponse)
async def get_me(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(get_current_user)],
) -> UserMeResponse:
    """현재 사용자 프로필 조회.

    Get the profile of the currently authenticated user.
    """
    return await auth_service.get_me(db, auth)


@router.get("/users", response_model=list[AdminUserResponse])
async def list_users(
    db: Annotated[AsyncSession, Depends(get_db)],
    auth: Annotated[AuthContext, Depends(require_admin)],
) -> list[AdminUserResponse]:
    """사용자 목록 조회 — 관리자 전용.

    List all users. Administrators only.
    """
    return await dashboard_service.list_users(db)
