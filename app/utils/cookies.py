"""리프레시 토큰 쿠키 설정/삭제 유틸리티.

Refresh token cookie helpers. The cookie is HttpOnly and scoped to ``/``.
Outside development it is also ``Secure`` with ``SameSite=None`` so the
cross-site SPA can send it; in development it is non-secure with
``SameSite=Lax``.
"""

from datetime import datetime

from starlette.responses import Response

from app.config import TokenConfig


def set_refresh_cookie(
    response: Response,
    config: TokenConfig,
    token: str,
    expires_at: datetime,
) -> None:
    """리프레시 토큰 쿠키를 응답에 추가합니다.

    Attach the refresh token cookie, expiring together with the token row.
    """
    response.set_cookie(
        key=config.cookie_name,
        value=token,
        expires=expires_at,
        path="/",
        httponly=True,
        secure=config.secure_cookies,
        samesite="none" if config.secure_cookies else "lax",
    )


def clear_refresh_cookie(response: Response, config: TokenConfig) -> None:
    """리프레시 토큰 쿠키를 삭제합니다 — Expire the refresh token cookie."""
    response.delete_cookie(
        key=config.cookie_name,
        path="/",
        httponly=True,
        secure=config.secure_cookies,
        samesite="none" if config.secure_cookies else "lax",
    )
