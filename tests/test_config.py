"""설정 및 쿠키 정책 테스트.

Settings validation and environment-dependent refresh cookie policy tests.
"""

from datetime import datetime, timedelta, timezone

import pytest
from pydantic import ValidationError
from starlette.responses import Response

from app.config import INSECURE_DEFAULT_SECRET, Settings
from app.utils.cookies import clear_refresh_cookie, set_refresh_cookie


def _cookie_attrs(response: Response) -> list[str]:
    header = response.headers["set-cookie"]
    return [a.strip().lower() for a in header.split(";")[1:]]


class TestSettings:
    """환경 설정 검증 테스트."""

    def test_development_defaults(self):
        s = Settings(ENVIRONMENT="development")
        config = s.token_config
        assert s.is_development
        assert config.issuer == "fiton-server"
        assert config.audience == "fiton-client"
        assert config.access_ttl == timedelta(minutes=15)
        assert config.refresh_ttl == timedelta(days=7)
        assert config.cookie_name == "refreshToken"
        assert config.secure_cookies is False

    def test_production_rejects_default_secret(self):
        """운영 환경에서 기본 비밀키 사용 시 시작 실패."""
        with pytest.raises(ValidationError):
            Settings(ENVIRONMENT="production", JWT_SECRET_KEY=INSECURE_DEFAULT_SECRET)

    def test_production_with_secret(self):
        s = Settings(ENVIRONMENT="production", JWT_SECRET_KEY="a-real-production-secret")
        assert not s.is_development
        assert s.token_config.secure_cookies is True

    def test_custom_lifetimes(self):
        s = Settings(JWT_ACCESS_TOKEN_EXPIRE_MINUTES=5, JWT_REFRESH_TOKEN_EXPIRE_DAYS=30)
        assert s.token_config.access_ttl == timedelta(minutes=5)
        assert s.token_config.refresh_ttl == timedelta(days=30)


class TestRefreshCookiePolicy:
    """환경별 리프레시 쿠키 속성 테스트."""

    def test_development_cookie(self):
        config = Settings(ENVIRONMENT="development").token_config
        response = Response()
        set_refresh_cookie(response, config, "tok", datetime.now(timezone.utc) + timedelta(days=7))

        attrs = _cookie_attrs(response)
        assert response.headers["set-cookie"].startswith("refreshToken=tok;")
        assert "httponly" in attrs
        assert "path=/" in attrs
        assert "samesite=lax" in attrs
        assert "secure" not in attrs

    def test_production_cookie(self):
        """운영 환경 — Secure + SameSite=None."""
        config = Settings(ENVIRONMENT="production", JWT_SECRET_KEY="prod-secret").token_config
        response = Response()
        set_refresh_cookie(response, config, "tok", datetime.now(timezone.utc) + timedelta(days=7))

        attrs = _cookie_attrs(response)
        assert "secure" in attrs
        assert "samesite=none" in attrs
        assert "httponly" in attrs

    def test_clear_cookie(self):
        config = Settings(ENVIRONMENT="development").token_config
        response = Response()
        clear_refresh_cookie(response, config)

        assert response.headers["set-cookie"].startswith("refreshToken=")
        assert "max-age=0" in _cookie_attrs(response)
