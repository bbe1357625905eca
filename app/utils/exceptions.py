"""커스텀 예외 클래스 모듈.

Custom exception classes module.
Provides pre-configured HTTPException subclasses for common error patterns.
These simplify error raising across services and repositories by
eliminating the need to specify status codes at each call site.

Usage:
    from app.utils.exceptions import NotFoundError, BadRequestError
    raise NotFoundError("Outfit not found")
    raise BadRequestError("Username or email already exists")
"""

from fastapi import HTTPException, status


class NotFoundError(HTTPException):
    """404 Not Found 예외 — 요청한 리소스를 찾을 수 없을 때 사용.

    404 Not Found exception.
    Raised when a requested resource (measurement, outfit, etc.) does not exist
    or is not owned by the caller.

    Args:
        detail: 오류 메시지 (Error message, default: "Resource not found")
    """

    def __init__(self, detail: str = "Resource not found") -> None:
        super().__init__(status_code=status.HTTP_404_NOT_FOUND, detail=detail)


class ForbiddenError(HTTPException):
    """403 Forbidden 예외 — 권한 부족 시 사용.

    403 Forbidden exception.
    Raised when the authenticated user lacks the administrator flag.

    Args:
        detail: 오류 메시지 (Error message, default: "Insufficient permissions")
    """

    def __init__(self, detail: str = "Insufficient permissions") -> None:
        super().__init__(status_code=status.HTTP_403_FORBIDDEN, detail=detail)


class UnauthorizedError(HTTPException):
    """401 Unauthorized 예외 — 인증 실패 시 사용.

    401 Unauthorized exception.
    Raised when authentication is missing, invalid, or expired
    (e.g. missing bearer token, revoked refresh token, invalid credentials).
    Rendered as ``{"error": detail}`` by the handler in ``app.main``.

    Args:
        detail: 오류 메시지 (Error message, default: "Authentication required")
    """

    def __init__(self, detail: str = "Authentication required") -> None:
        super().__init__(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=detail,
            headers={"WWW-Authenticate": "Bearer"},
        )


class BadRequestError(HTTPException):
    """400 Bad Request 예외 — 잘못된 요청 데이터 시 사용.

    400 Bad Request exception.
    Raised when the request data is invalid beyond what Pydantic validation catches
    (e.g. duplicate username or email at registration).

    Args:
        detail: 오류 메시지 (Error message, default: "Bad request")
    """

    def __init__(self, detail: str = "Bad request") -> None:
        super().__init__(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


class DataIntegrityError(Exception):
    """데이터 무결성 위반 — 사용자 오류가 아닌 서버 결함.

    Data-integrity violation, e.g. a refresh token row whose owning user
    no longer exists. Rendered as HTTP 500 by the handler in ``app.main``.
    """
