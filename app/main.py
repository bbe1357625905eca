"""FastAPI 애플리케이션 엔트리포인트 — 미들웨어, 예외 핸들러 및 라우터 등록.

FastAPI application entry point — Middleware, exception handler and router registration.
Configures CORS (with credentials, for the refresh cookie), health check,
and includes the auth, measurements, wardrobe and dashboard routers.
"""

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import settings
from app.middleware.axiom_logging import AxiomLoggingMiddleware
from app.utils.exceptions import DataIntegrityError, UnauthorizedError

app: FastAPI = FastAPI(
    title=settings.APP_NAME,
    version="1.0.0",
    docs_url="/docs" if settings.is_development else None,
    redoc_url="/redoc" if settings.is_development else None,
)

# Axiom API 로깅 미들웨어 — Axiom API request/response logging
# CORS보다 먼저 등록하여 모든 요청을 캡처 (Registered before CORS to capture all requests)
app.add_middleware(AxiomLoggingMiddleware)

# CORS 미들웨어 — 쿠키 전송을 위해 명시적 출처 + credentials 허용
# (Explicit origins with credentials so browsers send the refresh cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(UnauthorizedError)
async def unauthorized_handler(request: Request, exc: UnauthorizedError) -> JSONResponse:
    """인증 실패 응답 — 모든 401은 동일한 최소 형식 {"error": ...}.

    Uniform minimal payload for every authentication failure.
    """
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=exc.headers,
    )


@app.exception_handler(DataIntegrityError)
async def data_integrity_handler(request: Request, exc: DataIntegrityError) -> JSONResponse:
    """데이터 무결성 위반 — 서버 결함으로 500 반환.

    Data-integrity violations are server faults, not user errors.
    """
    return JSONResponse(
        status_code=500,
        content={"detail": "Internal server error"},
    )


@app.get("/health")
async def health_check() -> dict[str, str]:
    """서버 상태 확인 엔드포인트.

    Health check endpoint for load balancers and monitoring.
    """
    return {"status": "ok"}


# ---------------------------------------------------------------------------
# 라우터 등록 — Router registration
# ---------------------------------------------------------------------------
from app.api.auth import router as auth_router  # noqa: E402
from app.api.dashboard import router as dashboard_router  # noqa: E402
from app.api.measurements import router as measurements_router  # noqa: E402
from app.api.wardrobe import router as wardrobe_router  # noqa: E402

app.include_router(auth_router, prefix="/api/auth", tags=["Auth"])
app.include_router(measurements_router, prefix="/api/avatar/measurements", tags=["Measurements"])
app.include_router(wardrobe_router, prefix="/api/wardrobe", tags=["Wardrobe"])
app.include_router(dashboard_router, prefix="/api/dashboard", tags=["Dashboard"])
