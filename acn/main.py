# acn/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .catalog import catalog_router
from .config import get_settings
from .storefront import storefront_router
from .upstream import upstream_router

logger = logging.getLogger(__name__)

SERVER_ERROR_MESSAGE = "서버 오류 발생"

# helmet-style defaults, without a Content-Security-Policy
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Strict-Transport-Security": "max-age=15552000; includeSubDomains",
}


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"success": False, "message": message})


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return _error(exc.status_code, str(exc.detail))


async def validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    logger.info("Rejected %s %s: %s", request.method, request.url.path, exc.errors())
    return _error(400, "요청 형식이 올바르지 않습니다.")


async def add_security_headers(request: Request, call_next):
    response = await call_next(request)
    for name, value in SECURITY_HEADERS.items():
        response.headers.setdefault(name, value)
    return response


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.error("❌ 서버 에러: %s %s", request.method, request.url.path, exc_info=exc)
    return _error(500, SERVER_ERROR_MESSAGE)


def create_app() -> FastAPI:
    """Build the storefront API: middleware, error envelopes and routers."""
    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "반려동물 용품 스토어 백엔드: 상품 카탈로그 조회 API와 "
            "유기동물 현황, 쿠팡 상품, 상담 챗봇 프록시."
        ),
        version=settings.app_version,
    )

    app.middleware("http")(add_security_headers)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Render's health check
    @app.get("/health")
    def health_check():
        return {"ok": True}

    app.include_router(catalog_router)
    app.include_router(upstream_router)
    # catch-all, must stay last
    app.include_router(storefront_router)

    logger.info("CORS allowed origins: %s", settings.cors_origins)
    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    _settings = get_settings()
    # deployed behind an HTTPS proxy
    uvicorn.run(
        "acn.main:app",
        host=_settings.host,
        port=_settings.port,
        proxy_headers=True,
        forwarded_allow_ips="*",
    )
