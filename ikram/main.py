import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import Response

from ikram.config import settings
from ikram.logging_config import setup_logging
from ikram.rate_limit import limiter
from ikram.routers import (
    analytics_api, auth, clients, events_api, expenses_api, menu_api,
    packages_api, payments_api, public, quotations_api, settings_api,
)

# Loglama sistemini baslat (uygulama ayaga kalkmadan once)
setup_logging()

logger = logging.getLogger(__name__)

app = FastAPI(
    title=settings.APP_NAME,
    description="Catering isletmeleri icin teklif, etkinlik ve gider yonetimi",
    version="0.1.0",
)

logger.info("%s uygulamasi baslatiliyor...", settings.APP_NAME)

# slowapi'yi FastAPI state'e bagla
app.state.limiter = limiter

# ---------------------------------------------------------------------------
# CORS Ayarlari (admin paneli + musteri teklif sayfasi)
# ---------------------------------------------------------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_methods=["*"],
    allow_headers=["*"],
    allow_credentials=True,
)


# ---------------------------------------------------------------------------
# Guvenlik Header'lari Middleware
# ---------------------------------------------------------------------------
class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Her yanita guvenlik header'lari ekler."""

    async def dispatch(self, request: Request, call_next) -> Response:
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


app.add_middleware(SecurityHeadersMiddleware)


# ---------------------------------------------------------------------------
# Hata yakalayicilar (hepsi JSON doner)
# ---------------------------------------------------------------------------
@app.exception_handler(RateLimitExceeded)
async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning("Rate limit asildi: %s %s", request.method, request.url)
    return JSONResponse(
        status_code=429,
        content={
            "detail": "Cok fazla istek gonderdiniz. Lutfen biraz bekleyip tekrar deneyin.",
            "retry_after": exc.detail,
        },
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code >= 500:
        logger.error("HTTP %d hatasi: %s %s (%s)", exc.status_code, request.method, request.url, exc.detail)
    else:
        logger.warning("HTTP %d hatasi: %s %s", exc.status_code, request.method, request.url)
    return JSONResponse(
        status_code=exc.status_code,
        content={"detail": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error("Yakalanmamis hata: %s %s", request.method, request.url, exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"detail": "Beklenmeyen bir hata olustu"},
    )


# API Router'lari
app.include_router(auth.router, prefix="/api/v1/auth", tags=["Kimlik Dogrulama"])
app.include_router(clients.router, prefix="/api/v1/clients", tags=["Musteriler"])
app.include_router(menu_api.router, prefix="/api/v1/menu", tags=["Menu"])
app.include_router(packages_api.router, prefix="/api/v1/packages", tags=["Paketler"])
app.include_router(quotations_api.router, prefix="/api/v1/quotations", tags=["Teklifler"])
app.include_router(events_api.router, prefix="/api/v1/events", tags=["Etkinlikler"])
app.include_router(payments_api.router, prefix="/api/v1/payments", tags=["Odemeler"])
app.include_router(expenses_api.router, prefix="/api/v1/expenses", tags=["Siparis Giderleri"])
app.include_router(settings_api.router, prefix="/api/v1/settings", tags=["Isletme Ayarlari"])
app.include_router(analytics_api.router, prefix="/api/v1/analytics", tags=["Raporlar"])

# Musteri tarafi (giris gerektirmez)
app.include_router(public.router, prefix="/api/v1/public", tags=["Musteri Teklif Sayfasi"])


@app.get("/health", include_in_schema=False)
def health():
    return {"status": "ok", "app": settings.APP_NAME}
