"""Rate limiting yapilandirmasi (slowapi)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from ikram.config import settings

# Client IP bazli rate limiter
# Global limit: dakikada 120 istek
# Herkese acik teklif cevabi icin ayrica settings.RESPONSE_RATE_LIMIT uygulanir
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=["120/minute"],
    enabled=settings.RATE_LIMIT_ENABLED,
)
