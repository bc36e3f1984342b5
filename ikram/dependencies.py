"""
Ortak FastAPI bagimliliklari.
Her admin endpoint'i mevcut kullaniciyi CurrentUser ile acikca alir.
"""
from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import OAuth2PasswordBearer
from sqlalchemy.orm import Session

from ikram.database import get_db
from ikram.services.auth import verify_token
from ikram.models.user import User

# Swagger UI "Authorize" butonu bu adresi kullanir
oauth2_scheme = OAuth2PasswordBearer(tokenUrl="/api/v1/auth/login", auto_error=False)

DbSession = Annotated[Session, Depends(get_db)]


def get_current_user(
    request: Request,
    token: Annotated[str | None, Depends(oauth2_scheme)],
    db: DbSession,
) -> User:
    """
    Token'daki kullaniciyi dondur.
    Once Authorization header'i, yoksa access_token cookie'si okunur.
    """
    if not token:
        token = request.cookies.get("access_token")
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Token bulunamadi",
            headers={"WWW-Authenticate": "Bearer"},
        )

    user = db.query(User).filter(User.id == verify_token(token)).first()
    if user is None or not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Kullanici bulunamadi veya aktif degil",
        )
    return user


CurrentUser = Annotated[User, Depends(get_current_user)]
