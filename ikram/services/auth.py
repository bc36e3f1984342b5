"""
Kimlik dogrulama servisi.
Admin kullanicilari email + sifre ile giris yapar, JWT token alir.
"""
import uuid
import logging
from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import InvalidTokenError
from pwdlib import PasswordHash
from fastapi import HTTPException, status
from sqlalchemy.orm import Session

from ikram.config import settings
from ikram.models.user import User
from ikram.schemas.user import AdminCreate

logger = logging.getLogger(__name__)

# Argon2 (pwdlib varsayilani)
password_hash = PasswordHash.recommended()


def hash_password(password: str) -> str:
    return password_hash.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return password_hash.verify(plain_password, hashed_password)


def create_access_token(user_id: uuid.UUID) -> str:
    """Kullanici ID'si (sub) ve son kullanma zamani (exp) iceren JWT uret."""
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    payload = {"sub": str(user_id), "exp": expire}
    return jwt.encode(payload, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def verify_token(token: str) -> uuid.UUID:
    """
    Token'i coz ve kullanici ID'sini dondur.
    Imza hatali, suresi dolmus veya sub alani bozuk ise 401.
    """
    try:
        payload = jwt.decode(
            token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM]
        )
        return uuid.UUID(payload["sub"])
    except (InvalidTokenError, KeyError, ValueError):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Gecersiz token",
        )


def register_user(db: Session, data: AdminCreate) -> User:
    """Yeni admin kullanici olustur. Email benzersiz olmali."""
    existing = db.query(User).filter(User.email == data.email).first()
    if existing:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Bu email adresi zaten kayitli",
        )

    user = User(
        email=data.email,
        hashed_password=hash_password(data.password),
        full_name=data.full_name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    logger.info("Yeni kullanici kaydedildi: %s", user.email)
    return user


def authenticate_user(db: Session, email: str, password: str) -> User:
    """
    Email ve sifreyi dogrula.
    Hatali bilgide 401, pasif hesapta 403 doner.
    """
    email = email.strip().lower()
    user = db.query(User).filter(User.email == email).first()
    if not user or not verify_password(password, user.hashed_password):
        logger.warning("Basarisiz giris denemesi: %s", email)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Email veya sifre hatali",
            headers={"WWW-Authenticate": "Bearer"},
        )
    if not user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Hesap devre disi birakilmis",
        )
    return user
