from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from ikram.config import settings


def _engine_options(url: str) -> dict:
    """SQLite (gelistirme) icin thread kontrolunu kapat, PostgreSQL icin baglantiyi dogrula."""
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {"pool_pre_ping": True}


# SQL loglari logging_config uzerinden yonetilir (echo kapali)
engine = create_engine(settings.DATABASE_URL, echo=False, **_engine_options(settings.DATABASE_URL))

# Commit her zaman servis katmaninda elle yapilir
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    pass


def get_db():
    """Istek basina bir oturum; istek bitince kapatilir."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
