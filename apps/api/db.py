import os
from pathlib import Path
from typing import Generator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, sessionmaker

# Один файл SQLite по умолчанию, можно переопределить через .env
DATABASE_URL = (os.getenv("DATABASE_URL") or "sqlite:///./data/wardrobe.db").strip()


def _engine_kwargs(url: str) -> dict:
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}

    # FastAPI гоняет sync-ручки в threadpool
    database = make_url(url).database
    if database and database != ":memory:":
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    return {"connect_args": {"check_same_thread": False}}


engine = create_engine(
    DATABASE_URL,
    future=True,
    **_engine_kwargs(DATABASE_URL),
)

SessionLocal = sessionmaker(
    bind=engine,
    autoflush=False,
    autocommit=False,
    future=True,
)

# Важно: импорт после engine/sessionmaker (во избежание циклических импортов)
import models  # noqa: E402,F401  (важно: загружаем модели)
from models import Base  # noqa: E402


def init_db() -> None:
    """
    Создаёт таблицы и индексы, если их ещё нет (CREATE ... IF NOT EXISTS).
    Миграций нет: схема только дополняется.
    """
    Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Session, None, None]:
    db: Session = SessionLocal()
    try:
        yield db
    finally:
        db.close()
