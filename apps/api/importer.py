import logging
from typing import Sequence

from sqlalchemy.orm import Session

from models import Base

logger = logging.getLogger(__name__)


def insert_batch(db: Session, rows: Sequence[Base]) -> int:
    """
    Вставляет все строки одной транзакцией.
    Либо всё, либо ничего: при любой ошибке откатываемся и пробрасываем её дальше.
    """
    try:
        db.add_all(rows)
        db.flush()  # форсим INSERT, чтобы ошибки всплыли до commit
        db.commit()
    except Exception:
        db.rollback()
        raise

    logger.info("batch import: %d %s rows", len(rows), rows[0].__tablename__ if rows else "-")
    return len(rows)
