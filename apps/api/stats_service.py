# ничего не кэшируем, today передаём снаружи ради тестов
from datetime import date, datetime, timedelta
from typing import Any, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from models import Inspiration, OutfitRecord, WardrobeItem

TREND_DAYS = 7


def utc_today() -> date:
    # тот же календарь, что и у CURRENT_TIMESTAMP в SQLite
    return datetime.utcnow().date()


def _distribution(db: Session, column, key: str) -> list[dict[str, Any]]:
    rows = (
        db.query(column, func.count())
        .group_by(column)
        .order_by(column)
        .all()
    )
    return [{key: value, "count": count} for value, count in rows]


def most_expensive_item(db: Session) -> Optional[dict[str, Any]]:
    """Highest price wins; equal prices resolve to the lowest id."""
    it = (
        db.query(WardrobeItem)
        .order_by(WardrobeItem.price.desc().nullslast(), WardrobeItem.id.asc())
        .first()
    )
    if not it:
        return None
    return {"id": it.id, "name": it.name, "price": it.price}


def _month_prefix(today: date) -> str:
    return today.strftime("%Y-%m") + "-"


def item_statistics(db: Session, today: Optional[date] = None) -> dict[str, Any]:
    today = today or utc_today()

    month_added = (
        db.query(func.count(WardrobeItem.id))
        .filter(WardrobeItem.purchase_date.startswith(_month_prefix(today), autoescape=True))
        .scalar()
    )

    return {
        "total": db.query(func.count(WardrobeItem.id)).scalar(),
        "categoryDistribution": _distribution(db, WardrobeItem.category, "category"),
        "colorDistribution": _distribution(db, WardrobeItem.color, "color"),
        "mostExpensive": most_expensive_item(db),
        "monthAdded": month_added,
    }


def outfit_trend(db: Session, today: date) -> list[dict[str, Any]]:
    """Per-day outfit counts for the last week; days without records are omitted."""
    start = (today - timedelta(days=TREND_DAYS)).isoformat()
    end = today.isoformat()

    rows = (
        db.query(OutfitRecord.date, func.count())
        .filter(OutfitRecord.date >= start, OutfitRecord.date <= end)
        .group_by(OutfitRecord.date)
        .order_by(OutfitRecord.date.asc())
        .all()
    )
    return [{"date": d, "count": count} for d, count in rows]


def outfit_statistics(db: Session, today: Optional[date] = None) -> dict[str, Any]:
    today = today or utc_today()

    month_records = (
        db.query(func.count(OutfitRecord.id))
        .filter(OutfitRecord.date.startswith(_month_prefix(today), autoescape=True))
        .scalar()
    )

    return {
        "total": db.query(func.count(OutfitRecord.id)).scalar(),
        "inspirationTotal": db.query(func.count(Inspiration.id)).scalar(),
        "monthRecords": month_records,
        "styleDistribution": _distribution(db, OutfitRecord.style, "style"),
        "sceneDistribution": _distribution(db, OutfitRecord.scene, "scene"),
        "trend": outfit_trend(db, today),
    }
