# списки (seasons, tags) храним как JSON-текст в одной колонке
import json
from datetime import datetime
from typing import Any, Iterable, Optional

from errors import CorruptRecordError
from models import Inspiration, OutfitRecord, WardrobeItem


def encode_list(values: Optional[Iterable[str]]) -> str:
    return json.dumps(list(values or []), ensure_ascii=False)


def decode_list(raw: Optional[str]) -> list[str]:
    if raw is None:
        return []
    try:
        value = json.loads(raw)
    except (TypeError, ValueError) as e:
        raise CorruptRecordError(f"stored list is not valid JSON: {raw!r}") from e
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise CorruptRecordError(f"stored list is not an array of strings: {raw!r}")
    return value


# верхняя граница INTEGER PRIMARY KEY в SQLite
MAX_ID = 2**63 - 1


def parse_id(raw: str) -> Optional[int]:
    # всё, что не похоже на существующий id, дальше отдаётся как 404
    if not raw.isascii() or not raw.isdigit():
        return None
    value = int(raw)
    if value < 1 or value > MAX_ID:
        return None
    return value


def _ts(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def item_to_dict(it: WardrobeItem) -> dict[str, Any]:
    return {
        "id": it.id,
        "name": it.name,
        "category": it.category,
        "color": it.color,
        "brand": it.brand,
        "price": it.price,
        "seasons": decode_list(it.seasons),
        "purchase_date": it.purchase_date,
        "image": it.image,
        "notes": it.notes,
        "platform": it.platform,
        "created_at": _ts(it.created_at),
        "updated_at": _ts(it.updated_at),
    }


def outfit_to_dict(r: OutfitRecord) -> dict[str, Any]:
    return {
        "id": r.id,
        "date": r.date,
        "image": r.image,
        "season": r.season,
        "style": r.style,
        "scene": r.scene,
        "items": r.items,
        "notes": r.notes,
        "rating": r.rating,
        "created_at": _ts(r.created_at),
        "updated_at": _ts(r.updated_at),
    }


def inspiration_to_dict(i: Inspiration) -> dict[str, Any]:
    return {
        "id": i.id,
        "title": i.title,
        "image": i.image,
        "description": i.description,
        "tags": decode_list(i.tags),
        "created_at": _ts(i.created_at),
        "updated_at": _ts(i.updated_at),
    }
