# все значения идут в запрос параметрами
import json
from typing import Optional

from sqlalchemy import or_
from sqlalchemy.orm import Query

from codec import decode_list
from models import Inspiration, OutfitRecord, WardrobeItem


def _search(term: str, *columns):
    return or_(*(c.icontains(term, autoescape=True) for c in columns))


def filter_items(
    q: Query,
    category: Optional[str] = None,
    color: Optional[str] = None,
    season: Optional[str] = None,
    search: Optional[str] = None,
) -> Query:
    if category:
        q = q.filter(WardrobeItem.category == category)
    if color:
        q = q.filter(WardrobeItem.color == color)
    if season:
        # грубый префильтр по JSON-токену, точная проверка в matches_season
        q = q.filter(WardrobeItem.seasons.contains(json.dumps(season, ensure_ascii=False), autoescape=True))
    if search:
        q = q.filter(_search(search, WardrobeItem.name, WardrobeItem.brand, WardrobeItem.notes))
    return q.order_by(WardrobeItem.created_at.desc(), WardrobeItem.id.desc())


def matches_season(item: WardrobeItem, season: Optional[str]) -> bool:
    """True when ``season`` is one of the item's decoded season tags."""
    if not season:
        return True
    return season in decode_list(item.seasons)


def filter_outfits(
    q: Query,
    season: Optional[str] = None,
    style: Optional[str] = None,
    scene: Optional[str] = None,
    search: Optional[str] = None,
) -> Query:
    if season:
        q = q.filter(OutfitRecord.season == season)
    if style:
        q = q.filter(OutfitRecord.style == style)
    if scene:
        q = q.filter(OutfitRecord.scene == scene)
    if search:
        q = q.filter(_search(search, OutfitRecord.items, OutfitRecord.notes))
    return q.order_by(
        OutfitRecord.date.desc(),
        OutfitRecord.created_at.desc(),
        OutfitRecord.id.desc(),
    )


def order_inspirations(q: Query) -> Query:
    return q.order_by(Inspiration.created_at.desc(), Inspiration.id.desc())
