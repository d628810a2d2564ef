import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import AliasChoices, BaseModel, Field
from sqlalchemy.orm import Session

from codec import encode_list, item_to_dict, parse_id
from db import get_db
from errors import NotFoundError
from filters import filter_items, matches_season
from importer import insert_batch
from models import DEFAULT_BRAND, DEFAULT_PLATFORM, DEFAULT_SEASON, WardrobeItem

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["items"])


class ItemIn(BaseModel):
    name: str = Field(..., min_length=1)
    category: str = Field(..., min_length=1)
    color: str = Field(..., min_length=1)
    brand: str | None = None
    price: float | None = Field(None, ge=0)
    seasons: list[str] | None = None
    purchase_date: str | None = None
    image: str | None = None
    notes: str | None = None
    platform: str | None = None


class ItemImport(ItemIn):
    # старые клиенты писали purchaseDate
    purchase_date: str | None = Field(
        None, validation_alias=AliasChoices("purchaseDate", "purchase_date")
    )


class ItemBatchReq(BaseModel):
    items: list[ItemImport] = Field(..., min_length=1)


def _now() -> datetime:
    return datetime.utcnow()


def _seasons(values: list[str] | None) -> str:
    # seasons никогда не бывает пустым
    return encode_list(values or [DEFAULT_SEASON])


def build_item(payload: ItemIn) -> WardrobeItem:
    now = _now()
    return WardrobeItem(
        name=payload.name,
        category=payload.category,
        color=payload.color,
        brand=payload.brand or DEFAULT_BRAND,
        price=payload.price or 0,
        seasons=_seasons(payload.seasons),
        purchase_date=payload.purchase_date,
        image=payload.image,
        notes=payload.notes or "",
        platform=payload.platform or DEFAULT_PLATFORM,
        created_at=now,
        updated_at=now,
    )


def _get_or_404(db: Session, item_id: str) -> WardrobeItem:
    pk = parse_id(item_id)
    it = db.query(WardrobeItem).filter(WardrobeItem.id == pk).first() if pk else None
    if not it:
        raise NotFoundError("Item not found")
    return it


@router.get("/items", operation_id="list_items")
def list_items(
    db: Session = Depends(get_db),
    category: Optional[str] = Query(None),
    color: Optional[str] = Query(None),
    season: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
):
    q = filter_items(db.query(WardrobeItem), category=category, color=color, season=season, search=search)
    rows = [it for it in q.all() if matches_season(it, season)]

    data = [item_to_dict(it) for it in rows]
    return {"success": True, "data": data, "count": len(data)}


@router.get("/items/{item_id}", operation_id="get_item")
def get_item(item_id: str, db: Session = Depends(get_db)):
    it = _get_or_404(db, item_id)
    return {"success": True, "data": item_to_dict(it)}


@router.post("/items", status_code=201, operation_id="create_item")
def create_item(payload: ItemIn, db: Session = Depends(get_db)):
    it = build_item(payload)
    db.add(it)
    db.commit()
    db.refresh(it)

    logger.info("item %s created", it.id)
    return {"success": True, "message": "Item created", "data": item_to_dict(it)}


@router.put("/items/{item_id}", operation_id="replace_item")
def replace_item(item_id: str, payload: ItemIn, db: Session = Depends(get_db)):
    it = _get_or_404(db, item_id)

    # полная замена: что не прислали — становится NULL
    it.name = payload.name
    it.category = payload.category
    it.color = payload.color
    it.brand = payload.brand
    it.price = payload.price
    it.seasons = _seasons(payload.seasons)
    it.purchase_date = payload.purchase_date
    it.image = payload.image
    it.notes = payload.notes
    it.platform = payload.platform
    it.updated_at = _now()

    db.commit()
    db.refresh(it)
    return {"success": True, "message": "Item updated", "data": item_to_dict(it)}


@router.delete("/items/{item_id}", operation_id="delete_item")
def delete_item(item_id: str, db: Session = Depends(get_db)):
    it = _get_or_404(db, item_id)

    db.delete(it)
    db.commit()

    logger.info("item %s deleted", item_id)
    return {"success": True, "message": "Item deleted"}


@router.post("/items/batch", operation_id="import_items")
def import_items(payload: ItemBatchReq, db: Session = Depends(get_db)):
    count = insert_batch(db, [build_item(x) for x in payload.items])
    return {"success": True, "message": f"Imported {count} items", "count": count}
