import logging
from datetime import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from codec import outfit_to_dict, parse_id
from db import get_db
from errors import NotFoundError
from filters import filter_outfits
from importer import insert_batch
from models import OutfitRecord

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["outfits"])


class OutfitIn(BaseModel):
    date: str = Field(..., min_length=1)
    season: str = Field(..., min_length=1)
    style: str = Field(..., min_length=1)
    scene: str = Field(..., min_length=1)
    image: str | None = None
    items: str | None = None  # свободный текст, как есть
    notes: str | None = None
    rating: int | None = None


class OutfitBatchReq(BaseModel):
    records: list[OutfitIn] = Field(..., min_length=1)


def _now() -> datetime:
    return datetime.utcnow()


def build_outfit(payload: OutfitIn) -> OutfitRecord:
    now = _now()
    return OutfitRecord(
        date=payload.date,
        image=payload.image,
        season=payload.season,
        style=payload.style,
        scene=payload.scene,
        items=payload.items or "",
        notes=payload.notes or "",
        rating=payload.rating or 0,
        created_at=now,
        updated_at=now,
    )


def _get_or_404(db: Session, record_id: str) -> OutfitRecord:
    pk = parse_id(record_id)
    r = db.query(OutfitRecord).filter(OutfitRecord.id == pk).first() if pk else None
    if not r:
        raise NotFoundError("Outfit record not found")
    return r


@router.get("/outfits", operation_id="list_outfits")
def list_outfits(
    db: Session = Depends(get_db),
    season: Optional[str] = Query(None),
    style: Optional[str] = Query(None),
    scene: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
):
    q = filter_outfits(db.query(OutfitRecord), season=season, style=style, scene=scene, search=search)
    data = [outfit_to_dict(r) for r in q.all()]
    return {"success": True, "data": data, "count": len(data)}


@router.get("/outfits/{record_id}", operation_id="get_outfit")
def get_outfit(record_id: str, db: Session = Depends(get_db)):
    r = _get_or_404(db, record_id)
    return {"success": True, "data": outfit_to_dict(r)}


@router.post("/outfits", status_code=201, operation_id="create_outfit")
def create_outfit(payload: OutfitIn, db: Session = Depends(get_db)):
    r = build_outfit(payload)
    db.add(r)
    db.commit()
    db.refresh(r)

    logger.info("outfit record %s created", r.id)
    return {"success": True, "message": "Outfit record created", "data": outfit_to_dict(r)}


@router.put("/outfits/{record_id}", operation_id="replace_outfit")
def replace_outfit(record_id: str, payload: OutfitIn, db: Session = Depends(get_db)):
    r = _get_or_404(db, record_id)

    r.date = payload.date
    r.image = payload.image
    r.season = payload.season
    r.style = payload.style
    r.scene = payload.scene
    r.items = payload.items
    r.notes = payload.notes
    r.rating = payload.rating
    r.updated_at = _now()

    db.commit()
    db.refresh(r)
    return {"success": True, "message": "Outfit record updated", "data": outfit_to_dict(r)}


@router.delete("/outfits/{record_id}", operation_id="delete_outfit")
def delete_outfit(record_id: str, db: Session = Depends(get_db)):
    r = _get_or_404(db, record_id)

    db.delete(r)
    db.commit()

    logger.info("outfit record %s deleted", record_id)
    return {"success": True, "message": "Outfit record deleted"}


@router.post("/outfits/batch", operation_id="import_outfits")
def import_outfits(payload: OutfitBatchReq, db: Session = Depends(get_db)):
    count = insert_batch(db, [build_outfit(x) for x in payload.records])
    return {"success": True, "message": f"Imported {count} outfit records", "count": count}
