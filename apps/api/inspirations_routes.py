import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from codec import encode_list, inspiration_to_dict, parse_id
from db import get_db
from errors import NotFoundError
from filters import order_inspirations
from importer import insert_batch
from models import Inspiration

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["inspirations"])


class InspirationIn(BaseModel):
    title: str = Field(..., min_length=1)
    image: str = Field(..., min_length=1)
    description: str | None = None
    tags: list[str] | None = None


class InspirationBatchReq(BaseModel):
    inspirations: list[InspirationIn] = Field(..., min_length=1)


def _now() -> datetime:
    return datetime.utcnow()


def build_inspiration(payload: InspirationIn) -> Inspiration:
    now = _now()
    return Inspiration(
        title=payload.title,
        image=payload.image,
        description=payload.description or "",
        tags=encode_list(payload.tags),
        created_at=now,
        updated_at=now,
    )


def _get_or_404(db: Session, inspiration_id: str) -> Inspiration:
    pk = parse_id(inspiration_id)
    i = db.query(Inspiration).filter(Inspiration.id == pk).first() if pk else None
    if not i:
        raise NotFoundError("Inspiration not found")
    return i


@router.get("/inspirations", operation_id="list_inspirations")
def list_inspirations(db: Session = Depends(get_db)):
    data = [inspiration_to_dict(i) for i in order_inspirations(db.query(Inspiration)).all()]
    return {"success": True, "data": data, "count": len(data)}


@router.get("/inspirations/{inspiration_id}", operation_id="get_inspiration")
def get_inspiration(inspiration_id: str, db: Session = Depends(get_db)):
    i = _get_or_404(db, inspiration_id)
    return {"success": True, "data": inspiration_to_dict(i)}


@router.post("/inspirations", status_code=201, operation_id="create_inspiration")
def create_inspiration(payload: InspirationIn, db: Session = Depends(get_db)):
    i = build_inspiration(payload)
    db.add(i)
    db.commit()
    db.refresh(i)

    logger.info("inspiration %s created", i.id)
    return {"success": True, "message": "Inspiration created", "data": inspiration_to_dict(i)}


@router.put("/inspirations/{inspiration_id}", operation_id="replace_inspiration")
def replace_inspiration(inspiration_id: str, payload: InspirationIn, db: Session = Depends(get_db)):
    i = _get_or_404(db, inspiration_id)

    i.title = payload.title
    i.image = payload.image
    i.description = payload.description
    i.tags = encode_list(payload.tags)
    i.updated_at = _now()

    db.commit()
    db.refresh(i)
    return {"success": True, "message": "Inspiration updated", "data": inspiration_to_dict(i)}


@router.delete("/inspirations/{inspiration_id}", operation_id="delete_inspiration")
def delete_inspiration(inspiration_id: str, db: Session = Depends(get_db)):
    i = _get_or_404(db, inspiration_id)

    db.delete(i)
    db.commit()

    logger.info("inspiration %s deleted", inspiration_id)
    return {"success": True, "message": "Inspiration deleted"}


@router.post("/inspirations/batch", operation_id="import_inspirations")
def import_inspirations(payload: InspirationBatchReq, db: Session = Depends(get_db)):
    count = insert_batch(db, [build_inspiration(x) for x in payload.inspirations])
    return {"success": True, "message": f"Imported {count} inspirations", "count": count}
