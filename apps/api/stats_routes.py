from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from db import get_db
from stats_service import item_statistics, outfit_statistics

router = APIRouter(prefix="/api", tags=["statistics"])


@router.get("/statistics", operation_id="item_statistics")
def get_item_statistics(db: Session = Depends(get_db)):
    return {"success": True, "data": item_statistics(db)}


@router.get("/outfit-statistics", operation_id="outfit_statistics")
def get_outfit_statistics(db: Session = Depends(get_db)):
    return {"success": True, "data": outfit_statistics(db)}
