from datetime import datetime

from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import (
    Column,
    Integer,
    Float,
    String,
    DateTime,
    Text,
    Index,
)


class Base(DeclarativeBase):
    pass


DEFAULT_BRAND = "未知品牌"
DEFAULT_PLATFORM = "未记录"
DEFAULT_SEASON = "all-season"


# ---------------- Wardrobe items ----------------
# Вещи в гардеробе. seasons хранится как JSON-текст (см. codec.py)

class WardrobeItem(Base):
    __tablename__ = "wardrobe_items"

    id = Column(Integer, primary_key=True, autoincrement=True)

    name = Column(String, nullable=False)
    category = Column(String, nullable=False)  # tops/bottoms/dresses/outerwear/accessories
    color = Column(String, nullable=False)

    brand = Column(String, default=DEFAULT_BRAND)
    price = Column(Float, default=0)
    seasons = Column(Text, nullable=False)  # ["spring", "summer", ...]

    purchase_date = Column(String, nullable=True)  # YYYY-MM-DD
    image = Column(Text, nullable=True)  # data URI или внешний URL
    notes = Column(Text, nullable=True)
    platform = Column(String, default=DEFAULT_PLATFORM)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_category", "category"),
        Index("idx_color", "color"),
        Index("idx_wardrobe_created_at", "created_at"),
        # id никогда не переиспользуется после удаления
        {"sqlite_autoincrement": True},
    )


# ---------------- Outfit records ----------------
# Что надето в конкретный день. items — свободный текст, не ссылки на wardrobe_items

class OutfitRecord(Base):
    __tablename__ = "outfit_records"

    id = Column(Integer, primary_key=True, autoincrement=True)

    date = Column(String, nullable=False)  # YYYY-MM-DD
    image = Column(Text, nullable=True)
    season = Column(String, nullable=False)
    style = Column(String, nullable=False)
    scene = Column(String, nullable=False)

    items = Column(Text, nullable=True)
    notes = Column(Text, nullable=True)
    rating = Column(Integer, default=0)

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        Index("idx_outfit_date", "date"),
        Index("idx_outfit_season", "season"),
        Index("idx_outfit_style", "style"),
        Index("idx_outfit_scene", "scene"),
        {"sqlite_autoincrement": True},
    )


# ---------------- Inspirations ----------------

class Inspiration(Base):
    __tablename__ = "inspiration_list"

    id = Column(Integer, primary_key=True, autoincrement=True)

    title = Column(String, nullable=False)
    image = Column(Text, nullable=False)
    description = Column(Text, nullable=True)
    tags = Column(Text, nullable=True)  # JSON-массив строк

    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow)

    __table_args__ = (
        {"sqlite_autoincrement": True},
    )
