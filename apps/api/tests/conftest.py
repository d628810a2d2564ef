# общий SQLite-файл во временной папке и TestClient поверх него
import os
import tempfile
from pathlib import Path
from typing import Iterator

import pytest

# db.py читает DATABASE_URL при импорте, так что выставляем до импорта приложения
_TMP_DIR = Path(tempfile.mkdtemp(prefix="wardrobe-tests-"))
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_DIR / 'wardrobe.db'}"

from fastapi.testclient import TestClient  # noqa: E402

from db import SessionLocal, engine, init_db  # noqa: E402
from main import app  # noqa: E402
from models import Base  # noqa: E402


@pytest.fixture(autouse=True)
def _clean_tables() -> Iterator[None]:
    init_db()
    yield
    with engine.begin() as conn:
        for table in reversed(Base.metadata.sorted_tables):
            conn.execute(table.delete())


@pytest.fixture()
def client() -> Iterator[TestClient]:
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture()
def make_item(client: TestClient):
    def _make(**fields) -> dict:
        payload = {"name": "Plain Tee", "category": "tops", "color": "white"}
        payload.update(fields)
        resp = client.post("/api/items", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _make


@pytest.fixture()
def make_outfit(client: TestClient):
    def _make(**fields) -> dict:
        payload = {"date": "2024-05-01", "season": "spring", "style": "casual", "scene": "work"}
        payload.update(fields)
        resp = client.post("/api/outfits", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()["data"]

    return _make
