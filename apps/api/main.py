import os
import logging
from datetime import datetime, timezone

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from sqlalchemy.engine import make_url

from db import DATABASE_URL, engine, init_db
from errors import install_error_handlers
from items_routes import router as items_router
from outfits_routes import router as outfits_router
from inspirations_routes import router as inspirations_router
from stats_routes import router as stats_router

logging.basicConfig(
    level=(os.getenv("LOG_LEVEL") or "INFO").strip().upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


def _parse_cors_origins() -> list[str]:
    raw = (os.getenv("CORS_ORIGINS") or "").strip()
    if not raw:
        return ["*"]
    origins = [x.strip() for x in raw.split(",") if x.strip()]
    return origins or ["*"]


app = FastAPI(title="Wardrobe API", version="0.1.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=_parse_cors_origins(),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(GZipMiddleware, minimum_size=1000)

install_error_handlers(app)

app.include_router(items_router)
app.include_router(outfits_router)
app.include_router(inspirations_router)
app.include_router(stats_router)


@app.on_event("startup")
def _startup():
    init_db()
    logger.info("database ready: %s", make_url(DATABASE_URL).render_as_string(hide_password=True))


@app.on_event("shutdown")
def _shutdown():
    engine.dispose()


@app.get("/api/health", operation_id="health")
def health():
    return {
        "success": True,
        "message": "ok",
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=(os.getenv("HOST") or "0.0.0.0").strip(),
        port=int((os.getenv("PORT") or "3000").strip()),
        reload=False,
    )
