from contextlib import asynccontextmanager
import logging
from fastapi import FastAPI
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from .db import engine, Base
from .routers.telemetry import router as telemetry_router
from .routers.iss import router as iss_router
from .routers.cms import router as cms_router
from spacedash.setup_logging import setup_logging

# --------------------------------------------------------------------
# App bootstrap
# --------------------------------------------------------------------
setup_logging() # Init Logging
log = logging.getLogger(__name__)

# --------------------------------------------------------------------
# FastAPI application with lifespan hook
# --------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Runs once at startup and once at shutdown.
    Creates the tables if they don’t exist yet so a fresh SQLite file works.
    """
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError:
        # keep serving; /healthz reports the database as down
        log.exception("table creation failed at startup")
    yield

# Create the FastAPI app instance
app = FastAPI(title="Space telemetry dashboard API", lifespan=lifespan)

# --------------------------------------------------------------------
# Routes
# --------------------------------------------------------------------
@app.get("/healthz")
def health():
    """
    Simple health probe for monitoring.
    Returns:
      - ok: static True if the app is alive
      - database: True when a trivial query succeeds
    """
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        db_ok = True
    except SQLAlchemyError:
        log.warning("healthz: database unreachable", exc_info=True)
        db_ok = False
    return {"ok": True, "service": "spacedash", "version": 1, "database": db_ok}

# Register API routers:
app.include_router(telemetry_router)
app.include_router(iss_router)
app.include_router(cms_router)
