# tests/conftest.py
import os
import tempfile
from datetime import datetime, timedelta, timezone

# Keep the app's default engine off the developer's database file
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from spacedash.main import app
from spacedash.db import Base, get_db
from spacedash.models import CmsBlock, IssFetchLog, TelemetryLegacy


# --- Temporary SQLite DB file for the whole test session ---
@pytest.fixture(scope="session")
def tmp_db_url():
    fd, path = tempfile.mkstemp(suffix=".db")
    os.close(fd)
    url = f"sqlite:///{path}"
    yield url
    try:
        os.remove(path)
    except OSError:
        pass


@pytest.fixture(scope="session")
def engine(tmp_db_url):
    eng = create_engine(tmp_db_url, connect_args={"check_same_thread": False}, future=True)
    Base.metadata.create_all(bind=eng)
    return eng


@pytest.fixture(scope="function")
def db_session(engine):
    TestingSession = sessionmaker(bind=engine, autocommit=False, autoflush=False, future=True)
    db = TestingSession()
    try:
        yield db
    finally:
        db.rollback()
        db.close()


# --- Override FastAPI's DB dependency to use our test session ---
@pytest.fixture(autouse=True)
def override_get_db(db_session):
    def _get_db():
        try:
            yield db_session
        finally:
            pass
    app.dependency_overrides[get_db] = _get_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


# --- Utility: clear tables ---
def _clear_all(db):
    db.execute(text("DELETE FROM telemetry_legacy"))
    db.execute(text("DELETE FROM iss_fetch_log"))
    db.execute(text("DELETE FROM cms_blocks"))
    db.commit()


T0 = datetime(2025, 8, 20, 10, 0, 0, tzinfo=timezone.utc)
ISS_URL = "https://api.wheretheiss.at/v1/satellites/25544"


@pytest.fixture
def seed_sample(db_session):
    """
    A small, fixed dataset:
      - 25 telemetry rows, one minute apart (more than the default page of 20)
      - 4 ISS fetches: two good, one with numeric strings, one without a position
      - CMS blocks: one active, one inactive
    """
    _clear_all(db_session)

    db_session.add_all([
        TelemetryLegacy(
            recorded_at=T0 + timedelta(minutes=i),
            voltage=3.2 + i * 0.1,
            temp=-10.0 + i,
            source_file=f"telemetry_{i:03d}.csv",
        )
        for i in range(25)
    ])
    db_session.commit()

    db_session.add_all([
        IssFetchLog(fetched_at=T0, source_url=ISS_URL,
                    payload={"latitude": 10.0, "longitude": 20.0, "velocity": 27600.5, "altitude": 420.1}),
        IssFetchLog(fetched_at=T0 + timedelta(seconds=120), source_url=ISS_URL,
                    payload={"latitude": 11.0, "longitude": 22.0, "velocity": 27601.0, "altitude": 420.3}),
        IssFetchLog(fetched_at=T0 + timedelta(seconds=240), source_url=ISS_URL,
                    payload={"latitude": "12.5", "longitude": "24.5", "velocity": "27602", "altitude": "420.5"}),
        IssFetchLog(fetched_at=T0 + timedelta(seconds=360), source_url=ISS_URL,
                    payload={"error": "upstream timeout"}),
    ])
    db_session.commit()

    db_session.add_all([
        CmsBlock(slug="welcome_message", content="<p>Hello, space fans</p>", is_active=True),
        CmsBlock(slug="footer_info", content="<p>old footer</p>", is_active=False),
    ])
    db_session.commit()


@pytest.fixture
def empty_db(db_session):
    _clear_all(db_session)
    return db_session
