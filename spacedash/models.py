from sqlalchemy import JSON, Boolean, Column, DateTime, Float, Integer, String, Text, func
from .db import Base

# -----------------------------
# ORM models for the tables the dashboard reads
# -----------------------------
class TelemetryLegacy(Base):
    __tablename__ = "telemetry_legacy"
    # One row per generated telemetry CSV
    id          = Column(Integer, primary_key=True, autoincrement=True)
    recorded_at = Column(DateTime(timezone=True), index=True, nullable=False)
    voltage     = Column(Float)                              # volts
    temp        = Column(Float)                              # °C
    source_file = Column(String)                             # e.g. telemetry_20250101_120000.csv


class IssFetchLog(Base):
    __tablename__ = "iss_fetch_log"
    # Raw ISS position payloads as fetched from the upstream tracker
    id         = Column(Integer, primary_key=True, autoincrement=True)
    fetched_at = Column(DateTime(timezone=True), index=True, nullable=False, server_default=func.now())
    source_url = Column(String, nullable=False)
    payload    = Column(JSON, nullable=False)                # {latitude, longitude, velocity, altitude, ...}

    def __repr__(self):
        return f"<IssFetchLog(id={self.id}, fetched_at={self.fetched_at})>"


class CmsBlock(Base):
    __tablename__ = "cms_blocks"
    # HTML snippets managed outside the app and embedded in the dashboard
    id        = Column(Integer, primary_key=True, autoincrement=True)
    slug      = Column(String, unique=True, index=True, nullable=False)
    content   = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
