from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, declarative_base

from spacedash.settings import DATABASE_URL

# SQLite connections get shared across FastAPI's worker threads
_connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(DATABASE_URL, connect_args=_connect_args, future=True, echo=False)
SessionLocal = sessionmaker(bind=engine, autoflush=False, autocommit=False, future=True)
Base = declarative_base()

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
