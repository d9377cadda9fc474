# server/database.py

import os
from pathlib import Path
from dotenv import load_dotenv
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker
from models import Base


load_dotenv()


DEFAULT_DB_URL = "sqlite:///./data/app.db"


def get_db_url() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    # Same connection settings the service used before DATABASE_URL existed.
    db_name = os.getenv("DB_NAME")
    if db_name:
        user = os.getenv("DB_USER", "postgres")
        password = os.getenv("DB_PASS", "")
        host = os.getenv("DB_HOST", "localhost")
        port = os.getenv("DB_PORT", "5432")
        return f"postgresql://{user}:{password}@{host}:{port}/{db_name}?sslmode=disable"

    return DEFAULT_DB_URL


def _ensure_sqlite_parent_dir(db_url: str) -> None:
    if not db_url.startswith("sqlite:///"):
        return
    path = db_url.replace("sqlite:///", "", 1)
    if path in (":memory:", ""):
        return
    Path(path).expanduser().resolve().parent.mkdir(parents=True, exist_ok=True)


def create_db_engine(db_url: str | None = None) -> Engine:
    url = db_url or get_db_url()
    _ensure_sqlite_parent_dir(url)
    connect_args = {}
    if url.startswith("sqlite:"):
        connect_args = {"check_same_thread": False}
    return create_engine(url, pool_pre_ping=True, connect_args=connect_args)


engine = create_db_engine()

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)


def init_db(bind: Engine | None = None):
    Base.metadata.create_all(bind=bind or engine)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_db_engine():
    return engine
