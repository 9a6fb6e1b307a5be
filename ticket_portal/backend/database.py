# ticket_portal/backend/database.py
from collections.abc import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker

from ticket_portal.core.config import get_settings


class Base(DeclarativeBase):
    pass


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across the threadpool FastAPI runs sync routes on
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


_url = get_settings().DATABASE_URL
engine = create_engine(_url, connect_args=_connect_args(_url))
SessionLocal = sessionmaker(bind=engine, autoflush=False)


def get_db() -> Iterator[Session]:
    with SessionLocal() as db:
        yield db
