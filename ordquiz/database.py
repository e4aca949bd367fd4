"""Score store: SQLAlchemy engine, sessions and table creation."""
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, sessionmaker

from ordquiz.config import DATABASE_URL


def _connect_args(url: str) -> dict:
    # SQLite connections are shared across the request threadpool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_engine(DATABASE_URL, connect_args=_connect_args(DATABASE_URL))
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


class Base(DeclarativeBase):
    """Declarative base for the score tables."""


def get_db():
    """Per-request session for FastAPI dependencies."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind: Engine | None = None) -> None:
    """Create missing tables on ``bind`` (the app engine by default)."""
    # Register ScoreRecord on the metadata first
    import ordquiz.models.db  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
