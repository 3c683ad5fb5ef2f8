from pathlib import Path

from sqlalchemy.engine import make_url
from sqlmodel import SQLModel, create_engine, Session
from ..core.config import settings

def _connect_args(url: str) -> dict:
    # FastAPI runs sync routes in a thread pool
    if url.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}

engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.SQL_ECHO,
    connect_args=_connect_args(settings.DATABASE_URL),
)

def init_db() -> None:
    from . import models  # noqa: F401
    url = make_url(settings.DATABASE_URL)
    if url.get_backend_name() == "sqlite" and url.database not in (None, "", ":memory:"):
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)
    SQLModel.metadata.create_all(engine)

def get_session():
    with Session(engine) as session:
        yield session
