from __future__ import annotations

from collections.abc import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    pass


class Database:
    """
    Process-wide persistence handle.
    Built once by the app factory (or a test), disposed on shutdown; requests get sessions from it via get_db.
    """

    def __init__(self, url: str | None = None, *, engine: Engine | None = None, **engine_kwargs):
        if engine is None:
            if not url:
                raise ValueError("Database needs a URL or an engine")
            if url.startswith("sqlite"):
                # Sessions are used from FastAPI's threadpool.
                engine_kwargs.setdefault("connect_args", {"check_same_thread": False})
            else:
                engine_kwargs.setdefault("pool_pre_ping", True)
            engine = create_engine(url, **engine_kwargs)
        self.engine = engine
        self.session_factory = sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)

    def create_all(self) -> None:
        # Make sure every model is registered on Base.metadata.
        import usermetrics.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def session(self) -> Session:
        return self.session_factory()

    def dispose(self) -> None:
        self.engine.dispose()


def get_db(request: Request) -> Iterator[Session]:
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()
