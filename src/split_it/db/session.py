"""SQLAlchemy engine and session factory for the snapshot store."""

from collections.abc import Generator
from typing import Any

from sqlalchemy import Engine, create_engine, make_url
from sqlalchemy.orm import Session, sessionmaker

from split_it.core.settings import get_settings


def build_engine(database_url: str) -> Engine:
    """Create an engine, letting SQLite connections cross request threads."""

    connect_args: dict[str, Any] = {}
    if make_url(database_url).get_backend_name() == "sqlite":
        connect_args["check_same_thread"] = False
    return create_engine(
        database_url, connect_args=connect_args, pool_pre_ping=True
    )


engine = build_engine(get_settings().database_url)

SessionFactory = sessionmaker(
    bind=engine,
    class_=Session,
    autoflush=False,
    expire_on_commit=False,
)


def get_db_session() -> Generator[Session, None, None]:
    """Yield one session per request and close it afterwards."""

    with SessionFactory() as session:
        yield session
