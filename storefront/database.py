"""
Database engine and session management
"""
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker


class Base(DeclarativeBase):
    """Declarative base for all ORM models"""
    pass


def create_db_engine(database_url: str) -> Engine:
    """Create an engine for the given connection string"""
    connect_args = {}
    if database_url.startswith("sqlite"):
        # SQLite connections are shared across the threadpool
        connect_args["check_same_thread"] = False
    return create_engine(database_url, pool_pre_ping=True, connect_args=connect_args)


def create_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


def init_db(engine: Engine) -> None:
    """Create all tables"""
    # Models must be imported so they register on Base.metadata
    from storefront import models  # noqa: F401
    Base.metadata.create_all(bind=engine)


def get_db(request: Request) -> Iterator[Session]:
    """Dependency yielding a session bound to the application's engine"""
    db = request.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()
