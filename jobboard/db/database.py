# jobboard/db/database.py

from typing import Generator

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool


def build_engine(database_url: str) -> Engine:
    """Creates the SQLAlchemy engine for the configured URL."""
    connect_args = {}
    kwargs = {}
    if database_url.startswith("sqlite"):
        # Needed for SQLite since requests are served from a threadpool
        connect_args["check_same_thread"] = False
        if database_url in ("sqlite://", "sqlite:///:memory:"):
            # Every connection must see the same in-memory database
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_pre_ping"] = True

    return create_engine(database_url, connect_args=connect_args, **kwargs)


def build_session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


# Dependency to get a database session.
# The session factory lives on app.state and is set up by the app lifespan.
def get_db(request: Request) -> Generator[Session, None, None]:
    db = request.app.state.session_factory()
    try:
        yield db # Provide the session to the endpoint
    finally:
        db.close() # Ensure the session is closed afterwards
