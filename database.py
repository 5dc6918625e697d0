"""
In-memory store for Nebula Boards.

Each Store owns a private SQLite database that lives only as long as the
Store object. Nothing is written to disk.
"""

from typing import AsyncIterator, Iterator
from fastapi import Depends, Request
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine
from settings import logger
from init_db import seed_database

# Register every table on SQLModel.metadata
from models.user import User, WorkloadDay  # noqa: F401
from models.projects import Project  # noqa: F401
from models.boards import Board, BoardColumn, Task, Comment  # noqa: F401
from models.activity import Activity  # noqa: F401


class Store:
    """Authoritative in-memory state of the service."""

    def __init__(self, seed: bool = True):
        # StaticPool keeps a single connection, so every session sees the same memory database
        self.engine = create_engine(
            "sqlite://",
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        SQLModel.metadata.create_all(self.engine)

        if seed:
            with Session(self.engine) as session:
                seed_database(session)

        logger.info("Store initialized", extra={"seeded": seed})

    def session(self) -> Iterator[Session]:
        with Session(self.engine) as session:
            yield session


async def get_store(request: Request) -> Store:
    """Store attached to the running application."""
    return request.app.state.store


async def get_session(store: Store = Depends(get_store)) -> AsyncIterator[Session]:
    """Database session bound to the application's store.

    Opened and closed on the event loop thread; all sessions share one
    SQLite connection.
    """
    with Session(store.engine) as session:
        yield session
