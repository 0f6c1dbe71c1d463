"""Shared FastAPI dependencies."""
from typing import AsyncIterator

from . import config
from .infrastructure.database import get_async_db, release_async_db
from .infrastructure.repositories import (
    AsyncColecaoRepository,
    ColecaoRepositoryProtocol,
    InMemoryColecaoRepository,
)

_memory_repository: InMemoryColecaoRepository | None = None


def get_memory_repository() -> InMemoryColecaoRepository:
    """Process-wide in-memory repository for the "memory" backend."""
    global _memory_repository
    if _memory_repository is None:
        _memory_repository = InMemoryColecaoRepository()
    return _memory_repository


async def get_colecao_repository() -> AsyncIterator[ColecaoRepositoryProtocol]:
    """Provide the colecao repository for one request.

    SQLite connections are taken from the pool and returned after the
    response is produced.
    """
    if config.REPOSITORY_BACKEND == "memory":
        yield get_memory_repository()
        return

    db = await get_async_db()
    try:
        yield AsyncColecaoRepository(db)
    finally:
        await release_async_db(db)
