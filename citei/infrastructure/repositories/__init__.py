# Repository Pattern Implementation
"""
Repositories abstract database operations.

Usage:
    repo = AsyncColecaoRepository(conn)
    colecao = await repo.find_by_id(1)

Any object implementing ColecaoRepositoryProtocol can stand in for the
SQLite repository (see InMemoryColecaoRepository).
"""
from .base import AsyncRepository, AsyncConnectionProtocol
from .colecao_repository import (
    COLECAO_FIELDS,
    ColecaoRepositoryProtocol,
    AsyncColecaoRepository,
)
from .memory_repository import InMemoryColecaoRepository

__all__ = [
    "AsyncRepository",
    "AsyncConnectionProtocol",
    "COLECAO_FIELDS",
    "ColecaoRepositoryProtocol",
    "AsyncColecaoRepository",
    "InMemoryColecaoRepository",
]
