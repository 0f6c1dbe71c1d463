"""Async database connection management.

Provides async database connectivity using aiosqlite.
"""
import asyncio
import logging
import sqlite3
from pathlib import Path
from typing import Optional

import aiosqlite

from ...config import DATABASE_PATH, DB_MAX_CONNECTIONS

logger = logging.getLogger(__name__)

# Global connection pool reference
_pool: Optional['AsyncConnectionPool'] = None


class AsyncConnectionPool:
    """Bounded async connection pool for aiosqlite.

    At most ``max_connections`` connections are handed out at once; callers
    beyond that wait in ``acquire`` until another caller releases.
    """

    def __init__(self, db_path: Path, max_connections: int = 10):
        self.db_path = db_path
        self.max_connections = max_connections
        self._connections: list[aiosqlite.Connection] = []
        self._semaphore = asyncio.Semaphore(max_connections)
        self._lock = asyncio.Lock()

    async def acquire(self) -> aiosqlite.Connection:
        """Acquire a connection from the pool."""
        await self._semaphore.acquire()
        try:
            async with self._lock:
                # Return existing connection if available
                if self._connections:
                    return self._connections.pop()

            # Create new connection
            conn = await aiosqlite.connect(
                self.db_path,
                detect_types=sqlite3.PARSE_DECLTYPES
            )
            conn.row_factory = aiosqlite.Row
            return conn
        except BaseException:
            self._semaphore.release()
            raise

    async def release(self, conn: aiosqlite.Connection) -> None:
        """Release a connection back to the pool."""
        try:
            async with self._lock:
                if len(self._connections) < self.max_connections:
                    self._connections.append(conn)
                    return
            await conn.close()
        finally:
            self._semaphore.release()

    async def close_all(self) -> None:
        """Close all idle connections in the pool."""
        async with self._lock:
            for conn in self._connections:
                await conn.close()
            self._connections.clear()


async def get_async_db() -> aiosqlite.Connection:
    """Get async database connection.

    Returns:
        Async database connection
    """
    global _pool
    if _pool is None:
        _pool = AsyncConnectionPool(DATABASE_PATH, DB_MAX_CONNECTIONS)
    return await _pool.acquire()


async def release_async_db(conn: aiosqlite.Connection) -> None:
    """Release async database connection back to pool.

    Args:
        conn: Connection to release
    """
    if _pool:
        await _pool.release(conn)
    else:
        await conn.close()


async def init_async_db() -> None:
    """Initialize database schema using async connection."""
    conn = await get_async_db()
    try:
        await conn.execute("""
            CREATE TABLE IF NOT EXISTS colecoes (
                id INTEGER PRIMARY KEY AUTOINCREMENT,
                titulo TEXT NOT NULL,
                subtitulo TEXT,
                autor TEXT,
                imagem TEXT,
                created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
                updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
            )
        """)
        await conn.execute(
            "CREATE INDEX IF NOT EXISTS idx_colecoes_titulo ON colecoes(titulo)"
        )
        await conn.commit()
        logger.info("Database schema ready at %s", DATABASE_PATH)
    finally:
        await release_async_db(conn)


async def close_async_db() -> None:
    """Close the pool. The next ``get_async_db`` call opens a fresh one."""
    global _pool
    if _pool:
        await _pool.close_all()
        _pool = None
