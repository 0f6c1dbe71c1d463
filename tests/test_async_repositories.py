"""Tests for the colecao repositories.

AsyncColecaoRepository runs against a temporary aiosqlite database;
InMemoryColecaoRepository must honour the same contract.
"""
import os
import tempfile

import aiosqlite
import pytest
import pytest_asyncio

from citei.infrastructure.repositories import (
    AsyncColecaoRepository,
    InMemoryColecaoRepository,
)


# =============================================================================
# Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def async_db():
    """Create temporary async database for testing."""
    fd, db_path = tempfile.mkstemp(suffix='.db')
    os.close(fd)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row

    await conn.execute("""
        CREATE TABLE colecoes (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            titulo TEXT NOT NULL,
            subtitulo TEXT,
            autor TEXT,
            imagem TEXT,
            created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP,
            updated_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
        )
    """)
    await conn.commit()

    yield conn

    await conn.close()
    os.unlink(db_path)


@pytest_asyncio.fixture(params=["sqlite", "memory"])
async def repo(request, async_db):
    """Each test runs against both repository variants."""
    if request.param == "sqlite":
        return AsyncColecaoRepository(async_db)
    return InMemoryColecaoRepository()


COLECAO = {"titulo": "Dom Casmurro", "autor": "Machado de Assis", "imagem": "capa.png"}


# =============================================================================
# Contract tests
# =============================================================================

@pytest.mark.asyncio
async def test_create_assigns_sequential_ids(repo):
    first = await repo.create(COLECAO)
    second = await repo.create({"titulo": "Quincas Borba"})

    assert first["id"] == 1
    assert second["id"] == 2
    assert first == {"id": 1, "subtitulo": None, **COLECAO}


@pytest.mark.asyncio
async def test_create_ignores_unknown_keys(repo):
    created = await repo.create({**COLECAO, "id": 99, "extra": "x"})

    assert created["id"] == 1
    assert "extra" not in created


@pytest.mark.asyncio
async def test_find_by_id_missing_returns_none(repo):
    assert await repo.find_by_id(123) is None


@pytest.mark.asyncio
async def test_find_all_filter_is_case_insensitive(repo):
    await repo.create(COLECAO)
    await repo.create({**COLECAO, "titulo": "O Alienista"})

    result = await repo.find_all("DOM")

    assert [c["titulo"] for c in result] == ["Dom Casmurro"]


@pytest.mark.asyncio
async def test_find_all_without_filter(repo):
    await repo.create(COLECAO)
    await repo.create({**COLECAO, "titulo": "O Alienista"})

    assert len(await repo.find_all()) == 2


@pytest.mark.asyncio
async def test_update_writes_only_given_fields(repo):
    created = await repo.create(COLECAO)

    updated = await repo.update(created["id"], {"subtitulo": "Romance"})

    assert updated["subtitulo"] == "Romance"
    assert updated["titulo"] == "Dom Casmurro"
    assert (await repo.find_by_id(created["id"]))["subtitulo"] == "Romance"


@pytest.mark.asyncio
async def test_update_with_empty_data_returns_current(repo):
    created = await repo.create(COLECAO)

    assert await repo.update(created["id"], {}) == created


@pytest.mark.asyncio
async def test_update_missing_returns_none(repo):
    assert await repo.update(5, {"titulo": "x"}) is None


@pytest.mark.asyncio
async def test_delete(repo):
    created = await repo.create(COLECAO)

    assert await repo.delete(created["id"]) is True
    assert await repo.find_by_id(created["id"]) is None
    assert await repo.delete(created["id"]) is False


# =============================================================================
# Connection pool
# =============================================================================

@pytest.mark.asyncio
async def test_pool_reuses_released_connections(tmp_path):
    from citei.infrastructure.database import AsyncConnectionPool

    pool = AsyncConnectionPool(tmp_path / "pool.db", max_connections=2)
    conn = await pool.acquire()
    await pool.release(conn)

    assert await pool.acquire() is conn

    await pool.release(conn)
    await pool.close_all()
