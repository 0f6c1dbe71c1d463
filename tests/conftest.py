"""Test configuration and fixtures for the Citei Colecao API.

This module provides isolated test environments:
- Temporary SQLite database per test
- Mocked colecao repository wired through dependency overrides
- Test clients for the mocked, SQLite and in-memory backends
"""
import sys
from pathlib import Path
from typing import Dict, Generator
from unittest.mock import AsyncMock, Mock

import pytest
from fastapi.testclient import TestClient

# Ensure citei is importable
sys.path.insert(0, str(Path(__file__).parent.parent))

from citei.infrastructure.repositories import ColecaoRepositoryProtocol


@pytest.fixture
def colecao() -> Dict:
    """The colecao every mocked repository call returns."""
    return {
        "id": 1,
        "titulo": "titulo",
        "autor": "autor",
        "imagem": "imagem",
    }


@pytest.fixture(scope="function")
def isolated_database(tmp_path: Path, monkeypatch) -> Path:
    """Point the connection pool at a temporary database file."""
    import citei.config as config
    import citei.infrastructure.database.connection as connection

    db_path = tmp_path / "test.db"
    monkeypatch.setattr(connection, "DATABASE_PATH", db_path)
    monkeypatch.setattr(connection, "_pool", None)
    monkeypatch.setattr(config, "REPOSITORY_BACKEND", "sqlite")
    return db_path


@pytest.fixture(scope="function")
def mock_repository(colecao: Dict) -> Mock:
    """Repository double returning the fixture colecao for every call."""
    repo = Mock(spec=ColecaoRepositoryProtocol)
    repo.find_all = AsyncMock(return_value=[colecao])
    repo.find_by_id = AsyncMock(return_value=colecao)
    repo.create = AsyncMock(return_value=colecao)
    repo.update = AsyncMock(return_value=colecao)
    repo.delete = AsyncMock(return_value=True)
    return repo


@pytest.fixture(scope="function")
def client(isolated_database: Path, mock_repository: Mock) -> Generator[TestClient, None, None]:
    """Client whose routes talk to ``mock_repository``.

    Usage:
        def test_something(client, mock_repository):
            response = client.get("/colecao/1")
            assert response.status_code == 200
    """
    from citei.main import create_app
    from citei.dependencies import get_colecao_repository

    app = create_app()
    app.dependency_overrides[get_colecao_repository] = lambda: mock_repository

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_client(isolated_database: Path) -> Generator[TestClient, None, None]:
    """Client backed by a fresh SQLite database."""
    from citei.main import create_app

    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def memory_client(monkeypatch) -> Generator[TestClient, None, None]:
    """Client using the in-memory backend, starting empty."""
    import citei.config as config
    import citei.dependencies as dependencies
    from citei.main import create_app

    monkeypatch.setattr(config, "REPOSITORY_BACKEND", "memory")
    monkeypatch.setattr(dependencies, "_memory_repository", None)

    with TestClient(create_app()) as test_client:
        yield test_client
