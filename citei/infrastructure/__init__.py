# Infrastructure layer - database and repositories
"""
Infrastructure layer contains:
- Async SQLite connection pool
- Colecao repositories (SQLite adapter and in-memory double)
"""
