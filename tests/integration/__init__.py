# Integration Tests
"""
Integration tests exercise the HTTP API end to end through TestClient,
against a mocked repository, a temporary SQLite database, or the
in-memory backend.
"""
