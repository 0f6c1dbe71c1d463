"""Colecao repository - persistence of colecoes.

ColecaoRepositoryProtocol is the interface the HTTP layer depends on.
AsyncColecaoRepository implements it on top of SQLite via aiosqlite.
"""
from datetime import datetime
from typing import Protocol, Optional, List, Dict

from .base import AsyncRepository

# Writable columns, in response order
COLECAO_FIELDS = ("titulo", "subtitulo", "autor", "imagem")

_SELECT = "SELECT id, titulo, subtitulo, autor, imagem FROM colecoes"


class ColecaoRepositoryProtocol(Protocol):
    """Data access interface for colecoes."""

    async def find_all(self, titulo: Optional[str] = None) -> List[Dict]: ...

    async def find_by_id(self, colecao_id: int) -> Optional[Dict]: ...

    async def create(self, data: Dict) -> Dict: ...

    async def update(self, colecao_id: int, data: Dict) -> Optional[Dict]: ...

    async def delete(self, colecao_id: int) -> Optional[bool]:
        """Remove a colecao. False means it did not exist; None means not reported."""


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class AsyncColecaoRepository(AsyncRepository):
    """Async repository for colecoes."""

    async def find_all(self, titulo: Optional[str] = None) -> List[Dict]:
        """List colecoes, optionally filtered by title.

        Args:
            titulo: Case-insensitive substring to match against titulo

        Returns:
            Colecoes ordered by id
        """
        if titulo:
            return await self._fetchall(
                f"{_SELECT} WHERE titulo LIKE ? ESCAPE '\\' ORDER BY id",
                (f"%{_escape_like(titulo)}%",)
            )
        return await self._fetchall(f"{_SELECT} ORDER BY id")

    async def find_by_id(self, colecao_id: int) -> Optional[Dict]:
        """Get colecao by ID."""
        return await self._fetchone(f"{_SELECT} WHERE id = ?", (colecao_id,))

    async def create(self, data: Dict) -> Dict:
        """Create a new colecao.

        Args:
            data: Field values; keys outside COLECAO_FIELDS are ignored

        Returns:
            The stored colecao, with its assigned id
        """
        values = tuple(data.get(field) for field in COLECAO_FIELDS)
        cursor = await self._execute(
            """INSERT INTO colecoes (titulo, subtitulo, autor, imagem)
               VALUES (?, ?, ?, ?)""",
            values
        )
        await self._commit()
        return await self.find_by_id(cursor.lastrowid)

    async def update(self, colecao_id: int, data: Dict) -> Optional[Dict]:
        """Update colecao fields.

        Only keys present in ``data`` are written.

        Returns:
            The updated colecao, or None if it does not exist
        """
        updates = {k: v for k, v in data.items() if k in COLECAO_FIELDS}

        if not updates:
            return await self.find_by_id(colecao_id)

        set_clause = ", ".join(f"{k} = ?" for k in updates.keys())
        values = list(updates.values()) + [datetime.now().isoformat(), colecao_id]

        cursor = await self._execute(
            f"UPDATE colecoes SET {set_clause}, updated_at = ? WHERE id = ?",
            tuple(values)
        )
        await self._commit()
        if cursor.rowcount == 0:
            return None
        return await self.find_by_id(colecao_id)

    async def delete(self, colecao_id: int) -> bool:
        """Delete colecao. Returns False if it did not exist."""
        cursor = await self._execute(
            "DELETE FROM colecoes WHERE id = ?",
            (colecao_id,)
        )
        await self._commit()
        return cursor.rowcount > 0
