"""In-memory colecao repository.

Implements ColecaoRepositoryProtocol without a database. Used by the
"memory" backend and as a stateful test double.
"""
from typing import Optional, List, Dict

from .colecao_repository import COLECAO_FIELDS


class InMemoryColecaoRepository:
    """Keeps colecoes in a dict keyed by id. Ids start at 1 and are never reused."""

    def __init__(self, initial: Optional[List[Dict]] = None):
        self._rows: Dict[int, Dict] = {}
        self._next_id = 1
        for row in initial or []:
            self._store(row)

    def _store(self, data: Dict, colecao_id: Optional[int] = None) -> Dict:
        if colecao_id is None:
            colecao_id = data.get("id") or self._next_id
        row = {"id": colecao_id}
        row.update({field: data.get(field) for field in COLECAO_FIELDS})
        self._rows[colecao_id] = row
        self._next_id = max(self._next_id, colecao_id + 1)
        return dict(row)

    async def find_all(self, titulo: Optional[str] = None) -> List[Dict]:
        rows = sorted(self._rows.values(), key=lambda r: r["id"])
        if titulo:
            needle = titulo.lower()
            rows = [r for r in rows if needle in (r["titulo"] or "").lower()]
        return [dict(r) for r in rows]

    async def find_by_id(self, colecao_id: int) -> Optional[Dict]:
        row = self._rows.get(colecao_id)
        return dict(row) if row else None

    async def create(self, data: Dict) -> Dict:
        return self._store(data, self._next_id)

    async def update(self, colecao_id: int, data: Dict) -> Optional[Dict]:
        row = self._rows.get(colecao_id)
        if row is None:
            return None
        row.update({k: v for k, v in data.items() if k in COLECAO_FIELDS})
        return dict(row)

    async def delete(self, colecao_id: int) -> bool:
        return self._rows.pop(colecao_id, None) is not None
