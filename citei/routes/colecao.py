"""Colecao routes - list, get, create, update, delete."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, ConfigDict, Field

from ..config import MAX_FIELD_LENGTH
from ..dependencies import get_colecao_repository
from ..infrastructure.repositories import ColecaoRepositoryProtocol
from ..validation import ensure_valid, validate_create, validate_filter, validate_update

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/colecao", tags=["colecao"])

DELETED_MESSAGE = "Colecao removida com sucesso!"
NOT_FOUND_MESSAGE = "Colecao não encontrada"


class ColecaoInput(BaseModel):
    """Write payload. Unknown keys (including id) are ignored."""
    model_config = ConfigDict(extra="ignore")

    titulo: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)
    subtitulo: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)
    autor: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)
    imagem: str | None = Field(default=None, max_length=MAX_FIELD_LENGTH)


class Colecao(BaseModel):
    id: int
    titulo: str
    subtitulo: str | None = None
    autor: str | None = None
    imagem: str | None = None


@router.get("", response_model=list[Colecao], response_model_exclude_none=True)
async def list_colecoes(
    titulo: str | None = None,
    repo: ColecaoRepositoryProtocol = Depends(get_colecao_repository),
):
    """List colecoes, optionally filtered by titulo."""
    ensure_valid(validate_filter({"titulo": titulo}))
    return await repo.find_all(titulo or None)


@router.get("/{colecao_id}", response_model=Colecao, response_model_exclude_none=True)
async def get_colecao(
    colecao_id: int,
    repo: ColecaoRepositoryProtocol = Depends(get_colecao_repository),
):
    """Get a single colecao."""
    colecao = await repo.find_by_id(colecao_id)
    if not colecao:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    return colecao


@router.post("", response_model=Colecao, response_model_exclude_none=True)
async def create_colecao(
    data: ColecaoInput,
    repo: ColecaoRepositoryProtocol = Depends(get_colecao_repository),
):
    """Create a colecao."""
    payload = data.model_dump(exclude_none=True)
    ensure_valid(validate_create(payload))

    colecao = await repo.create(payload)
    logger.info("Colecao created", extra={"colecao_id": colecao["id"]})
    return colecao


@router.put("/{colecao_id}", response_model=Colecao, response_model_exclude_none=True)
async def update_colecao(
    colecao_id: int,
    data: ColecaoInput,
    repo: ColecaoRepositoryProtocol = Depends(get_colecao_repository),
):
    """Update the fields sent in the body."""
    payload = data.model_dump(exclude_none=True)
    ensure_valid(validate_update(payload))

    colecao = await repo.update(colecao_id, payload)
    if not colecao:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    logger.info("Colecao updated", extra={"colecao_id": colecao_id})
    return colecao


@router.delete("/{colecao_id}")
async def delete_colecao(
    colecao_id: int,
    repo: ColecaoRepositoryProtocol = Depends(get_colecao_repository),
):
    """Delete a colecao.

    Only an explicit False from the repository means the row was missing.
    """
    if await repo.delete(colecao_id) is False:
        raise HTTPException(status_code=404, detail=NOT_FOUND_MESSAGE)
    logger.info("Colecao deleted", extra={"colecao_id": colecao_id})
    return {"message": DELETED_MESSAGE}
