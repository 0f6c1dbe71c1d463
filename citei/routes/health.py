"""Liveness probe."""
from fastapi import APIRouter

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check():
    """Returns 200 while the process is up."""
    return {"status": "ok"}
