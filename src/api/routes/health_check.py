from fastapi import APIRouter, Depends, status
from sqlalchemy import text
from sqlmodel.ext.asyncio.session import AsyncSession

from src.depends import get_session

router = APIRouter(tags=["Health"])


@router.get("/health", status_code=status.HTTP_200_OK)
async def health(session: AsyncSession = Depends(get_session)):
    """Liveness plus a trivial database round trip"""
    await session.execute(text("SELECT 1"))
    return {"status": "ok"}
