"""Health check API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.logging import get_logger
from ..database import get_db_session

router = APIRouter(prefix="/health", tags=["health"])
logger = get_logger("health")


@router.get("")
async def health_check(session: AsyncSession = Depends(get_db_session)):
    """Report whether the database answers."""
    try:
        await session.execute(text("SELECT 1"))
        database = "ok"
    except SQLAlchemyError as e:
        logger.error("Database health check failed", exc_info=e)
        database = "unavailable"

    return {"status": "ok" if database == "ok" else "degraded", "database": database}
