"""Liveness and readiness checks for load balancers."""

import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from plant_tracker.db.session import get_db

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("")
async def health():
    return {"status": "ok"}


@router.get("/ready")
async def readiness(db: AsyncSession = Depends(get_db)):
    """Ready once the store answers; 500 otherwise (no driver detail in the body)."""
    try:
        await db.execute(text("SELECT 1"))
    except SQLAlchemyError as exc:
        logger.error("Readiness check failed", exc_info=exc)
        return JSONResponse(
            status_code=500,
            content={"status": "error", "database": "unreachable"},
        )
    return {"status": "ok", "database": "connected"}
