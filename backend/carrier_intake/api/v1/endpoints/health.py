"""Health check endpoint."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from carrier_intake.deps import get_rule_engine, get_session
from carrier_intake.services.rule_engine import RuleEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health")
async def health_check(
    db: Annotated[AsyncSession, Depends(get_session)],
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
) -> dict:
    """
    Health check endpoint.

    Verifies that the API is running, reports the loaded carrier table and
    checks that the database is reachable. Intake analysis keeps working
    when the database is down, so a failed check reports ``degraded``.

    Returns:
        dict: Health status with API, database and carrier table status
    """
    try:
        await db.execute(text("SELECT 1"))
        db_status = "healthy"
    except Exception as e:
        logger.warning(f"Database health check failed: {str(e)}")
        db_status = f"unhealthy: {str(e)}"

    return {
        "status": "healthy" if db_status == "healthy" else "degraded",
        "api": "healthy",
        "database": db_status,
        "carriers": len(engine.carriers),
        "status_model": engine.status_model.value,
    }
