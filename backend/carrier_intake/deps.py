"""Dependency injection for FastAPI endpoints."""

from functools import lru_cache
from typing import AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from carrier_intake.config import settings
from carrier_intake.core.enums import StatusModel
from carrier_intake.db.session import get_db
from carrier_intake.services.notification_service import IntakeNotifier
from carrier_intake.services.rule_engine import RuleEngine, load_carrier_table

__all__ = ["get_db", "get_notifier", "get_rule_engine", "get_session"]


# Re-export get_db for convenience
async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get database session dependency.

    This is an alias for get_db for clarity in endpoint signatures.
    """
    async for session in get_db():
        yield session


@lru_cache
def get_rule_engine() -> RuleEngine:
    """
    Get the process-wide rule engine.

    Built once from ENABLED_CARRIERS and STATUS_MODEL; the engine is
    immutable and shared by all requests.
    """
    carriers = load_carrier_table(settings.enabled_carriers_list)
    return RuleEngine(carriers=carriers, status_model=StatusModel(settings.STATUS_MODEL))


def get_notifier() -> IntakeNotifier:
    """Get the agent notification client."""
    return IntakeNotifier()
