from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from carrier_intake.models.domain.submission import IntakeSubmission
from carrier_intake.repositories.base import BaseRepository


class SubmissionRepository(BaseRepository[IntakeSubmission]):
    """Repository for stored intake submissions."""

    def __init__(self, db: AsyncSession):
        super().__init__(IntakeSubmission, db)

    async def list_recent(self, skip: int = 0, limit: int = 50) -> List[IntakeSubmission]:
        """
        Retrieve submissions, newest first.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return

        Returns:
            List of submissions ordered by creation time descending
        """
        return await self.get_all(
            skip=skip,
            limit=limit,
            order_by=IntakeSubmission.created_at.desc(),
        )

    async def find_by_email(
        self,
        email: str,
        skip: int = 0,
        limit: int = 50,
    ) -> List[IntakeSubmission]:
        """Retrieve submissions made with an email address, newest first."""
        stmt = (
            select(IntakeSubmission)
            .where(IntakeSubmission.email == email.lower())
            .order_by(IntakeSubmission.created_at.desc())
            .offset(skip)
            .limit(limit)
        )
        result = await self.db.execute(stmt)
        return list(result.scalars().all())

    async def count_by_email(self, email: str) -> int:
        """Count submissions made with an email address."""
        return await self.count(IntakeSubmission.email == email.lower())
