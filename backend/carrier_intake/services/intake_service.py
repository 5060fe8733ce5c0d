"""Intake service for analyzing, storing and routing applicant intakes."""

import logging
from dataclasses import dataclass
from typing import Any, List, Mapping, Optional
from uuid import UUID, uuid4

from sqlalchemy.ext.asyncio import AsyncSession

from carrier_intake.core.formatting import format_number
from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.models.domain.submission import ANSWER_MAX_LENGTH, IntakeSubmission
from carrier_intake.models.schemas.intake import (
    AnalysisResponse,
    CarrierEvaluationResponse,
    IntakeFormInput,
    SubmissionResponse,
)
from carrier_intake.repositories.submission_repository import SubmissionRepository
from carrier_intake.services.normalizer import normalize_applicant
from carrier_intake.services.notification_service import IntakeNotifier, render_notification
from carrier_intake.services.report_renderer import ReportRenderer
from carrier_intake.services.rule_engine.base import is_known
from carrier_intake.services.rule_engine.engine import CarrierEvaluation, RuleEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntakeAnalysis:
    """Normalized applicant with its per-carrier evaluations and rendered report."""

    applicant: ApplicantRecord
    evaluations: tuple[CarrierEvaluation, ...]
    report: str

    def to_response(self) -> AnalysisResponse:
        return AnalysisResponse(
            bmi=self.applicant.bmi,
            eligible_count=sum(1 for e in self.evaluations if e.is_eligible),
            carriers=[CarrierEvaluationResponse.from_evaluation(e) for e in self.evaluations],
            analysis=self.report,
        )


def analyze_intake(engine: RuleEngine, raw: Mapping[str, Any]) -> IntakeAnalysis:
    """
    Normalize raw intake values and evaluate them against every carrier.

    Args:
        engine: Configured rule engine
        raw: Applicant values keyed by snake_case or camelCase field names

    Returns:
        IntakeAnalysis with evaluations in carrier table order
    """
    applicant = normalize_applicant(raw)
    evaluations = tuple(engine.evaluate_all(applicant))
    report = ReportRenderer().render(evaluations)
    return IntakeAnalysis(applicant=applicant, evaluations=evaluations, report=report)


def _as_int(value: Optional[float]) -> Optional[int]:
    """Whole-number column value, None when unknown."""
    return int(value) if is_known(value) else None


def _clip(value: Optional[str]) -> Optional[str]:
    """Answer text cut to the stored column length."""
    return value[:ANSWER_MAX_LENGTH] if value else None


class IntakeService:
    """
    Intake service to orchestrate submission handling.

    This service:
    - Runs the carrier analysis for a submitted form
    - Persists the submission with its analysis
    - Notifies the agent with the intake summary
    - Treats storage and notification failures as non-fatal
    """

    def __init__(self, db: AsyncSession, engine: RuleEngine, notifier: IntakeNotifier):
        """
        Initialize the intake service.

        Args:
            db: Async database session
            engine: Configured rule engine
            notifier: Agent notification client
        """
        self.db = db
        self.engine = engine
        self.notifier = notifier
        self.submission_repo = SubmissionRepository(db)

    async def submit(self, form: IntakeFormInput) -> SubmissionResponse:
        """
        Analyze, store and route an intake submission.

        Args:
            form: Validated intake form

        Returns:
            SubmissionResponse reporting what succeeded
        """
        analysis = analyze_intake(self.engine, form.applicant_values())
        submission_id = uuid4()

        persisted = await self._persist(submission_id, form, analysis)

        title, content = render_notification(
            form, analysis.applicant, analysis.report, persisted=persisted
        )
        email_sent = await self.notifier.send(title, content)

        logger.info(
            f"Intake {submission_id} submitted for {form.first_name} {form.last_name}: "
            f"{sum(1 for e in analysis.evaluations if e.is_eligible)}/"
            f"{len(analysis.evaluations)} carriers eligible, "
            f"persisted={persisted}, email_sent={email_sent}"
        )

        return SubmissionResponse(
            success=True,
            id=submission_id,
            persisted=persisted,
            email_sent=email_sent,
        )

    async def get_submission(self, submission_id: UUID) -> Optional[IntakeSubmission]:
        """Get a stored submission by ID."""
        return await self.submission_repo.get_by_id(submission_id)

    async def list_submissions(
        self,
        skip: int = 0,
        limit: int = 50,
        email: Optional[str] = None,
    ) -> List[IntakeSubmission]:
        """
        List stored submissions, newest first.

        Args:
            skip: Number of records to skip
            limit: Maximum number of records to return
            email: Optional filter on the applicant's email

        Returns:
            List of submissions
        """
        if email:
            return await self.submission_repo.find_by_email(email, skip=skip, limit=limit)
        return await self.submission_repo.list_recent(skip=skip, limit=limit)

    async def count_submissions(self, email: Optional[str] = None) -> int:
        """Count stored submissions, optionally only those made with an email."""
        if email:
            return await self.submission_repo.count_by_email(email)
        return await self.submission_repo.count()

    async def _persist(
        self,
        submission_id: UUID,
        form: IntakeFormInput,
        analysis: IntakeAnalysis,
    ) -> bool:
        """Store the submission; returns False and rolls back on failure."""
        applicant = analysis.applicant
        try:
            await self.submission_repo.create(
                id=submission_id,
                first_name=form.first_name.strip(),
                last_name=form.last_name.strip(),
                email=form.email.strip().lower(),
                phone=form.phone or None,
                state=_clip(applicant.state),
                age=_as_int(applicant.age),
                sex=_clip(applicant.sex),
                bmi=format_number(applicant.bmi) or None,
                annual_income=_as_int(applicant.annual_income),
                coverage=_as_int(applicant.coverage),
                product_type=_clip(applicant.product_label) if applicant.product_type else None,
                intake_data=form.model_dump(mode="json"),
                carrier_analysis=analysis.report,
                carrier_results=[
                    CarrierEvaluationResponse.from_evaluation(e).model_dump(mode="json")
                    for e in analysis.evaluations
                ],
            )
            await self.db.commit()
            return True
        except Exception as e:
            logger.error(
                f"Failed to save intake submission {submission_id}: {str(e)}",
                exc_info=True,
            )
            await self.db.rollback()
            return False
