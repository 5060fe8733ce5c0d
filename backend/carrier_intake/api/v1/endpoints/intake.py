"""Intake analysis and submission endpoints."""

import logging
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query, status
from sqlalchemy.ext.asyncio import AsyncSession

from carrier_intake.deps import get_notifier, get_rule_engine, get_session
from carrier_intake.models.schemas.intake import (
    AnalysisResponse,
    IntakeFormInput,
    IntakeSubmissionListResponse,
    IntakeSubmissionResponse,
    IntakeSubmissionSummary,
    SubmissionResponse,
)
from carrier_intake.services.intake_service import IntakeService, analyze_intake
from carrier_intake.services.notification_service import IntakeNotifier
from carrier_intake.services.rule_engine import RuleEngine

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/analyze",
    response_model=AnalysisResponse,
    summary="Analyze an intake",
    description="Evaluate an intake against every configured carrier without storing it",
)
async def analyze(
    form: IntakeFormInput,
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
) -> AnalysisResponse:
    """
    Run the carrier analysis for an intake.

    Returns per-carrier status, citations, flags, notes and the document
    checklist, plus the rendered agent report. Nothing is persisted.
    """
    return analyze_intake(engine, form.applicant_values()).to_response()


@router.post(
    "/submit",
    response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Submit an intake",
    description="Analyze an intake, store it and notify the agent",
)
async def submit(
    form: IntakeFormInput,
    db: Annotated[AsyncSession, Depends(get_session)],
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
    notifier: Annotated[IntakeNotifier, Depends(get_notifier)],
) -> SubmissionResponse:
    """
    Submit an intake.

    Storage and notification failures are reported in the response
    (``persisted`` / ``email_sent``) rather than failing the request.
    """
    service = IntakeService(db, engine, notifier)
    return await service.submit(form)


@router.get(
    "/submissions/{submission_id}",
    response_model=IntakeSubmissionResponse,
    summary="Get submission by ID",
    description="Retrieve a stored intake submission with its carrier analysis",
)
async def get_submission(
    submission_id: UUID,
    db: Annotated[AsyncSession, Depends(get_session)],
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
    notifier: Annotated[IntakeNotifier, Depends(get_notifier)],
) -> IntakeSubmissionResponse:
    service = IntakeService(db, engine, notifier)
    submission = await service.get_submission(submission_id)

    if not submission:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Submission with ID {submission_id} not found",
        )

    return IntakeSubmissionResponse.model_validate(submission)


@router.get(
    "/submissions",
    response_model=IntakeSubmissionListResponse,
    summary="List submissions",
    description="Retrieve stored intake submissions, newest first",
)
async def list_submissions(
    db: Annotated[AsyncSession, Depends(get_session)],
    engine: Annotated[RuleEngine, Depends(get_rule_engine)],
    notifier: Annotated[IntakeNotifier, Depends(get_notifier)],
    page: Annotated[int, Query(ge=1, description="Page number (1-indexed)")] = 1,
    page_size: Annotated[
        int, Query(ge=1, le=100, description="Number of items per page")
    ] = 20,
    email: Annotated[Optional[str], Query(description="Filter by applicant email")] = None,
) -> IntakeSubmissionListResponse:
    service = IntakeService(db, engine, notifier)
    submissions = await service.list_submissions(
        skip=(page - 1) * page_size,
        limit=page_size,
        email=email,
    )
    total = await service.count_submissions(email=email)

    # Calculate total pages
    total_pages = (total + page_size - 1) // page_size if total > 0 else 1

    return IntakeSubmissionListResponse(
        items=[IntakeSubmissionSummary.model_validate(s) for s in submissions],
        total=total,
        page=page,
        page_size=page_size,
        total_pages=total_pages,
    )
