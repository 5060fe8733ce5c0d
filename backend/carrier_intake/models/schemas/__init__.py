"""Pydantic schemas for API validation and serialization."""

from carrier_intake.models.schemas.carrier import CarrierResponse
from carrier_intake.models.schemas.intake import (
    AnalysisResponse,
    CarrierEvaluationResponse,
    IntakeFormInput,
    IntakeSubmissionListResponse,
    IntakeSubmissionResponse,
    IntakeSubmissionSummary,
    SubmissionResponse,
)

__all__ = [
    # Carrier schemas
    "CarrierResponse",
    # Intake schemas
    "IntakeFormInput",
    "AnalysisResponse",
    "CarrierEvaluationResponse",
    "SubmissionResponse",
    "IntakeSubmissionListResponse",
    "IntakeSubmissionSummary",
    "IntakeSubmissionResponse",
]
