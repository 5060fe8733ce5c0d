"""Domain models for the application."""

from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.models.domain.carrier import CarrierRule, GuidelineSections
from carrier_intake.models.domain.submission import IntakeSubmission

__all__ = [
    "ApplicantRecord",
    "CarrierRule",
    "GuidelineSections",
    "IntakeSubmission",
]
