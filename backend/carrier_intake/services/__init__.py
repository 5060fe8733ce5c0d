"""Service layer for business logic."""

from carrier_intake.services.intake_service import IntakeAnalysis, IntakeService, analyze_intake
from carrier_intake.services.normalizer import normalize_applicant
from carrier_intake.services.notification_service import IntakeNotifier, render_notification
from carrier_intake.services.report_renderer import ReportRenderer

__all__ = [
    "IntakeAnalysis",
    "IntakeNotifier",
    "IntakeService",
    "ReportRenderer",
    "analyze_intake",
    "normalize_applicant",
    "render_notification",
]
