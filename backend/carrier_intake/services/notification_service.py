"""Agent notification webhook with exponential backoff retry logic."""

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

from carrier_intake.config import settings
from carrier_intake.core.formatting import format_number, format_usd
from carrier_intake.models.domain.applicant import ApplicantRecord
from carrier_intake.models.schemas.intake import IntakeFormInput
from carrier_intake.services.rule_engine.base import is_known

logger = logging.getLogger(__name__)


HISTORY_LABELS = (
    ("cancer_history_years", "Cancer Treatment"),
    ("heart_event_years", "Heart Event"),
    ("dui_years", "DUI"),
    ("felony_years", "Felony"),
    ("bankruptcy_years", "Bankruptcy"),
)

SAVED_FOOTER = "This intake was submitted via the online form and has been saved to the database."
UNSAVED_FOOTER = (
    "This intake was submitted via the online form but could NOT be saved to the "
    "database; re-enter it from this email."
)


def _yes_no(value: bool) -> str:
    return "Yes" if value else "No"


def render_notification(
    form: IntakeFormInput,
    applicant: ApplicantRecord,
    analysis: str,
    persisted: bool = True,
) -> tuple[str, str]:
    """
    Build the title and markdown body of the agent notification.

    Args:
        form: Submitted intake form, for contact details
        applicant: Normalized applicant
        analysis: Rendered carrier analysis report
        persisted: Whether the submission was stored

    Returns:
        Tuple of (title, content)
    """
    title = f"New Insurance Intake: {form.first_name} {form.last_name}"

    product = applicant.product_label
    if is_known(applicant.term_years) and applicant.term_years:
        product += f" ({format_number(applicant.term_years)} years)"

    tobacco = _yes_no(applicant.tobacco_use)
    if is_known(applicant.tobacco_years) and applicant.tobacco_years:
        tobacco += f" ({format_number(applicant.tobacco_years)} years since last use)"

    history = [
        f"{label}: {format_number(getattr(applicant, field))} years ago"
        for field, label in HISTORY_LABELS
        if getattr(applicant, field) is not None
    ]

    sections = [
        "**Client Information**",
        f"Name: {form.first_name} {form.last_name}",
        f"Email: {form.email}",
        f"Phone: {form.phone or '(not provided)'}",
        f"State: {applicant.state or ''}",
        f"Age: {format_number(applicant.age)}",
        f"Sex: {applicant.sex or ''}",
        "",
        "**Coverage Details**",
        f"Product Type: {product}",
        f"Coverage Amount: {format_usd(applicant.coverage)}",
        f"Annual Income: {format_usd(applicant.annual_income)}",
        "",
        "**Physical Metrics**",
        f"Height: {format_number(applicant.height_in)} inches",
        f"Weight: {format_number(applicant.weight_lb)} lbs",
        f"BMI: {format_number(applicant.bmi)}",
        "",
        "**Health & Risk Factors**",
        f"Tobacco Use: {tobacco}",
        f"Uncontrolled Diabetes: {_yes_no(applicant.uncontrolled_diabetes)}",
        f"Uncontrolled Hypertension: {_yes_no(applicant.uncontrolled_hypertension)}",
        f"Insulin Dependent: {_yes_no(applicant.insulin_dependent)}",
        f"COPD: {_yes_no(applicant.copd)}",
        f"Hazardous Occupation: {_yes_no(applicant.hazardous_occupation)}",
        f"Risky Avocation: {_yes_no(applicant.avocation_risk)}",
        f"High-Risk Travel: {_yes_no(applicant.travel_high_risk)}",
        "",
        "**Medical History**",
        *(history or ["(none disclosed)"]),
        "",
        "**Medications**",
        applicant.medications or "(none listed)",
        "",
        "**Physicians**",
        applicant.doctor_names or "(none listed)",
        "",
        "---",
        "",
        "**CARRIER ELIGIBILITY ANALYSIS**",
        "",
        analysis,
        "---",
        "",
        SAVED_FOOTER if persisted else UNSAVED_FOOTER,
    ]
    return title, "\n".join(sections)


class IntakeNotifier:
    """Client for posting intake notifications to the agent webhook"""

    def __init__(
        self,
        webhook_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.webhook_url = webhook_url if webhook_url is not None else settings.NOTIFICATION_WEBHOOK_URL
        self.timeout = settings.NOTIFICATION_TIMEOUT_SECONDS
        self.max_retries = max(1, settings.NOTIFICATION_MAX_RETRIES)
        self.backoff_base = settings.NOTIFICATION_BACKOFF_BASE
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        return bool(self.webhook_url)

    async def send(self, title: str, content: str) -> bool:
        """
        Post a notification to the webhook with retry logic.

        Retry strategy:
        - Exponential backoff: base, 2×base, 4×base, ...
        - Retries on 5xx responses and network failures
        - 4xx responses are not retried

        Args:
            title: Notification title
            content: Markdown body

        Returns:
            True if the webhook accepted the notification, False otherwise
        """
        if not self.is_configured:
            logger.warning("Notification webhook not configured; skipping agent notification")
            return False

        payload: Dict[str, Any] = {"title": title, "content": content}
        attempt = 0
        async with httpx.AsyncClient(transport=self._transport, timeout=self.timeout) as client:
            while attempt < self.max_retries:
                try:
                    response = await client.post(self.webhook_url, json=payload)
                    response.raise_for_status()
                    logger.info(f"Agent notification delivered: {title}")
                    return True

                except httpx.HTTPStatusError as e:
                    attempt += 1
                    if e.response.status_code < 500:
                        logger.error(
                            f"Notification rejected with status {e.response.status_code}: {title}"
                        )
                        return False
                    logger.warning(
                        f"Notification attempt {attempt}/{self.max_retries} failed "
                        f"with status {e.response.status_code}"
                    )

                except httpx.RequestError as e:
                    attempt += 1
                    logger.warning(
                        f"Notification attempt {attempt}/{self.max_retries} failed: {str(e)}"
                    )

                if attempt < self.max_retries:
                    backoff = self.backoff_base * (2 ** (attempt - 1))
                    await asyncio.sleep(backoff)

        logger.error(f"Failed to send intake notification after {self.max_retries} attempts: {title}")
        return False
