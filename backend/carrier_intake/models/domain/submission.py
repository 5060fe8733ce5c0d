"""Intake submission domain model for stored applicant intakes."""

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from carrier_intake.db.base import BaseModel

# Free-text applicant answers stored alongside the raw intake
ANSWER_MAX_LENGTH = 255


class IntakeSubmission(BaseModel):
    """Submitted intake with the carrier analysis generated for it."""

    __tablename__ = "intake_submissions"

    # Contact
    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False, index=True)
    phone: Mapped[Optional[str]] = mapped_column(String(50), nullable=True)
    state: Mapped[Optional[str]] = mapped_column(String(ANSWER_MAX_LENGTH), nullable=True)

    # Applicant
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    sex: Mapped[Optional[str]] = mapped_column(String(ANSWER_MAX_LENGTH), nullable=True)
    bmi: Mapped[Optional[str]] = mapped_column(String(10), nullable=True)
    annual_income: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    coverage: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    product_type: Mapped[Optional[str]] = mapped_column(String(ANSWER_MAX_LENGTH), nullable=True)

    # Raw form values as submitted
    intake_data: Mapped[dict] = mapped_column(JSONB, nullable=False, default=dict)

    # Carrier analysis
    carrier_analysis: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    carrier_results: Mapped[Optional[list]] = mapped_column(JSONB, nullable=True)

    @property
    def full_name(self) -> str:
        """Return full name of the applicant."""
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        return (
            f"<IntakeSubmission(id={self.id}, name={self.full_name!r}, "
            f"product={self.product_type!r}, coverage={self.coverage})>"
        )
