"""Pydantic schemas for intake submission and carrier analysis."""

from datetime import datetime
from typing import TYPE_CHECKING, Any, Optional, Union
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from carrier_intake.core.enums import EligibilityStatus

if TYPE_CHECKING:
    from carrier_intake.services.rule_engine.engine import CarrierEvaluation

# Form values arrive as strings from the web form and as numbers/booleans
# from JSON clients; the normalizer coerces them.
RawValue = Optional[Union[int, float, str, bool]]


APPLICANT_FIELDS = frozenset(
    {
        "state",
        "age",
        "sex",
        "height_in",
        "weight_lb",
        "annual_income",
        "coverage",
        "product_type",
        "term_years",
        "tobacco_use",
        "tobacco_years",
        "medications",
        "doctor_names",
        "cancer_history_years",
        "heart_event_years",
        "dui_years",
        "felony_years",
        "bankruptcy_years",
        "hazardous_occupation",
        "avocation_risk",
        "travel_high_risk",
        "uncontrolled_diabetes",
        "uncontrolled_hypertension",
        "insulin_dependent",
        "copd",
    }
)


# ==================== Intake Form Schemas ====================


class IntakeFormInput(BaseModel):
    """
    Intake form submission.

    Accepts snake_case keys or the web form's camelCase keys. Only the
    contact fields are validated here; applicant values are passed to the
    normalizer as given.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    # Contact
    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., min_length=3, max_length=320, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: Optional[str] = Field(None, max_length=50)
    state: RawValue = None

    # Applicant
    age: RawValue = None
    sex: RawValue = None
    height_in: RawValue = None
    weight_lb: RawValue = None
    annual_income: RawValue = None
    coverage: RawValue = None
    product_type: RawValue = None
    term_years: RawValue = None
    tobacco_use: RawValue = None
    tobacco_years: RawValue = None
    medications: RawValue = None
    doctor_names: RawValue = None

    # Disclosed history, years since event
    cancer_history_years: RawValue = None
    heart_event_years: RawValue = None
    dui_years: RawValue = None
    felony_years: RawValue = None
    bankruptcy_years: RawValue = None

    # Yes/No risk questions
    hazardous_occupation: RawValue = None
    avocation_risk: RawValue = None
    travel_high_risk: RawValue = None
    uncontrolled_diabetes: RawValue = None
    uncontrolled_hypertension: RawValue = None
    insulin_dependent: RawValue = None
    copd: RawValue = None

    def applicant_values(self) -> dict[str, Any]:
        """Return the applicant fields keyed by snake_case name."""
        return self.model_dump(include=set(APPLICANT_FIELDS))


# ==================== Carrier Analysis Schemas ====================


class CarrierEvaluationResponse(BaseModel):
    """Schema for one carrier's evaluation."""

    carrier_code: str
    carrier_name: str
    status: EligibilityStatus
    status_label: str
    citations: list[str] = []
    flags: list[str] = []
    underwriting_notes: list[str] = []
    document_checklist: list[str] = []

    @classmethod
    def from_evaluation(cls, evaluation: "CarrierEvaluation") -> "CarrierEvaluationResponse":
        return cls(
            carrier_code=evaluation.carrier_code.value,
            carrier_name=evaluation.carrier_name,
            status=evaluation.status,
            status_label=evaluation.status.label,
            citations=list(evaluation.citations),
            flags=list(evaluation.flags),
            underwriting_notes=list(evaluation.underwriting_notes),
            document_checklist=list(evaluation.document_checklist),
        )


class AnalysisResponse(BaseModel):
    """Schema for the analysis of one intake against all carriers."""

    bmi: Optional[float] = None
    eligible_count: int = 0
    carriers: list[CarrierEvaluationResponse] = []
    analysis: str


class SubmissionResponse(BaseModel):
    """Schema for the result of submitting an intake."""

    success: bool
    id: Optional[UUID] = None
    persisted: bool = False
    email_sent: bool = False


# ==================== Stored Submission Schemas ====================


class IntakeSubmissionSummary(BaseModel):
    """Schema for a stored submission in list views."""

    id: UUID
    first_name: str
    last_name: str
    email: str
    state: Optional[str] = None
    product_type: Optional[str] = None
    coverage: Optional[int] = None
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class IntakeSubmissionListResponse(BaseModel):
    """Schema for paginated list of stored submissions."""

    items: list[IntakeSubmissionSummary]
    total: int
    page: int
    page_size: int
    total_pages: int


class IntakeSubmissionResponse(IntakeSubmissionSummary):
    """Schema for a stored submission with its analysis."""

    phone: Optional[str] = None
    age: Optional[int] = None
    sex: Optional[str] = None
    bmi: Optional[str] = None
    annual_income: Optional[int] = None
    intake_data: dict[str, Any] = Field(default_factory=dict)
    carrier_analysis: Optional[str] = None
    carrier_results: Optional[list[dict[str, Any]]] = None
    updated_at: datetime

    model_config = ConfigDict(from_attributes=True)
